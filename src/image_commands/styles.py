"""Layer styles and render configuration for the ImageMagick commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Tuple

DEFAULT_BINARY = "convert"
DEFAULT_FONT_PATH = Path("/usr/share/fonts/opentype/noto/NotoSansCJK-Bold.ttc")


@dataclass(frozen=True)
class LayerStyle:
    """Styling for one text layer, positioned relative to the gravity anchor."""

    point_size: int
    fill: str
    stroke: str
    stroke_width: int
    position: Tuple[int, int]
    interline_spacing: int | None = None

    def with_overrides(self, *, point_size: int | None = None, fill: str | None = None) -> "LayerStyle":
        """Return a copy using the given size/color, keeping defaults for blanks."""

        return replace(
            self,
            point_size=self.point_size if point_size is None else point_size,
            fill=fill or self.fill,
        )


@dataclass(frozen=True)
class EmbedStyle:
    width: int
    height: int
    position: Tuple[int, int]

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"


HEADER_STYLE = LayerStyle(
    point_size=120,
    fill="#111111",
    stroke="#cccccc",
    stroke_width=20,
    position=(-520, 172),
)
TITLE_STYLE = LayerStyle(
    point_size=180,
    fill="#ffb347",
    stroke="#40210f",
    stroke_width=26,
    position=(-520, 320),
    interline_spacing=-30,
)
CAPTION_STYLE = LayerStyle(
    point_size=80,
    fill="#000000",
    stroke="#cccccc",
    stroke_width=20,
    position=(-520, 1888),
)
EMBED_STYLE = EmbedStyle(width=720, height=405, position=(-260, 538))


@dataclass(frozen=True)
class RenderConfig:
    """Everything the command builders need besides the request itself."""

    binary: str = DEFAULT_BINARY
    font_path: Path = DEFAULT_FONT_PATH
    gravity: str = "North"
    width: int = 1920
    height: int = 1080
    resize_filter: str = "Lanczos"
    header: LayerStyle = field(default=HEADER_STYLE)
    title: LayerStyle = field(default=TITLE_STYLE)
    caption: LayerStyle = field(default=CAPTION_STYLE)
    embed: EmbedStyle = field(default=EMBED_STYLE)

    @property
    def resolution(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Build the default config, honouring TEXT_ON_IMAGE_* overrides."""

        return cls(
            binary=os.environ.get("TEXT_ON_IMAGE_BINARY") or DEFAULT_BINARY,
            font_path=Path(os.environ.get("TEXT_ON_IMAGE_FONT") or DEFAULT_FONT_PATH),
        )
