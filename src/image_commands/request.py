"""Render requests and per-layer option resolution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, NamedTuple

from .geometry import shifted
from .styles import LayerStyle, RenderConfig


@dataclass(frozen=True)
class RenderRequest:
    """One invocation's inputs, as read from the command line."""

    background: Path
    output: Path = Path("output.png")
    header: str | None = None
    title: str | None = None
    caption: str | None = None
    embed: Path | None = None
    header_size: int | None = None
    header_color: str | None = None
    title_size: int | None = None
    title_color: str | None = None
    title_offset_y: int = 0
    caption_size: int | None = None
    caption_color: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.header or self.title or self.caption or self.embed)


class TextLayer(NamedTuple):
    name: str
    text: str
    style: LayerStyle


def resolve_layers(request: RenderRequest, config: RenderConfig) -> List[TextLayer]:
    """Return the present text layers in draw order (header, title, caption).

    Missing sizes and colors fall back to the configured defaults. Values are
    not validated; ImageMagick reports anything it cannot parse.
    """

    layers: List[TextLayer] = []

    if request.header:
        style = config.header.with_overrides(point_size=request.header_size, fill=request.header_color)
        layers.append(TextLayer("header", request.header, style))

    if request.title:
        style = config.title.with_overrides(point_size=request.title_size, fill=request.title_color)
        style = replace(style, position=shifted(style.position, request.title_offset_y or 0))
        layers.append(TextLayer("title", request.title, style))

    if request.caption:
        style = config.caption.with_overrides(point_size=request.caption_size, fill=request.caption_color)
        layers.append(TextLayer("caption", request.caption, style))

    return layers
