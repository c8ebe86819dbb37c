"""Build the ImageMagick command that pastes a thumbnail onto the output."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .geometry import format_offset
from .styles import RenderConfig


def build_embed_command(output: Path, embed: Path, config: RenderConfig) -> List[str]:
    """Resize ``embed`` into the configured box and composite it over ``output``.

    The command reads and rewrites ``output`` in place, so it must only run
    after the overlay step has finished writing it.
    """

    style = config.embed
    return [
        config.binary,
        str(output),
        "(",
        str(embed),
        "-filter", config.resize_filter,
        "-resize", style.geometry,
        ")",
        "-gravity", config.gravity,
        "-geometry", format_offset(*style.position),
        "-compose", "over",
        "-composite",
        str(output),
    ]
