"""Build the ImageMagick command that draws the text layers."""

from __future__ import annotations

import sys
from typing import List

from .geometry import format_offset
from .request import RenderRequest, TextLayer, resolve_layers
from .styles import RenderConfig


def font_args(config: RenderConfig) -> List[str]:
    """Return ``-font <path>`` when the configured font exists, else nothing."""

    if config.font_path.exists():
        return ["-font", str(config.font_path)]
    print(
        f"[overlay] warning (MissingFont): font not found ({config.font_path}); using the system default",
        file=sys.stderr,
    )
    return []


def layer_args(layer: TextLayer, font: List[str]) -> List[str]:
    """Arguments for one text layer.

    The text is annotated twice: first with the stroke to draw the outline,
    then again at stroke width 0 so the fill sits cleanly on top of it.
    """

    style = layer.style
    pos = format_offset(*style.position)
    args = [
        *font,
        "-pointsize", str(style.point_size),
        "-fill", style.fill,
        "-stroke", style.stroke,
        "-strokewidth", str(style.stroke_width),
    ]
    if style.interline_spacing is not None:
        args += ["-interline-spacing", str(style.interline_spacing)]
    args += [
        "-annotate", pos, layer.text,
        "-strokewidth", "0",
        "-annotate", pos, layer.text,
    ]
    return args


def build_overlay_command(request: RenderRequest, config: RenderConfig) -> List[str]:
    """Compose the text layers onto the background and resize to the target."""

    cmd = [config.binary, str(request.background), "-gravity", config.gravity]

    layers = resolve_layers(request, config)
    if layers:
        font = font_args(config)
        for layer in layers:
            cmd += layer_args(layer, font)

    cmd += [
        "-filter", config.resize_filter,
        "-resize", config.resolution,
        str(request.output),
    ]
    return cmd
