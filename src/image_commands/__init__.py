"""Package for building the ImageMagick overlay and embed commands."""

from .embed import build_embed_command
from .geometry import format_offset
from .overlay import build_overlay_command
from .request import RenderRequest, resolve_layers
from .styles import EmbedStyle, LayerStyle, RenderConfig

__all__ = [
    "build_embed_command",
    "build_overlay_command",
    "format_offset",
    "resolve_layers",
    "EmbedStyle",
    "LayerStyle",
    "RenderConfig",
    "RenderRequest",
]
