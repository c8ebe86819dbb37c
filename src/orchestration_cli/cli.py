"""CLI entry point for text-on-image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from image_commands import RenderConfig, RenderRequest
from image_commands.styles import CAPTION_STYLE, HEADER_STYLE, TITLE_STYLE
from . import __version__
from .pipeline import render
from .runner import RunnerError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-on-image",
        description="Lay out text (and an optional thumbnail) on an image with ImageMagick",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-i", "--image", required=True, type=Path, help="Background image path")

    text = parser.add_argument_group("text")
    text.add_argument("-t", "--title", help="Main title (centre)")
    text.add_argument("--header", help="Header text (top)")
    text.add_argument("--thumb-caption", dest="caption", help="Caption text (bottom)")

    style = parser.add_argument_group("style")
    style.add_argument(
        "--header-size", type=int, default=None, help=f"Header point size (default: {HEADER_STYLE.point_size})"
    )
    style.add_argument("--header-color", default=None, help=f"Header fill color (default: {HEADER_STYLE.fill})")
    style.add_argument(
        "--title-size", type=int, default=None, help=f"Title point size (default: {TITLE_STYLE.point_size})"
    )
    style.add_argument("--title-color", default=None, help=f"Title fill color (default: {TITLE_STYLE.fill})")
    style.add_argument(
        "--title-offset-y", type=int, default=0, help="Move the title down (positive) or up (negative)"
    )
    style.add_argument(
        "--caption-size", type=int, default=None, help=f"Caption point size (default: {CAPTION_STYLE.point_size})"
    )
    style.add_argument("--caption-color", default=None, help=f"Caption fill color (default: {CAPTION_STYLE.fill})")

    parser.add_argument("--embed-thumb", default=None, help="Image to embed on the right-hand side")
    parser.add_argument("-o", "--output", type=Path, default=Path("output.png"), help="Output file")
    parser.add_argument("--dry-run", action="store_true", help="Print the commands; do not run ImageMagick")
    return parser


def request_from_args(args: argparse.Namespace) -> RenderRequest:
    return RenderRequest(
        background=args.image,
        output=args.output,
        header=args.header,
        title=args.title,
        caption=args.caption,
        embed=Path(args.embed_thumb) if args.embed_thumb else None,
        header_size=args.header_size,
        header_color=args.header_color,
        title_size=args.title_size,
        title_color=args.title_color,
        title_offset_y=args.title_offset_y,
        caption_size=args.caption_size,
        caption_color=args.caption_color,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    request = request_from_args(args)

    try:
        render(request, RenderConfig.from_env(), dry_run=args.dry_run)
    except RunnerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
