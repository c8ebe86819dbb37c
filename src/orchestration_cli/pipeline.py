"""Overlay -> embed pipeline around the ImageMagick commands."""

from __future__ import annotations

import enum
import shlex
import sys
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

from PIL import Image

from image_commands import RenderConfig, RenderRequest, build_embed_command, build_overlay_command
from .runner import RunnerError, run_command

Runner = Callable[[Sequence[str]], None]


class RenderState(enum.Enum):
    INIT = "init"
    OVERLAY_RUNNING = "overlay_running"
    EMBED_RUNNING = "embed_running"
    DONE = "done"
    FAILED = "failed"


def _image_size(path: Path) -> Tuple[int, int] | None:
    try:
        with Image.open(path) as img:
            return img.size
    except OSError:
        return None


class RenderPipeline:
    """Run the text overlay, then the optional thumbnail embed.

    Both steps write ``request.output``; the embed step rewrites the overlay
    result in place, so the steps always run one after the other. ``state``
    tracks progress and ends as DONE or FAILED. Runner errors are re-raised
    after the state is set to FAILED.
    """

    def __init__(
        self,
        request: RenderRequest,
        config: RenderConfig,
        *,
        runner: Runner = run_command,
        dry_run: bool = False,
    ) -> None:
        self.request = request
        self.config = config
        self.runner = runner
        self.dry_run = dry_run
        self.state = RenderState.INIT
        self.commands: List[List[str]] = []

    def run(self) -> Path:
        request = self.request
        print(f"[render] background: {request.background}")
        if request.is_empty:
            print(
                "[render] warning: no text or embed image given; only resizing the background",
                file=sys.stderr,
            )

        overlay = build_overlay_command(request, self.config)
        self._step(RenderState.OVERLAY_RUNNING, overlay)

        if request.embed:
            if request.embed.is_file():
                print(f"[embed] embedding {request.embed}")
                embed = build_embed_command(request.output, request.embed, self.config)
                self._step(RenderState.EMBED_RUNNING, embed)
            else:
                print(
                    f"[embed] warning (MissingEmbedImage): embed image not found: {request.embed}",
                    file=sys.stderr,
                )

        self.state = RenderState.DONE
        self._report()
        return request.output

    def _step(self, state: RenderState, argv: List[str]) -> None:
        self.state = state
        self.commands.append(argv)
        if self.dry_run:
            print(f"[dry-run] {shlex.join(argv)}")
            return
        try:
            self.runner(argv)
        except RunnerError:
            self.state = RenderState.FAILED
            raise

    def _report(self) -> None:
        output = self.request.output
        if self.dry_run:
            print(f"[render] dry run complete; would write {output}")
            return
        size = _image_size(output)
        if size:
            print(f"[render] done -> {output} ({size[0]}x{size[1]})")
        else:
            print(f"[render] done -> {output}")


def render(
    request: RenderRequest,
    config: RenderConfig | None = None,
    *,
    runner: Runner = run_command,
    dry_run: bool = False,
) -> Path:
    """Render ``request`` and return the output path."""

    pipeline = RenderPipeline(request, config or RenderConfig.from_env(), runner=runner, dry_run=dry_run)
    return pipeline.run()
