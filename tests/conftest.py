"""Shared pytest fixtures for text-on-image tests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import pytest

from image_commands import RenderConfig, RenderRequest
from orchestration_cli.runner import CommandFailed


class FakeRunner:
    """Records every argv; fails with ``fail_with`` on the chosen call."""

    def __init__(self, fail_on: int | None = None, fail_with: int = 1) -> None:
        self.calls: List[List[str]] = []
        self.fail_on = fail_on
        self.fail_with = fail_with

    def __call__(self, argv: Sequence[str]) -> None:
        self.calls.append(list(argv))
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise CommandFailed(argv, self.fail_with)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    path = tmp_path / "font.ttc"
    path.write_bytes(b"")
    return path


@pytest.fixture
def config(font_file: Path) -> RenderConfig:
    """Default config pointing at a font that exists."""
    return RenderConfig(font_path=font_file)


@pytest.fixture
def missing_font_config(tmp_path: Path) -> RenderConfig:
    return RenderConfig(font_path=tmp_path / "missing.ttc")


@pytest.fixture
def background(tmp_path: Path) -> Path:
    path = tmp_path / "bg.png"
    path.write_bytes(b"")
    return path


@pytest.fixture
def make_request(background: Path, tmp_path: Path):
    def _make(**kwargs) -> RenderRequest:
        kwargs.setdefault("output", tmp_path / "out.png")
        return RenderRequest(background=background, **kwargs)

    return _make
