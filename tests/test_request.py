"""Tests for option resolution and configuration."""

from pathlib import Path

import pytest

from image_commands import RenderConfig, resolve_layers
from image_commands.styles import DEFAULT_BINARY, DEFAULT_FONT_PATH, HEADER_STYLE, TITLE_STYLE


def test_no_text_means_no_layers(make_request, config: RenderConfig) -> None:
    assert resolve_layers(make_request(), config) == []


def test_layers_in_fixed_order(make_request, config: RenderConfig) -> None:
    request = make_request(caption="c", title="t", header="h")
    assert [layer.name for layer in resolve_layers(request, config)] == ["header", "title", "caption"]


def test_empty_text_is_skipped(make_request, config: RenderConfig) -> None:
    request = make_request(header="", title="t")
    assert [layer.name for layer in resolve_layers(request, config)] == ["title"]


def test_defaults_used_when_not_overridden(make_request, config: RenderConfig) -> None:
    (layer,) = resolve_layers(make_request(header="Hello"), config)
    assert layer.style == HEADER_STYLE


def test_overrides_replace_size_and_fill_only(make_request, config: RenderConfig) -> None:
    request = make_request(header="Hello", header_size=99, header_color="red")
    (layer,) = resolve_layers(request, config)
    assert layer.style.point_size == 99
    assert layer.style.fill == "red"
    assert layer.style.stroke == HEADER_STYLE.stroke
    assert layer.style.position == HEADER_STYLE.position


def test_empty_color_falls_back_to_default(make_request, config: RenderConfig) -> None:
    (layer,) = resolve_layers(make_request(caption="x", caption_color=""), config)
    assert layer.style.fill == config.caption.fill


def test_title_offset_moves_y(make_request, config: RenderConfig) -> None:
    (layer,) = resolve_layers(make_request(title="T", title_offset_y=50), config)
    assert layer.style.position == (TITLE_STYLE.position[0], 370)


def test_unvalidated_values_pass_through(make_request, config: RenderConfig) -> None:
    (layer,) = resolve_layers(make_request(title="T", title_color="not-a-color", title_size=-4), config)
    assert layer.style.fill == "not-a-color"
    assert layer.style.point_size == -4


def test_request_is_empty(make_request, tmp_path: Path) -> None:
    assert make_request().is_empty
    assert not make_request(embed=tmp_path / "thumb.png").is_empty
    assert not make_request(caption="c").is_empty


def test_config_is_immutable() -> None:
    with pytest.raises(AttributeError):
        RenderConfig().binary = "magick"  # type: ignore[misc]


def test_config_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEXT_ON_IMAGE_BINARY", raising=False)
    monkeypatch.delenv("TEXT_ON_IMAGE_FONT", raising=False)
    config = RenderConfig.from_env()
    assert config.binary == DEFAULT_BINARY
    assert config.font_path == DEFAULT_FONT_PATH
    assert config.resolution == "1920x1080"


def test_config_from_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEXT_ON_IMAGE_BINARY", "magick")
    monkeypatch.setenv("TEXT_ON_IMAGE_FONT", str(tmp_path / "f.ttf"))
    config = RenderConfig.from_env()
    assert config.binary == "magick"
    assert config.font_path == tmp_path / "f.ttf"
