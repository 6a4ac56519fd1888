"""Tests for the ``decorations`` command-line entry points."""

from __future__ import annotations

import json
import typing as typ

import pytest

from html_decorations import cli
from html_decorations.allocator import ClassNameAllocator

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def _isolated_allocator(mocker: MockerFixture) -> None:
    """Number class names from one so CLI output is predictable."""
    mocker.patch("html_decorations.styles.DEFAULT_ALLOCATOR", ClassNameAllocator())


def test_stylesheet_prints_aggregate_css(capsys: pytest.CaptureFixture[str]) -> None:
    """The stylesheet command prints both built-in rules."""
    cli.stylesheet()
    out = capsys.readouterr().out
    assert ".readium-highlight-1 {" in out
    assert "[dir=rtl] .readium-sidemark-2 {" in out


def test_templates_prints_bridge_records(capsys: pytest.CaptureFixture[str]) -> None:
    """The templates command prints JSON records keyed by style id."""
    cli.templates()
    records = json.loads(capsys.readouterr().out)
    assert sorted(records) == ["highlight", "note"]
    assert records["note"] == {
        "layout": "boxes",
        "width": "page",
        "stylesheet": records["note"]["stylesheet"],
    }


def test_render_uses_settings_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Rendering honours the tint override and the configured alpha."""
    config = tmp_path / "decorations.yaml"
    config.write_text("highlight:\n  alpha: 0.6\n", encoding="utf-8")
    cli.render(style="highlight", tint="blue", config=config)
    out = capsys.readouterr().out.strip()
    assert out == (
        '<div class="readium-highlight-1" '
        'style="background-color: rgba(0,0,255,0.6) !important;"/>'
    )


def test_render_inactive_note(capsys: pytest.CaptureFixture[str]) -> None:
    """Notes render their marker even when inactive."""
    cli.render(style="note", active=False)
    out = capsys.readouterr().out
    assert 'class="readium-sidemark-2"' in out
    assert "rgba(255,255,0,1.0)" in out


def test_render_rejects_unknown_style() -> None:
    """Only the built-in style ids can be rendered from the CLI."""
    with pytest.raises(ValueError, match="Unknown style"):
        cli.render(style="underline")
