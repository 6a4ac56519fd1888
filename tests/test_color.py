"""Unit tests for CSS color values."""

from __future__ import annotations

import pytest

from html_decorations.color import RED, YELLOW, Color, ColorError


def test_css_value_uses_explicit_alpha() -> None:
    """An explicit alpha overrides the color's own opacity."""
    actual = YELLOW.css_value(alpha=0.3)
    assert actual == "rgba(255,255,0,0.3)", f"unexpected css value {actual!r}"


def test_css_value_defaults_to_own_alpha() -> None:
    """Without an override the color prints its own alpha."""
    assert RED.css_value() == "rgba(255,0,0,1.0)"
    assert Color(0, 0, 255, 0.5).css_value() == "rgba(0,0,255,0.5)"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#ff0", Color(255, 255, 0)),
        ("#FFFF00", Color(255, 255, 0)),
        ("00ff00", Color(0, 255, 0)),
        ("#ff000080", Color(255, 0, 0, 0.502)),
    ],
)
def test_from_hex_accepts_short_long_and_alpha_forms(
    text: str, expected: Color
) -> None:
    """Hex notation parses with or without the leading hash."""
    assert Color.from_hex(text) == expected, f"failed to parse {text!r}"


def test_parse_accepts_names_and_colors() -> None:
    """Named colors resolve case-insensitively and Colors pass through."""
    assert Color.parse("Yellow") is YELLOW
    custom = Color(1, 2, 3)
    assert Color.parse(custom) is custom


@pytest.mark.parametrize("value", ["mauve-ish", "#12", "#ggg"])
def test_parse_rejects_unknown_values(value: str) -> None:
    """Unknown names and malformed hex raise ColorError."""
    with pytest.raises(ColorError):
        Color.parse(value)


def test_channels_and_alpha_are_range_checked() -> None:
    """Out-of-range channels or alpha are rejected at construction."""
    with pytest.raises(ColorError):
        Color(256, 0, 0)
    with pytest.raises(ColorError):
        Color(0, 0, 0, 1.5)
    with pytest.raises(ColorError):
        YELLOW.css_value(alpha=-0.1)
