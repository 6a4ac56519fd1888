"""Unit tests for the style registry."""

from __future__ import annotations

import pytest

from html_decorations.allocator import ClassNameAllocator
from html_decorations.color import BLUE
from html_decorations.config import TemplateSettings
from html_decorations.config.models import HighlightSettings
from html_decorations.models import (
    Decoration,
    DecorationStyle,
    Layout,
    UnknownStyleError,
    Width,
)
from html_decorations.registry import StyleRegistry
from html_decorations.template import HtmlDecorationTemplate


@pytest.fixture
def registry() -> StyleRegistry:
    """Return the default registry built from a fresh allocator."""
    return StyleRegistry.defaults(allocator=ClassNameAllocator())


def test_defaults_hold_builtin_styles(registry: StyleRegistry) -> None:
    """Only the built-in style ids are registered, in order."""
    assert list(registry) == ["highlight", "note"]
    assert len(registry) == 2


def test_lookup_miss_is_surfaced(registry: StyleRegistry) -> None:
    """Unregistered style ids return None from get and raise on indexing."""
    decoration = Decoration("u1", DecorationStyle("underline"))
    assert registry.get("underline") is None
    assert registry.template_for(decoration) is None
    assert "underline" not in registry
    with pytest.raises(UnknownStyleError, match="underline"):
        registry.render(decoration)
    with pytest.raises(KeyError):
        registry["underline"]


def test_render_dispatches_on_style_id(registry: StyleRegistry) -> None:
    """Rendering uses the template registered for the decoration's style."""
    markup = registry.render(
        Decoration("h1", DecorationStyle.highlight(BLUE, is_active=True))
    )
    assert markup == (
        '<div class="readium-highlight-1" '
        'style="background-color: rgba(0,0,255,0.3) !important;"/>'
    )


def test_stylesheet_concatenates_non_null_sheets(registry: StyleRegistry) -> None:
    """The aggregate CSS joins every stylesheet and skips inline-only ones."""
    extended = registry.with_template(
        "underline", HtmlDecorationTemplate.static(Layout.BOXES)
    )
    expected = "\n".join(
        [registry["highlight"].stylesheet or "", registry["note"].stylesheet or ""]
    )
    assert extended.stylesheet == expected
    assert ".readium-highlight-1 {" in expected
    assert "[dir=rtl] .readium-sidemark-2 {" in expected


def test_with_template_returns_new_registry(registry: StyleRegistry) -> None:
    """Overriding an entry leaves the original registry untouched."""
    replacement = HtmlDecorationTemplate.static(
        Layout.BOUNDS, Width.BOUNDS, element="<mark/>"
    )
    updated = registry.with_template("highlight", replacement)
    assert updated["highlight"] is replacement
    assert registry["highlight"] is not replacement
    assert list(updated) == ["highlight", "note"]


def test_to_json_describes_every_entry(registry: StyleRegistry) -> None:
    """Bridge records expose layout and width for each style."""
    records = registry.to_json()
    assert records["highlight"]["layout"] == "boxes"
    assert records["highlight"]["width"] == "wrap"
    assert records["note"]["width"] == "page"
    assert records["note"]["stylesheet"] == registry["note"].stylesheet


def test_from_settings_applies_highlight_look() -> None:
    """Settings flow into the built-in templates."""
    settings = TemplateSettings(
        default_tint=BLUE, highlight=HighlightSettings(alpha=0.5, corner_radius=7)
    )
    registry = StyleRegistry.from_settings(settings, allocator=ClassNameAllocator())
    markup = registry.render(
        Decoration("h1", DecorationStyle.highlight(is_active=True))
    )
    assert "rgba(0,0,255,0.5)" in markup
    assert "border-radius: 7px;" in (registry["highlight"].stylesheet or "")
