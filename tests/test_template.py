"""Unit tests for ``HtmlDecorationTemplate`` values and their records."""

from __future__ import annotations

import json

import pytest

from html_decorations.config import TemplateConfigError
from html_decorations.models import Decoration, DecorationStyle, Layout, Width
from html_decorations.template import HtmlDecorationTemplate


def test_default_element_is_empty_div() -> None:
    """Templates built without a renderer emit a bare ``<div/>``."""
    template = HtmlDecorationTemplate(layout=Layout.BOUNDS)
    assert template.width is Width.WRAP
    assert template.stylesheet is None
    assert template.render(Decoration("d1", DecorationStyle("custom"))) == "<div/>"


def test_static_template_ignores_decoration() -> None:
    """Static templates return their fixed markup for every decoration."""
    template = HtmlDecorationTemplate.static(
        Layout.BOUNDS, Width.VIEWPORT, element='<span class="x"/>'
    )
    first = template.render(Decoration("a", DecorationStyle("custom", {"k": 1})))
    second = template.render(Decoration("b", DecorationStyle("other")))
    assert first == second == '<span class="x"/>'


def test_renderer_receives_captured_options() -> None:
    """Custom renderers get the template options alongside the decoration."""

    def _render(decoration: Decoration, options: dict[str, str]) -> str:
        return f'<div data-id="{decoration.id}" data-tone="{options["tone"]}"/>'

    template = HtmlDecorationTemplate(
        layout=Layout.BOXES, element=_render, options={"tone": "warm"}
    )
    markup = template.render(Decoration("d7", DecorationStyle("custom")))
    assert markup == '<div data-id="d7" data-tone="warm"/>'


def test_json_record_omits_renderer_and_round_trips() -> None:
    """The record carries layout, width and stylesheet only."""
    template = HtmlDecorationTemplate(
        layout=Layout.BOXES,
        width=Width.PAGE,
        element=lambda _d, _o: "<p/>",
        stylesheet=".x { color: red; }",
    )
    record = template.to_json()
    assert record == {
        "layout": "boxes",
        "width": "page",
        "stylesheet": ".x { color: red; }",
    }
    restored = HtmlDecorationTemplate.from_json(json.loads(json.dumps(record)))
    assert restored.layout is Layout.BOXES
    assert restored.width is Width.PAGE
    assert restored.stylesheet == template.stylesheet
    assert restored.to_json() == record


@pytest.mark.parametrize(
    "payload",
    [
        {"width": "wrap"},
        {"layout": "grid"},
        {"layout": "boxes", "width": "screen"},
        {"layout": "boxes", "stylesheet": 3},
    ],
)
def test_from_json_rejects_invalid_records(payload: dict[str, object]) -> None:
    """Unknown enum values and malformed records raise TemplateConfigError."""
    with pytest.raises(TemplateConfigError):
        HtmlDecorationTemplate.from_json(payload)


def test_string_layout_and_width_are_coerced() -> None:
    """Plain strings become enum members so records serialize."""
    template = HtmlDecorationTemplate(layout="boxes", width="viewport")  # type: ignore[arg-type]
    assert template.layout is Layout.BOXES
    assert template.width is Width.VIEWPORT
    assert template.to_json() == {
        "layout": "boxes",
        "width": "viewport",
        "stylesheet": None,
    }


def test_unknown_layout_string_is_rejected() -> None:
    """Layouts outside the enum fail at construction."""
    with pytest.raises(ValueError, match="grid"):
        HtmlDecorationTemplate(layout="grid")  # type: ignore[arg-type]
