"""Render reader decorations into HTML elements and scoped stylesheets.

Hosts that overlay highlights and margin notes on a paginated or scrollable
content view look up the template for a decoration's style, render its markup,
and inject the aggregate stylesheet once per view. Geometry, overlay lifecycle
and interaction stay with the host.

Exports
-------
- ``StyleRegistry``: immutable style id to template mapping.
- ``HtmlDecorationTemplate``: layout/width policy plus markup renderer.
- ``default_templates``, ``highlight_template``, ``note_template``: builders
  for the built-in styles.
- ``ClassNameAllocator``: source of collision-free CSS class names.

Examples
--------
>>> from html_decorations import Decoration, DecorationStyle, StyleRegistry
>>> registry = StyleRegistry.defaults()
>>> registry["highlight"].to_json()["layout"]
'boxes'
>>> "[dir=rtl]" in registry.stylesheet
True
"""

from __future__ import annotations

from .allocator import DEFAULT_ALLOCATOR, ClassNameAllocator
from .color import Color, ColorError
from .config import TemplateConfigError, TemplateSettings, load_template_settings
from .models import (
    Decoration,
    DecorationConfigError,
    DecorationError,
    DecorationStyle,
    EdgeInsets,
    HighlightConfig,
    Layout,
    NoteConfig,
    UnknownStyleError,
    Width,
)
from .registry import StyleRegistry
from .styles import default_templates, highlight_template, note_template
from .template import HtmlDecorationTemplate

__all__ = [
    "DEFAULT_ALLOCATOR",
    "ClassNameAllocator",
    "Color",
    "ColorError",
    "Decoration",
    "DecorationConfigError",
    "DecorationError",
    "DecorationStyle",
    "EdgeInsets",
    "HighlightConfig",
    "HtmlDecorationTemplate",
    "Layout",
    "NoteConfig",
    "StyleRegistry",
    "TemplateConfigError",
    "TemplateSettings",
    "UnknownStyleError",
    "Width",
    "default_templates",
    "highlight_template",
    "load_template_settings",
    "note_template",
]
