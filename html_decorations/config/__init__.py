"""Load and validate the settings of the built-in decoration templates.

This subpackage parses an optional YAML document, merges it over the built-in
defaults (yellow tint, 0.3 highlight alpha, 3px corners, 1px horizontal
padding, note marker margins), and produces frozen dataclasses consumed by
:meth:`html_decorations.registry.StyleRegistry.from_settings`.

Examples
--------
>>> from html_decorations.config import parse_template_settings
>>> settings = parse_template_settings({"highlight": {"alpha": 0.5}})
>>> settings.highlight.alpha
0.5
>>> settings.default_tint.css_value()
'rgba(255,255,0,1.0)'
"""

from .loader import load_template_settings, parse_template_settings
from .models import (
    HighlightSettings,
    NoteSettings,
    TemplateConfigError,
    TemplateSettings,
)

__all__ = [
    "HighlightSettings",
    "NoteSettings",
    "TemplateConfigError",
    "TemplateSettings",
    "load_template_settings",
    "parse_template_settings",
]
