"""Load template settings YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _alpha_value,
    _color_value,
    _insets_value,
    _int_value,
    _section,
)
from .models import HighlightSettings, NoteSettings, TemplateSettings

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_template_settings(path: Path) -> TemplateSettings:
    """Load the YAML document describing the built-in templates' look.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML settings file.

    Returns
    -------
    TemplateSettings
        Parsed settings; keys absent from the document keep their defaults.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TemplateConfigError
        If a section or value is malformed (for example an unknown color name
        or an alpha outside ``0..1``).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> settings = load_template_settings(Path("decorations.yaml"))  # doctest: +SKIP
    >>> settings.highlight.alpha  # doctest: +SKIP
    0.3
    """
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    settings = parse_template_settings(loaded)
    logger.debug("loaded template settings from %s", path)
    return settings


def parse_template_settings(raw: typ.Mapping[str, typ.Any]) -> TemplateSettings:
    """Build :class:`TemplateSettings` from an already-parsed mapping."""
    defaults = TemplateSettings()
    highlight_raw = _section(raw, "highlight")
    note_raw = _section(raw, "note")

    highlight = HighlightSettings(
        alpha=_alpha_value(highlight_raw, "alpha", defaults.highlight.alpha),
        line_weight=_int_value(
            highlight_raw, "line_weight", defaults.highlight.line_weight
        ),
        corner_radius=_int_value(
            highlight_raw, "corner_radius", defaults.highlight.corner_radius
        ),
        padding=_insets_value(highlight_raw, defaults.highlight.padding),
    )
    note = NoteSettings(
        top_margin=_int_value(note_raw, "top_margin", defaults.note.top_margin),
        bottom_margin=_int_value(
            note_raw, "bottom_margin", defaults.note.bottom_margin
        ),
    )
    return TemplateSettings(
        default_tint=_color_value(raw.get("default_tint"), defaults.default_tint),
        highlight=highlight,
        note=note,
    )


__all__ = ["load_template_settings", "parse_template_settings"]
