"""Typed dataclasses describing decoration template settings."""

from __future__ import annotations

import dataclasses as dc

from ..color import YELLOW, Color
from ..models import EdgeInsets


class TemplateConfigError(ValueError):
    """Raised when template settings or a template record are invalid."""


@dc.dataclass(frozen=True, slots=True)
class HighlightSettings:
    """Look of the built-in ``highlight`` template."""

    alpha: float = 0.3
    line_weight: int = 2
    corner_radius: int = 3
    padding: EdgeInsets = EdgeInsets(left=1, right=1)


@dc.dataclass(frozen=True, slots=True)
class NoteSettings:
    """Look of the built-in ``note`` template's margin marker."""

    top_margin: int = -4
    bottom_margin: int = 0


@dc.dataclass(frozen=True, slots=True)
class TemplateSettings:
    """Parameters shared by the built-in decoration templates.

    Attributes
    ----------
    default_tint : Color
        Tint used when a decoration's configuration carries none.
    highlight : HighlightSettings
        Highlight alpha, line weight, corner radius and padding.
    note : NoteSettings
        Vertical margins of the note marker.
    """

    default_tint: Color = YELLOW
    highlight: HighlightSettings = HighlightSettings()
    note: NoteSettings = NoteSettings()


__all__ = [
    "HighlightSettings",
    "NoteSettings",
    "TemplateConfigError",
    "TemplateSettings",
]
