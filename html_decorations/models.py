"""Typed values describing decorations and the templates that render them.

Decorations are consumed, never owned: the host hands over a
:class:`Decoration` whose :class:`DecorationStyle` names a registry entry and
carries the per-style configuration payload. Built-in payloads are the tagged
variants :class:`HighlightConfig` and :class:`NoteConfig`; each exposes the
style id it belongs to through ``style_id`` so renderers can narrow on the
concrete type instead of casting.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from ._constants import HIGHLIGHT_STYLE, NOTE_STYLE

if typ.TYPE_CHECKING:
    from .color import Color


class DecorationError(Exception):
    """Base class for errors raised while resolving or rendering decorations."""


class UnknownStyleError(DecorationError, KeyError):
    """Raised when a decoration references a style id with no template."""

    def __init__(self, style_id: str) -> None:
        super().__init__(style_id)
        self.style_id = style_id

    def __str__(self) -> str:
        return f"No decoration template registered for style '{self.style_id}'."


class DecorationConfigError(DecorationError, TypeError):
    """Raised when a style configuration has the wrong shape for its renderer."""


class Layout(enum.StrEnum):
    """Number of generated elements relative to the matched geometry."""

    BOUNDS = "bounds"
    """A single element covering the union of all matched boxes."""
    BOXES = "boxes"
    """One element per matched box, e.g. one per line of text."""


class Width(enum.StrEnum):
    """How the width of each generated element expands in the viewport."""

    WRAP = "wrap"
    BOUNDS = "bounds"
    VIEWPORT = "viewport"
    PAGE = "page"


@dc.dataclass(frozen=True, slots=True)
class EdgeInsets:
    """Pixel insets applied around a generated element."""

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0


@dc.dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Per-decoration configuration of the ``highlight`` style.

    Attributes
    ----------
    tint : Color or None
        Highlight color; ``None`` falls back to the template's default tint.
    is_active : bool
        Inactive highlights render without a background color.
    """

    style_id: typ.ClassVar[str] = HIGHLIGHT_STYLE

    tint: Color | None = None
    is_active: bool = False


@dc.dataclass(frozen=True, slots=True)
class NoteConfig:
    """Per-decoration configuration of the ``note`` style."""

    style_id: typ.ClassVar[str] = NOTE_STYLE

    tint: Color | None = None
    is_active: bool = False


StyleConfig: typ.TypeAlias = HighlightConfig | NoteConfig


@dc.dataclass(frozen=True, slots=True)
class DecorationStyle:
    """Style identifier plus its opaque configuration payload.

    Custom styles registered by a host may carry any immutable payload; the
    built-in styles expect :data:`StyleConfig` variants.
    """

    id: str
    config: StyleConfig | typ.Any | None = None

    @classmethod
    def highlight(
        cls, tint: Color | None = None, *, is_active: bool = False
    ) -> DecorationStyle:
        """Build a ``highlight`` style carrying a :class:`HighlightConfig`."""
        return cls(HIGHLIGHT_STYLE, HighlightConfig(tint=tint, is_active=is_active))

    @classmethod
    def note(
        cls, tint: Color | None = None, *, is_active: bool = False
    ) -> DecorationStyle:
        """Build a ``note`` style carrying a :class:`NoteConfig`."""
        return cls(NOTE_STYLE, NoteConfig(tint=tint, is_active=is_active))


@dc.dataclass(frozen=True, slots=True)
class Decoration:
    """An annotation anchored to a range of rendered content.

    Attributes
    ----------
    id : str
        Host-assigned identifier, unique within its decoration group.
    style : DecorationStyle
        Visual treatment and its configuration.
    locator : object, optional
        Target range in the content; opaque to this package.
    """

    id: str
    style: DecorationStyle
    locator: typ.Any = None


__all__ = [
    "Decoration",
    "DecorationConfigError",
    "DecorationError",
    "DecorationStyle",
    "EdgeInsets",
    "HighlightConfig",
    "Layout",
    "NoteConfig",
    "StyleConfig",
    "UnknownStyleError",
    "Width",
]
