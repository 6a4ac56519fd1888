"""Built-in ``highlight`` and ``note`` decoration templates.

Each builder allocates its scoped class name once, renders the template's
stylesheet through Jinja2, and captures its parameters in an immutable options
struct that the element renderer receives on every call. Colors are written
inline per decoration while the structural rules (padding, corners, marker
shape) are shared through the stylesheet.

Examples
--------
>>> from html_decorations.allocator import ClassNameAllocator
>>> from html_decorations.models import Decoration, DecorationStyle
>>> template = highlight_template(allocator=ClassNameAllocator())
>>> template.render(Decoration("d1", DecorationStyle.highlight(is_active=True)))
'<div class="readium-highlight-1" style="background-color: rgba(255,255,0,0.3) !important;"/>'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import (
    HIGHLIGHT_CLASS_KEY,
    HIGHLIGHT_ELEMENT_TEMPLATE,
    HIGHLIGHT_STYLE,
    HIGHLIGHT_STYLESHEET_TEMPLATE,
    NOTE_CLASS_KEY,
    NOTE_ELEMENT_TEMPLATE,
    NOTE_STYLE,
    NOTE_STYLESHEET_TEMPLATE,
)
from .allocator import DEFAULT_ALLOCATOR, ClassNameAllocator
from .color import YELLOW, Color, check_alpha
from .models import (
    DecorationConfigError,
    EdgeInsets,
    HighlightConfig,
    Layout,
    NoteConfig,
    Width,
)
from .template import HtmlDecorationTemplate

if typ.TYPE_CHECKING:
    from .models import Decoration

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_PADDING = EdgeInsets(top=0, left=1, bottom=0, right=1)

_ENV = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(enabled_extensions=("html.jinja",), default=False),
    trim_blocks=True,
    lstrip_blocks=True,
)


@dc.dataclass(frozen=True, slots=True)
class HighlightOptions:
    """Parameters captured when a highlight template is built."""

    class_name: str
    default_tint: Color
    padding: EdgeInsets
    line_weight: int
    corner_radius: int
    alpha: float


@dc.dataclass(frozen=True, slots=True)
class NoteOptions:
    """Parameters captured when a note template is built."""

    class_name: str
    default_tint: Color
    top_margin: int = -4
    bottom_margin: int = 0


def render_highlight(decoration: Decoration, options: HighlightOptions) -> str:
    """Render one highlight box for ``decoration``.

    Active highlights get an inline background color at the template's alpha;
    inactive ones are emitted without a color so they stay invisible.

    Raises
    ------
    DecorationConfigError
        If the decoration does not carry a :class:`HighlightConfig`.
    """
    match decoration.style.config:
        case HighlightConfig() as config:
            pass
        case other:
            msg = (
                f"Decoration '{decoration.id}' has a {type(other).__name__} "
                "configuration; the highlight template expects HighlightConfig."
            )
            raise DecorationConfigError(msg)
    tint = config.tint or options.default_tint
    return _ENV.get_template(HIGHLIGHT_ELEMENT_TEMPLATE).render(
        class_name=options.class_name,
        is_active=config.is_active,
        tint=tint.css_value(alpha=options.alpha),
    )


def render_note(decoration: Decoration, options: NoteOptions) -> str:
    """Render the margin marker for ``decoration``.

    A decoration without configuration is drawn with the default tint.

    Raises
    ------
    DecorationConfigError
        If the configuration is present but is not a :class:`NoteConfig`.
    """
    match decoration.style.config:
        case None:
            tint = options.default_tint
        case NoteConfig() as config:
            tint = config.tint or options.default_tint
        case other:
            msg = (
                f"Decoration '{decoration.id}' has a {type(other).__name__} "
                "configuration; the note template expects NoteConfig."
            )
            raise DecorationConfigError(msg)
    return _ENV.get_template(NOTE_ELEMENT_TEMPLATE).render(
        class_name=options.class_name,
        tint=tint.css_value(),
        top_margin=options.top_margin,
        bottom_margin=options.bottom_margin,
    )


def highlight_template(
    *,
    default_tint: Color | str = YELLOW,
    padding: EdgeInsets = DEFAULT_PADDING,
    line_weight: int = 2,
    corner_radius: int = 3,
    alpha: float = 0.3,
    allocator: ClassNameAllocator | None = None,
) -> HtmlDecorationTemplate:
    """Create a new decoration template for the ``highlight`` style.

    Parameters
    ----------
    default_tint : Color or str, optional
        Tint used when a decoration's configuration carries none; hex and
        named colors are parsed.
    padding : EdgeInsets, optional
        Insets used to visually tighten each highlighted box.
    line_weight : int, optional
        Stroke weight kept with the template options for host use.
    corner_radius : int, optional
        Border radius of each box, in pixels.
    alpha : float, optional
        Opacity applied to the tint of active highlights.
    allocator : ClassNameAllocator, optional
        Source of the scoped class name; defaults to the process-wide
        allocator.

    Returns
    -------
    HtmlDecorationTemplate
        A ``boxes``/``wrap`` template with a shared structural stylesheet.

    Raises
    ------
    ColorError
        If ``default_tint`` is not a color or ``alpha`` lies outside ``0..1``.
    """
    default_tint = Color.parse(default_tint)
    check_alpha(alpha)
    class_name = (allocator or DEFAULT_ALLOCATOR).allocate(HIGHLIGHT_CLASS_KEY)
    options = HighlightOptions(
        class_name=class_name,
        default_tint=default_tint,
        padding=padding,
        line_weight=line_weight,
        corner_radius=corner_radius,
        alpha=alpha,
    )
    stylesheet = _ENV.get_template(HIGHLIGHT_STYLESHEET_TEMPLATE).render(
        class_name=class_name, padding=padding, corner_radius=corner_radius
    )
    logger.debug("built highlight template %s", class_name)
    return HtmlDecorationTemplate(
        layout=Layout.BOXES,
        width=Width.WRAP,
        element=render_highlight,
        stylesheet=stylesheet,
        options=options,
    )


def note_template(
    *,
    default_tint: Color | str = YELLOW,
    top_margin: int = -4,
    bottom_margin: int = 0,
    allocator: ClassNameAllocator | None = None,
) -> HtmlDecorationTemplate:
    """Create a new decoration template for the ``note`` style.

    The marker spans the page width and floats to the leading page edge,
    flipping sides for right-to-left content.

    Raises
    ------
    ColorError
        If ``default_tint`` is not a color.
    """
    default_tint = Color.parse(default_tint)
    class_name = (allocator or DEFAULT_ALLOCATOR).allocate(NOTE_CLASS_KEY)
    options = NoteOptions(
        class_name=class_name,
        default_tint=default_tint,
        top_margin=top_margin,
        bottom_margin=bottom_margin,
    )
    stylesheet = _ENV.get_template(NOTE_STYLESHEET_TEMPLATE).render(
        class_name=class_name
    )
    logger.debug("built note template %s", class_name)
    return HtmlDecorationTemplate(
        layout=Layout.BOXES,
        width=Width.PAGE,
        element=render_note,
        stylesheet=stylesheet,
        options=options,
    )


def default_templates(
    *,
    default_tint: Color | str = YELLOW,
    line_weight: int = 2,
    corner_radius: int = 3,
    alpha: float = 0.3,
    padding: EdgeInsets = DEFAULT_PADDING,
    note_top_margin: int = -4,
    note_bottom_margin: int = 0,
    allocator: ClassNameAllocator | None = None,
) -> dict[str, HtmlDecorationTemplate]:
    """Create the default mapping of built-in style ids to templates.

    Examples
    --------
    >>> sorted(default_templates())
    ['highlight', 'note']
    """
    return {
        HIGHLIGHT_STYLE: highlight_template(
            default_tint=default_tint,
            padding=padding,
            line_weight=line_weight,
            corner_radius=corner_radius,
            alpha=alpha,
            allocator=allocator,
        ),
        NOTE_STYLE: note_template(
            default_tint=default_tint,
            top_margin=note_top_margin,
            bottom_margin=note_bottom_margin,
            allocator=allocator,
        ),
    }


__all__ = [
    "DEFAULT_PADDING",
    "HighlightOptions",
    "NoteOptions",
    "default_templates",
    "highlight_template",
    "note_template",
    "render_highlight",
    "render_note",
]
