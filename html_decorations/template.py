"""The :class:`HtmlDecorationTemplate` value bound to one decoration style."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import DEFAULT_ELEMENT
from .config.models import TemplateConfigError
from .models import Layout, Width

if typ.TYPE_CHECKING:
    from .models import Decoration

ElementRenderer: typ.TypeAlias = typ.Callable[["Decoration", typ.Any], str]


@dc.dataclass(frozen=True, slots=True)
class HtmlDecorationTemplate:
    """Render a decoration into an HTML element and an optional stylesheet.

    Attributes
    ----------
    layout : Layout
        Whether one element covers all matched boxes or one is made per box.
        Plain strings such as ``"boxes"`` are converted to the enum.
    width : Width
        Sizing policy applied by the host to each generated element.
    element : Callable[[Decoration, Any], str]
        Pure renderer called with the decoration and :attr:`options`.
    stylesheet : str or None
        CSS scoped to class names allocated for this template, or ``None``
        when the markup only uses inline styles.
    options : Any
        Immutable configuration captured at construction time and passed to
        :attr:`element` on every render.
    """

    layout: Layout
    width: Width = Width.WRAP
    element: ElementRenderer = dc.field(default=None, repr=False)  # type: ignore[assignment]
    stylesheet: str | None = None
    options: typ.Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "layout", Layout(self.layout))
        object.__setattr__(self, "width", Width(self.width))
        if self.element is None:
            object.__setattr__(self, "element", _static_renderer(DEFAULT_ELEMENT))

    def render(self, decoration: Decoration) -> str:
        """Return the markup for ``decoration``."""
        return self.element(decoration, self.options)

    @classmethod
    def static(
        cls,
        layout: Layout,
        width: Width = Width.WRAP,
        element: str = DEFAULT_ELEMENT,
        stylesheet: str | None = None,
    ) -> HtmlDecorationTemplate:
        """Build a template whose markup does not depend on the decoration."""
        return cls(
            layout=layout,
            width=width,
            element=_static_renderer(element),
            stylesheet=stylesheet,
        )

    def to_json(self) -> dict[str, str | None]:
        """Return the transportable ``layout``/``width``/``stylesheet`` record.

        The element renderer is omitted; markup must be produced natively with
        :meth:`render` before it crosses a scripting boundary.
        """
        return {
            "layout": self.layout.value,
            "width": self.width.value,
            "stylesheet": self.stylesheet,
        }

    @classmethod
    def from_json(
        cls, payload: typ.Mapping[str, typ.Any], *, element: str = DEFAULT_ELEMENT
    ) -> HtmlDecorationTemplate:
        """Rebuild a static template from a :meth:`to_json` record.

        Raises
        ------
        TemplateConfigError
            If ``layout`` or ``width`` are missing or not recognised, or if
            ``stylesheet`` is neither a string nor ``None``.
        """
        try:
            layout = Layout(payload["layout"])
            width = Width(payload.get("width", Width.WRAP.value))
        except (KeyError, ValueError) as exc:
            msg = f"Invalid template record {dict(payload)!r}: {exc}"
            raise TemplateConfigError(msg) from exc
        stylesheet = payload.get("stylesheet")
        if stylesheet is not None and not isinstance(stylesheet, str):
            msg = f"Template stylesheet must be a string, got {stylesheet!r}."
            raise TemplateConfigError(msg)
        return cls.static(layout, width, element, stylesheet)


def _static_renderer(markup: str) -> ElementRenderer:
    def _render(_decoration: Decoration, _options: typ.Any) -> str:
        return markup

    return _render


__all__ = ["ElementRenderer", "HtmlDecorationTemplate"]
