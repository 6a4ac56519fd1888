"""Registry mapping decoration style ids to their HTML templates.

The registry is built once per content view and only read afterwards, so
rendering passes may share it freely. Replacing an entry (for instance to
change the highlight look) produces a new registry through
:meth:`StyleRegistry.with_template`; existing instances are never mutated.

Examples
--------
>>> from html_decorations.models import Decoration, DecorationStyle
>>> registry = StyleRegistry.defaults()
>>> sorted(registry)
['highlight', 'note']
>>> registry.get("underline") is None
True
>>> markup = registry.render(Decoration("d1", DecorationStyle.note()))
>>> markup.startswith("<div>")
True
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import types
import typing as typ

from .config.models import TemplateSettings
from .models import UnknownStyleError
from .styles import default_templates

if typ.TYPE_CHECKING:
    from .allocator import ClassNameAllocator
    from .models import Decoration
    from .template import HtmlDecorationTemplate

logger = logging.getLogger(__name__)


class StyleRegistry(cabc.Mapping[str, "HtmlDecorationTemplate"]):
    """Immutable mapping of style id to :class:`HtmlDecorationTemplate`."""

    def __init__(
        self, templates: typ.Mapping[str, HtmlDecorationTemplate] | None = None
    ) -> None:
        """Freeze a copy of ``templates`` in registration order."""
        self._templates: typ.Mapping[str, HtmlDecorationTemplate] = (
            types.MappingProxyType(dict(templates or {}))
        )
        logger.debug("created style registry with %s", list(self._templates))

    @classmethod
    def defaults(
        cls,
        settings: TemplateSettings | None = None,
        *,
        allocator: ClassNameAllocator | None = None,
    ) -> StyleRegistry:
        """Return a registry holding the built-in ``highlight`` and ``note``."""
        return cls.from_settings(settings or TemplateSettings(), allocator=allocator)

    @classmethod
    def from_settings(
        cls,
        settings: TemplateSettings,
        *,
        allocator: ClassNameAllocator | None = None,
    ) -> StyleRegistry:
        """Build the built-in templates from loaded settings."""
        return cls(
            default_templates(
                default_tint=settings.default_tint,
                line_weight=settings.highlight.line_weight,
                corner_radius=settings.highlight.corner_radius,
                alpha=settings.highlight.alpha,
                padding=settings.highlight.padding,
                note_top_margin=settings.note.top_margin,
                note_bottom_margin=settings.note.bottom_margin,
                allocator=allocator,
            )
        )

    def __getitem__(self, style_id: str) -> HtmlDecorationTemplate:
        try:
            return self._templates[style_id]
        except KeyError:
            raise UnknownStyleError(style_id) from None

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._templates)!r})"

    def template_for(self, decoration: Decoration) -> HtmlDecorationTemplate | None:
        """Return the template for the decoration's style, or ``None``."""
        return self.get(decoration.style.id)

    def render(self, decoration: Decoration) -> str:
        """Render ``decoration`` with the template registered for its style.

        Raises
        ------
        UnknownStyleError
            If no template is registered for the decoration's style id.
        DecorationConfigError
            If the decoration's configuration does not fit the template.
        """
        return self[decoration.style.id].render(decoration)

    def with_template(
        self, style_id: str, template: HtmlDecorationTemplate
    ) -> StyleRegistry:
        """Return a new registry where ``style_id`` maps to ``template``."""
        templates = dict(self._templates)
        templates[style_id] = template
        return type(self)(templates)

    @property
    def stylesheet(self) -> str:
        """Return every registered stylesheet joined into one CSS document."""
        return "\n".join(
            template.stylesheet
            for template in self._templates.values()
            if template.stylesheet
        )

    def to_json(self) -> dict[str, dict[str, str | None]]:
        """Return the ``{style_id: template record}`` mapping for a bridge."""
        return {
            style_id: template.to_json()
            for style_id, template in self._templates.items()
        }


__all__ = ["StyleRegistry"]
