"""Cyclopts CLI for inspecting the decoration templates a host would inject.

The ``decorations`` console script prints the aggregate stylesheet, the
transportable template records, or the markup of a single decoration, using
either the built-in defaults or a YAML settings file. It is handy when
checking how a settings change affects the CSS pushed into a content view.

Examples
--------
Print the stylesheet for the default templates:

>>> from html_decorations.cli import main
>>> main()  # doctest: +SKIP

Render an inactive highlight with a custom tint:

>>> from html_decorations.cli import app
>>> app(
...     ["render", "--style", "highlight", "--tint", "#ff0000", "--no-active"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from . import _constants
from ._constants import HIGHLIGHT_STYLE, NOTE_STYLE
from .color import Color
from .config import TemplateSettings, load_template_settings
from .models import Decoration, DecorationStyle
from .registry import StyleRegistry

app = App(name="decorations", config=cyclopts.config.Env("DECORATIONS_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to a template settings YAML file"),
]
VerboseOption = typ.Annotated[bool, Parameter(help="Log debug records to stderr")]


def _build_registry(config: Path | None, *, verbose: bool) -> StyleRegistry:
    """Configure logging and build the registry from ``config`` or defaults."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    settings = load_template_settings(config) if config else TemplateSettings()
    return StyleRegistry.from_settings(settings)


@app.command(help="Print the aggregate stylesheet of the built-in templates.")
def stylesheet(*, config: ConfigOption = None, verbose: VerboseOption = False) -> None:
    """Print the CSS a host injects once per content view.

    Parameters
    ----------
    config : Path or None, optional
        Settings file; the built-in defaults are used when ``None``.
    verbose : bool, optional
        Emit debug logging while building the templates.
    """
    registry = _build_registry(config, verbose=verbose)
    print(registry.stylesheet)


@app.command(help="Print the template records passed to a scripting bridge.")
def templates(*, config: ConfigOption = None, verbose: VerboseOption = False) -> None:
    """Print ``{style_id: {layout, width, stylesheet}}`` as indented JSON."""
    registry = _build_registry(config, verbose=verbose)
    print(json.dumps(registry.to_json(), indent=2))


@app.command(help="Render the markup of one decoration of a built-in style.")
def render(
    *,
    style: typ.Annotated[
        str, Parameter(help=f"Style id ({HIGHLIGHT_STYLE} or {NOTE_STYLE})")
    ] = HIGHLIGHT_STYLE,
    tint: typ.Annotated[
        str | None, Parameter(help="Hex or named color overriding the default")
    ] = None,
    active: typ.Annotated[bool, Parameter(help="Render the active state")] = True,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the element markup for a decoration of ``style``.

    Raises
    ------
    ValueError
        If ``style`` is not a built-in style id.
    ColorError
        If ``tint`` is not a recognised color.
    """
    color = Color.parse(tint) if tint else None
    match style:
        case _constants.HIGHLIGHT_STYLE:
            decoration_style = DecorationStyle.highlight(color, is_active=active)
        case _constants.NOTE_STYLE:
            decoration_style = DecorationStyle.note(color, is_active=active)
        case _:
            msg = f"Unknown style {style!r}; expected {HIGHLIGHT_STYLE} or {NOTE_STYLE}."
            raise ValueError(msg)
    registry = _build_registry(config, verbose=verbose)
    print(registry.render(Decoration(id="cli", style=decoration_style)))


def main() -> None:
    """Invoke the Cyclopts application behind the ``decorations`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()


__all__ = ["app", "main", "render", "stylesheet", "templates"]
