"""Utility helpers shared by the template settings loader."""

from __future__ import annotations

import typing as typ

from ..color import Color, ColorError
from ..models import EdgeInsets
from .models import TemplateConfigError


def _section(
    raw: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, or an empty mapping."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Section '{key}' must be a mapping, got {type(value).__name__}."
        raise TemplateConfigError(msg)
    return value


def _int_value(payload: typ.Mapping[str, typ.Any], key: str, default: int) -> int:
    """Return an integer setting, rejecting booleans and other types."""
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Setting '{key}' must be an integer, got {value!r}."
        raise TemplateConfigError(msg)
    return value


def _alpha_value(
    payload: typ.Mapping[str, typ.Any], key: str, default: float
) -> float:
    """Return an opacity setting constrained to ``0..1``."""
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Setting '{key}' must be a number, got {value!r}."
        raise TemplateConfigError(msg)
    if not 0 <= value <= 1:
        msg = f"Setting '{key}' must be within 0..1, got {value}."
        raise TemplateConfigError(msg)
    return float(value)


def _color_value(value: object, default: Color) -> Color:
    """Parse a hex or named color, falling back to ``default`` when unset."""
    if value is None:
        return default
    try:
        return Color.parse(typ.cast("Color | str", value))
    except ColorError as exc:
        msg = f"Invalid default_tint: {exc}"
        raise TemplateConfigError(msg) from exc


def _insets_value(payload: typ.Mapping[str, typ.Any], default: EdgeInsets) -> EdgeInsets:
    """Merge a partial ``padding`` mapping over the default insets."""
    value = payload.get("padding")
    if value is None:
        return default
    if not isinstance(value, dict):
        msg = f"Setting 'padding' must be a mapping, got {value!r}."
        raise TemplateConfigError(msg)
    unknown = sorted(set(value) - {"top", "left", "bottom", "right"})
    if unknown:
        msg = f"Unknown padding edges: {', '.join(map(str, unknown))}."
        raise TemplateConfigError(msg)
    return EdgeInsets(
        top=_int_value(value, "top", default.top),
        left=_int_value(value, "left", default.left),
        bottom=_int_value(value, "bottom", default.bottom),
        right=_int_value(value, "right", default.right),
    )


__all__ = [
    "_alpha_value",
    "_color_value",
    "_insets_value",
    "_int_value",
    "_section",
]
