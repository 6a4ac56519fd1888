"""Color values that know how to print themselves as CSS.

Templates capture a default tint at construction time and per-decoration
configurations may carry their own. Both are :class:`Color` instances that
render to ``rgba(...)`` strings through :meth:`Color.css_value`, optionally at
an overriding opacity.

Examples
--------
>>> from html_decorations.color import YELLOW, Color
>>> YELLOW.css_value(alpha=0.3)
'rgba(255,255,0,0.3)'
>>> Color.parse("#0000ff").css_value()
'rgba(0,0,255,1.0)'
"""

from __future__ import annotations

import dataclasses as dc
import re

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ColorError(ValueError):
    """Raised when a color value cannot be parsed or is out of range."""


@dc.dataclass(frozen=True, slots=True)
class Color:
    """An sRGB color with 8-bit channels and a fractional alpha.

    Attributes
    ----------
    red, green, blue : int
        Channel values in the ``0..255`` range.
    alpha : float
        Opacity in the ``0..1`` range; defaults to fully opaque.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Reject channels or alpha values outside their valid ranges."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"Color channel '{name}' must be an integer, got {value!r}."
                raise ColorError(msg)
            if not 0 <= value <= 255:
                msg = f"Color channel '{name}' must be within 0..255, got {value}."
                raise ColorError(msg)
        check_alpha(self.alpha)

    def css_value(self, alpha: float | None = None) -> str:
        """Return the color as a CSS ``rgba()`` value.

        Parameters
        ----------
        alpha : float, optional
            Opacity overriding the color's own alpha. When ``None`` the
            color's alpha is used.

        Returns
        -------
        str
            A compact ``rgba(r,g,b,a)`` string without whitespace.
        """
        effective = self.alpha if alpha is None else check_alpha(alpha)
        return f"rgba({self.red},{self.green},{self.blue},{float(effective)!r})"

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy of this color with a different alpha."""
        return dc.replace(self, alpha=alpha)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` notation."""
        match = _HEX_PATTERN.match(text.strip())
        if match is None:
            msg = f"Invalid hex color {text!r}."
            raise ColorError(msg)
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(char * 2 for char in digits)
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = 1.0
        if len(digits) == 8:
            alpha = round(int(digits[6:8], 16) / 255, 3)
        return cls(red, green, blue, alpha)

    @classmethod
    def parse(cls, value: Color | str) -> Color:
        """Coerce a color, a hex string, or a CSS color name into a Color."""
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            msg = f"Cannot interpret {value!r} as a color."
            raise ColorError(msg)
        text = value.strip()
        named = NAMED_COLORS.get(text.lower())
        if named is not None:
            return named
        return cls.from_hex(text)


def check_alpha(alpha: float) -> float:
    """Return ``alpha`` unchanged, raising ColorError unless it lies in ``0..1``."""
    if isinstance(alpha, bool) or not isinstance(alpha, int | float):
        msg = f"Alpha must be a number, got {alpha!r}."
        raise ColorError(msg)
    if not 0 <= alpha <= 1:
        msg = f"Alpha must be within 0..1, got {alpha}."
        raise ColorError(msg)
    return alpha


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 128, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
ORANGE = Color(255, 165, 0)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "silver": Color(192, 192, 192),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
    "white": WHITE,
    "maroon": Color(128, 0, 0),
    "red": RED,
    "purple": Color(128, 0, 128),
    "fuchsia": Color(255, 0, 255),
    "magenta": Color(255, 0, 255),
    "green": GREEN,
    "lime": Color(0, 255, 0),
    "olive": Color(128, 128, 0),
    "yellow": YELLOW,
    "navy": Color(0, 0, 128),
    "blue": BLUE,
    "teal": Color(0, 128, 128),
    "aqua": Color(0, 255, 255),
    "cyan": Color(0, 255, 255),
    "orange": ORANGE,
}


__all__ = [
    "BLACK",
    "BLUE",
    "GREEN",
    "NAMED_COLORS",
    "ORANGE",
    "RED",
    "WHITE",
    "YELLOW",
    "Color",
    "ColorError",
    "check_alpha",
]
