"""
color
=====

Does: Define the concrete Color value, the Concrete/AliasName entry variants, and
      the single coercion step that turns raw palette values into entries.
Used By: Palette construction, subsetting, loaders.
Returns: Frozen value objects; coercion raises TypeError/ValueError on bad literals.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Tuple, Union

import webcolors

from color_palette.types import ColorLike

__all__ = [
    "RGB",
    "Color",
    "Concrete",
    "AliasName",
    "ColorEntry",
    "coerce_color",
    "coerce_entry",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]


def _validate_rgb(rgb: Sequence[Any]) -> RGB:
    if len(rgb) != 3:
        raise ValueError(f"RGB needs exactly three components, got {len(rgb)}: {rgb!r}")
    for v in rgb:
        # bool is an int subclass but never a channel value
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"RGB components must be ints, got {rgb!r}")
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {tuple(rgb)}")
    return (r, g, b)


# =============================================================================
# 1) COLOR VALUE
# =============================================================================

@dataclass(frozen=True)
class Color:
    """An sRGB color with a canonical CSS rendering.

    Build one with ``Color.from_hex("#333")``, ``Color.from_rgb((51, 51, 51))`` or
    ``Color.from_name("slategray")``. ``as_css_hex()`` always returns lowercase
    ``#rrggbb``.
    """

    rgb: RGB

    def __post_init__(self) -> None:
        object.__setattr__(self, "rgb", _validate_rgb(tuple(self.rgb)))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Does: Parse a 3- or 6-digit hex triple (leading '#' optional)."""
        if not isinstance(value, str):
            raise TypeError(f"hex color must be a str, got {type(value).__name__}")
        text = value.strip()
        if not text.startswith("#"):
            text = f"#{text}"
        try:
            rgb = webcolors.hex_to_rgb(webcolors.normalize_hex(text))
        except ValueError as e:
            raise ValueError(f"not a CSS hex color: {value!r}") from e
        return cls((rgb.red, rgb.green, rgb.blue))

    @classmethod
    def from_rgb(cls, rgb: Sequence[int]) -> Color:
        return cls(_validate_rgb(tuple(rgb)))

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Does: Look up a CSS3 color keyword (e.g. 'rebeccapurple')."""
        try:
            return cls.from_hex(webcolors.name_to_hex(name.strip().lower()))
        except ValueError as e:
            raise ValueError(f"not a CSS3 color name: {name!r}") from e

    def as_css_hex(self) -> str:
        return webcolors.rgb_to_hex(self.rgb)

    # Older call sites use the camel-ish accessor name.
    to_css_hex = as_css_hex

    def __str__(self) -> str:
        return self.as_css_hex()


# =============================================================================
# 2) ENTRY VARIANTS
# =============================================================================

@dataclass(frozen=True)
class Concrete:
    """A palette entry that already holds its color."""

    color: Color


@dataclass(frozen=True)
class AliasName:
    """A palette entry defined as another entry's name."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"alias target must be a non-empty str, got {self.name!r}")


ColorEntry = Union[Concrete, AliasName]


# =============================================================================
# 3) COERCION
# =============================================================================

def coerce_color(value: Any) -> Color:
    """Does: Turn a color literal (Color, ColorLike, '#hex', [r, g, b]) into a Color.

    Bare strings without '#' are rejected here; in a palette they mean aliases.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        if not value.strip().startswith("#"):
            raise ValueError(f"color literal must start with '#': {value!r}")
        return Color.from_hex(value)
    if isinstance(value, (list, tuple)):
        return Color.from_rgb(value)
    if isinstance(value, ColorLike):
        return Color.from_hex(value.as_css_hex())
    raise TypeError(f"cannot use {type(value).__name__} as a color: {value!r}")


def coerce_entry(value: Any) -> ColorEntry:
    """Does: Decide once whether a raw palette value is a concrete color or an alias.

    Returns: Concrete for Color/ColorLike/'#hex'/[r, g, b]; AliasName for any other str.
    """
    if isinstance(value, AliasName):
        return value
    if isinstance(value, Concrete):
        if isinstance(value.color, Color):
            return value
        return Concrete(coerce_color(value.color))
    if isinstance(value, str) and not value.strip().startswith("#"):
        return AliasName(value)
    return Concrete(coerce_color(value))
