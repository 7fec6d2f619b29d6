"""
color_palette
=============

Does: Named color sets with alias resolution, CSS export, and schema-driven subsetting.
Returns: Palette, PaletteSchema, Color and the palette error types through a stable namespace.
Used by: Applications that define palettes and the color names they require.
"""

from .color import AliasName, Color, ColorEntry, Concrete, coerce_color, coerce_entry
from .errors import (
    CycleError,
    MissingReferenceError,
    PaletteError,
    StrictLookupError,
    UnknownColorError,
)
from .loader import load_palette, load_schema
from .palette import Palette
from .schema import PaletteSchema
from .strict import StrictCssHash
from .types import ColorLike, RequiredNamesQuery

__all__: list[str] = [
    # core
    "Palette",
    "PaletteSchema",
    "StrictCssHash",
    # colors
    "Color",
    "Concrete",
    "AliasName",
    "ColorEntry",
    "coerce_color",
    "coerce_entry",
    # protocols
    "ColorLike",
    "RequiredNamesQuery",
    # errors
    "PaletteError",
    "MissingReferenceError",
    "CycleError",
    "UnknownColorError",
    "StrictLookupError",
    # loaders
    "load_palette",
    "load_schema",
]
__docformat__ = "google"
