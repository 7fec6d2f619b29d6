"""
schema.py.

Does: Describe the color names an application needs, and check or shrink a
      Palette against that list.
Used by: Applications validating user palettes; loader.load_schema.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from color_palette.palette import Palette

__all__ = ["PaletteSchema"]


class PaletteSchema:
    """Ordered, de-duplicated list of required color names.

    >>> schema = PaletteSchema(["background", "text"])
    >>> schema.check(palette)          # raises UnknownColorError if one is missing
    >>> small = schema.optimize(palette)
    """

    def __init__(self, required_colors: Iterable[str]):
        if isinstance(required_colors, str):
            raise TypeError("required_colors must be an iterable of names, not a str")
        names: dict[str, None] = {}
        for name in required_colors:
            if not isinstance(name, str) or not name:
                raise ValueError(f"required color names must be non-empty str, got {name!r}")
            names.setdefault(name, None)
        self._required = tuple(names)

    def required_names(self) -> tuple[str, ...]:
        return self._required

    required_colors = required_names

    def check(self, palette: Palette) -> None:
        """Raise UnknownColorError if `palette` lacks any required color."""
        palette.optimized_for(self)

    def optimize(self, palette: Palette) -> Palette:
        return palette.optimized_for(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._required)!r})"
