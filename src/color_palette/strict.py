"""
strict.py.

Does: Provide StrictCssHash, a read-only name -> CSS hex mapping whose lookups
      fail loudly for names it does not hold.
Used by: Palette.as_strict_css_hash.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from color_palette.errors import StrictLookupError

__all__ = ["StrictCssHash"]


class StrictCssHash(Mapping[str, str]):
    """
    Immutable mapping of color name to CSS hex string.

    Reading an absent key, through ``view[key]`` or ``view.get(key)``, raises
    StrictLookupError instead of returning a sentinel. Membership tests, ``len``
    and iteration behave like a plain dict.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str]):
        self._data = MappingProxyType(dict(data))

    def __getitem__(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise StrictLookupError(key) from None

    def get(self, key: str, default: Any = None) -> str:  # type: ignore[override]
        # No fallback: an absent key is always an error.
        return self[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"
