"""
palette.py
==========

Does: Hold a set of named colors where each entry is a concrete color or the name
      of another entry, resolve every alias chain to a concrete color once, and
      expose lookups, CSS export and schema-driven subsetting.
Used By: Applications embedding color schemes, PaletteSchema.check, loaders.
Returns: Color objects, name lists, name -> hex dicts, and new (subset) Palettes.

Example:
    >>> p = Palette({"highlights": "#f0f000", "sidebarText": "highlights"})
    >>> p.get("sidebarText").as_css_hex()
    '#f0f000'
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from color_palette.color import AliasName, Color, ColorEntry, Concrete, coerce_entry
from color_palette.errors import CycleError, MissingReferenceError, UnknownColorError
from color_palette.strict import StrictCssHash
from color_palette.types import RequiredNamesQuery
from color_palette.utils.log import debug, enabled

__all__ = ["Palette"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


def _coerce_entries(colors: Any) -> dict[str, ColorEntry]:
    if not isinstance(colors, Mapping):
        raise TypeError(f"palette colors must be a mapping, got {type(colors).__name__}")
    entries: dict[str, ColorEntry] = {}
    for name, value in colors.items():
        if not isinstance(name, str):
            raise TypeError(f"color names must be str, got {type(name).__name__}: {name!r}")
        if not name:
            raise ValueError("color names must be non-empty")
        entries[name] = coerce_entry(value)
    return entries


def _resolve_entries(raw: Mapping[str, ColorEntry]) -> dict[str, Color]:
    """Does: Map every name to a Color by following alias chains.

    Concrete entries seed the output. Each alias is walked with its own `seen`
    set and stops at the first name already in the output; every name visited
    on a successful walk is then stored too.

    Raises: MissingReferenceError, CycleError.
    """
    output: dict[str, Color] = {
        name: entry.color for name, entry in raw.items() if isinstance(entry, Concrete)
    }

    for key in raw:
        if key in output:
            continue

        seen: set[str] = set()
        path: list[str] = []
        current = key
        while True:
            if current not in raw:
                raise MissingReferenceError(key, current)
            if current in output:
                color = output[current]
                break
            if current in seen:
                raise CycleError(current)
            seen.add(current)
            path.append(current)
            # Concrete names are all in `output`, so this entry is an alias.
            current = raw[current].name  # type: ignore[union-attr]

        for name in path:
            output[name] = color
        if enabled("resolve"):
            debug(f"{' -> '.join(path)} -> {current} = {color.as_css_hex()}", topic="resolve")

    # Same order as the input
    return {name: output[name] for name in raw}


class Palette:
    """A set of named colors.

    ``colors`` maps names to a color specifier (a Color, a CSS hex string such as
    ``"#333"``, or an ``[r, g, b]`` list) or to the name of another entry. Alias
    targets are not checked until the palette is first read; a missing target
    raises MissingReferenceError and a loop raises CycleError. Both are raised
    again on every later read.
    """

    def __init__(self, colors: Mapping[str, Any]):
        self._raw: Mapping[str, ColorEntry] = MappingProxyType(_coerce_entries(colors))
        self._resolved: Mapping[str, Color] | None = None
        self._lock = threading.Lock()

    @classmethod
    def create(cls, colors: Mapping[str, Any]) -> Palette:
        return cls(colors)

    # ── Resolution ────────────────────────────────────────────────────────────
    @property
    def raw_entries(self) -> Mapping[str, ColorEntry]:
        return self._raw

    @property
    def resolved_entries(self) -> Mapping[str, Color]:
        """Read-only name -> Color mapping, computed on first access."""
        resolved = self._resolved
        if resolved is None:
            with self._lock:
                if self._resolved is None:
                    self._resolved = MappingProxyType(_resolve_entries(self._raw))
                    logger.debug(
                        "Resolved palette: %d colors (%d aliases)",
                        len(self._resolved),
                        sum(isinstance(e, AliasName) for e in self._raw.values()),
                    )
                resolved = self._resolved
        return resolved

    # ── Lookups ───────────────────────────────────────────────────────────────
    def has(self, name: str) -> bool:
        return name in self.resolved_entries

    has_color = has

    def get(self, name: str) -> Color:
        """Return the Color to be used for `name`; raise UnknownColorError if absent."""
        try:
            return self.resolved_entries[name]
        except KeyError:
            raise UnknownColorError(name) from None

    color = get

    def names(self) -> list[str]:
        """All color names the palette knows about, in input order."""
        return list(self.resolved_entries)

    color_names = names

    # ── Export ────────────────────────────────────────────────────────────────
    def as_css_hash(self) -> dict[str, str]:
        """Does: Return {name: '#rrggbb'} for every resolved color.

        For ``{"background": "#333", "text": "background"}`` that is
        ``{"background": "#333333", "text": "#333333"}``.
        """
        return {name: color.as_css_hex() for name, color in self.resolved_entries.items()}

    def as_strict_css_hash(self) -> StrictCssHash:
        """Like as_css_hash, but reading an absent key raises StrictLookupError."""
        return StrictCssHash(self.as_css_hash())

    # ── Subsetting ────────────────────────────────────────────────────────────
    def optimized_for(self, checker: RequiredNamesQuery) -> Palette:
        """Does: Build a new palette holding only the colors `checker` requires.

        Useful for reducing a large palette to the small set that must be
        embedded in a document. Every entry of the result is concrete.

        Raises: UnknownColorError for the first required name this palette lacks.
        """
        subset = {name: Concrete(self.get(name)) for name in checker.required_names()}
        logger.debug("Optimized palette: %d of %d colors kept", len(subset), len(self))
        return type(self)(subset)

    def optimize_for(self, checker: RequiredNamesQuery) -> Palette:
        """Historical name for optimized_for."""
        logger.debug("optimize_for is deprecated; use optimized_for")
        return self.optimized_for(checker)

    # ── Dunder ────────────────────────────────────────────────────────────────
    def __contains__(self, name: object) -> bool:
        return name in self.resolved_entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.resolved_entries)

    def __len__(self) -> int:
        return len(self.resolved_entries)

    def __repr__(self) -> str:
        state = "resolved" if self._resolved is not None else "unresolved"
        return f"{type(self).__name__}({len(self._raw)} colors, {state})"
