"""
errors.py.

Does: Define the exceptions raised by palette resolution, lookup and the strict CSS view.
Used by: palette, strict, schema, and callers that want to catch palette failures.
"""

from __future__ import annotations

__all__ = [
    "PaletteError",
    "MissingReferenceError",
    "CycleError",
    "UnknownColorError",
    "StrictLookupError",
]


class PaletteError(Exception):
    """Base class for every palette failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    # KeyError subclasses would otherwise render as repr(message)
    def __str__(self) -> str:
        return self.message


class MissingReferenceError(PaletteError, LookupError):
    """Raise when an alias chain points at a name the palette does not define."""

    def __init__(self, key: str, target: str):
        super().__init__(f"{key} refers to missing color {target}")
        self.key = key
        self.target = target


class CycleError(PaletteError, ValueError):
    """Raise when an alias chain comes back to a name it already visited."""

    def __init__(self, name: str):
        super().__init__(f"looping at {name}")
        self.name = name


class UnknownColorError(PaletteError, KeyError):
    """Raise when a lookup asks for a name the resolved palette does not have."""

    def __init__(self, name: str):
        super().__init__(f"no color named {name}")
        self.name = name


class StrictLookupError(PaletteError, KeyError):
    """Raise when a strict CSS view is read with a key it does not contain."""

    def __init__(self, key: str):
        super().__init__(f"no entry in palette hash for key {key}")
        self.key = key
