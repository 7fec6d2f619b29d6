# color_palette/types.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

"""
types.py.

Does: Define the structural Protocols the palette consumes from collaborators:
anything renderable as a CSS hex color, and anything that can list required names.
"""


@runtime_checkable
class ColorLike(Protocol):
    def as_css_hex(self) -> str: ...


@runtime_checkable
class RequiredNamesQuery(Protocol):
    """
    Contract for schema/checker objects consumed by Palette.optimized_for.

    - required_names(): ordered names a palette must define.
    """

    def required_names(self) -> Sequence[str]: ...


__all__ = ["ColorLike", "RequiredNamesQuery"]

__docformat__ = "google"
