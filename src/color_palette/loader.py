"""
loader
======

Does: Build Palettes and PaletteSchemas from JSON files in the data directory.
Used By: Applications shipping palettes/schemas as data; tests.
Returns: Palette / PaletteSchema instances; config errors from utils.load_config.

Palette files hold either ``{"colors": {...}}`` or a flat ``{name: value}`` object,
where a value is ``"#hex"``, ``[r, g, b]`` or the name of another color.
Schema files hold ``{"required_colors": [...]}`` or a bare list of names.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from color_palette.palette import Palette
from color_palette.schema import PaletteSchema
from color_palette.utils.load_config import ConfigTypeError, load_config

__all__ = ["load_palette", "load_schema"]

logger = logging.getLogger(__name__)


def _palette_colors(data: dict[str, Any]) -> dict[str, Any]:
    # A non-object "colors" value is an ordinary entry of a flat palette.
    colors = data.get("colors")
    return colors if isinstance(colors, dict) else data


def load_palette(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    palette_cls: type[Palette] = Palette,
    allow_comments: bool = False,
) -> Palette:
    """Does: Load <data>/<file>.json into a Palette (aliases resolve on first read)."""
    data = load_config(
        file,
        "validated_dict",
        base_dir=base_dir,
        validator=_palette_colors,
        allow_comments=allow_comments,
    )
    palette = palette_cls(data)
    logger.debug("Loaded palette %s with %d entries", os.fspath(file), len(palette.raw_entries))
    return palette


def load_schema(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> PaletteSchema:
    """Does: Load <data>/<file>.json into a PaletteSchema, keeping name order."""
    data = load_config(file, "raw", base_dir=base_dir, allow_comments=allow_comments)
    names = data.get("required_colors") if isinstance(data, dict) else data
    if not isinstance(names, list):
        raise ConfigTypeError(
            f"{os.fspath(file)}: expected a list of required colors, got {type(names).__name__}"
        )
    return PaletteSchema(names)
