# src/color_palette/utils/load_config.py

"""Read palette/schema JSON files from a data directory, with an mtime-keyed cache.

Modes:
- "raw"             -> the parsed JSON document, whatever its shape
- "validated_dict"  -> a JSON object, optionally passed through a validator

Data directory, first match wins: explicit `base_dir`, then COLOR_PALETTE_DATA_DIR
or DATA_DIR, then the nearest `data/` or `Data/` above the working directory.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# json5 ships with the "comments" extra
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "Mode",
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("COLOR_PALETTE_DATA_DIR", "DATA_DIR")
_DIR_NAMES = ("data", "Data")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data directory was configured or discovered."""


class ConfigFileNotFound(FileNotFoundError):
    """The data file is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """The data file is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The data file parsed, but its top-level shape is wrong for the mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_lock = threading.RLock()
_cache: dict[tuple[Path, float, bool], Any] = {}


def clear_config_cache() -> None:
    with _lock:
        _cache.clear()
    log.debug("Palette data cache cleared.")


# ── Locating files ───────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    here = (start or Path.cwd()).resolve()
    return [folder / name for folder in (here, *here.parents) for name in _DIR_NAMES]


def _default_data_dir(start: Path | None = None) -> Path:
    candidates = _candidate_data_dirs(start)
    found = next((c for c in candidates if c.is_dir()), None)
    if found is None:
        tried = "\n  ".join(map(str, candidates))
        raise DataDirNotFound(f"No 'data' directory found.\nTried:\n  {tried}")
    return found


def _data_dir(base_dir: os.PathLike[str] | str | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).resolve()
    configured = next((os.environ[v] for v in DATA_DIR_ENV_VARS if os.environ.get(v)), None)
    if configured:
        return Path(configured).expanduser().resolve()
    return _default_data_dir()


def _data_file(file: str | os.PathLike[str], data_dir: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith((".json", ".json5")):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ── Parsing ──────────────────────────────────────────────────────────────────
def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    if allow_comments and _json5 is None:
        raise ConfigParseError("json5 requested (allow_comments=True) but not installed")
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    try:
        return _json5.loads(text) if allow_comments else json.loads(text)
    except ValueError as e:  # json.JSONDecodeError is a ValueError
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: os.PathLike[str] | str | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> Any:
    """Does: Parse <data>/<file>.json, check its shape for `mode`, and cache the result.

    Returns: The parsed document ("raw") or the validated object ("validated_dict").
    Results produced by a validator are never cached.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _data_file(file, _data_dir(base_dir))
    try:
        key = (path, path.stat().st_mtime, allow_comments)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _lock:
        data = _cache.get(key)
    if data is None:
        data = _parse(path, encoding, allow_comments)
        with _lock:
            _cache[key] = data
        log.debug("Parsed %s", path.name)
    else:
        log.debug("Cache hit for %s", path.name)

    if mode == "raw":
        return data

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is None:
        return data
    try:
        return validator(data)
    except (TypeError, ValueError, KeyError) as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


# ── Scoped override ──────────────────────────────────────────────────────────
class temp_data_dir:
    """Point COLOR_PALETTE_DATA_DIR at `path` inside a with-block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._path = os.fspath(path)
        self._saved: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._saved = os.environ.get(DATA_DIR_ENV_VARS[0])
        os.environ[DATA_DIR_ENV_VARS[0]] = self._path
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._saved is None:
            os.environ.pop(DATA_DIR_ENV_VARS[0], None)
        else:
            os.environ[DATA_DIR_ENV_VARS[0]] = self._saved
        clear_config_cache()
