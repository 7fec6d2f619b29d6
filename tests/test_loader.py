# tests/test_loader.py
"""Tests for load_palette / load_schema on top of the data-dir config loader."""

from __future__ import annotations

import json

import pytest

from color_palette import (
    MissingReferenceError,
    Palette,
    PaletteSchema,
    UnknownColorError,
    load_palette,
    load_schema,
)
from color_palette.utils import ConfigFileNotFound, ConfigTypeError, clear_config_cache


@pytest.fixture
def data_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    clear_config_cache()
    yield data
    clear_config_cache()


def _write(path, obj):
    path.write_text(json.dumps(obj), encoding="utf-8")


# ── Palettes ──────────────────────────────────────────────────────────────────
def test_load_palette_wrapped_colors(data_dir):
    _write(
        data_dir / "site.json",
        {"colors": {"background": "#333", "text": [255, 255, 255], "link": "text"}},
    )
    p = load_palette("site", base_dir=data_dir)
    assert p.as_css_hash() == {"background": "#333333", "text": "#ffffff", "link": "#ffffff"}


def test_load_palette_flat_object(data_dir):
    _write(data_dir / "flat.json", {"a": "#010101", "b": "a"})
    assert load_palette("flat", base_dir=data_dir).get("b").as_css_hex() == "#010101"


def test_load_palette_custom_class(data_dir):
    class Brand(Palette):
        pass

    _write(data_dir / "flat.json", {"a": "#010101"})
    assert type(load_palette("flat", base_dir=data_dir, palette_cls=Brand)) is Brand


def test_load_palette_defers_reference_errors(data_dir):
    _write(data_dir / "broken.json", {"colors": {"b": "a"}})
    p = load_palette("broken", base_dir=data_dir)
    with pytest.raises(MissingReferenceError):
        p.names()


def test_load_palette_flat_entry_named_colors(data_dir):
    _write(data_dir / "flat.json", {"colors": "#ffffff", "text": "colors"})
    p = load_palette("flat", base_dir=data_dir)
    assert p.as_css_hash() == {"colors": "#ffffff", "text": "#ffffff"}


def test_load_palette_non_object_colors_is_a_bad_entry(data_dir):
    # Not a wrapper, so "colors" is an entry, and a one-item list is no RGB triple.
    _write(data_dir / "bad.json", {"colors": ["#fff"]})
    with pytest.raises(ValueError):
        load_palette("bad", base_dir=data_dir)


def test_load_palette_rejects_non_object_file(data_dir):
    _write(data_dir / "list.json", ["#fff"])
    with pytest.raises(ConfigTypeError):
        load_palette("list", base_dir=data_dir)


def test_load_palette_missing_file(data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_palette("nope", base_dir=data_dir)


def test_load_palette_via_env(data_dir, monkeypatch):
    monkeypatch.setenv("COLOR_PALETTE_DATA_DIR", str(data_dir))
    _write(data_dir / "env.json", {"x": "#abcdef"})
    assert load_palette("env").names() == ["x"]


# ── Schemas ───────────────────────────────────────────────────────────────────
def test_load_schema_object_and_list(data_dir):
    _write(data_dir / "req.json", {"required_colors": ["text", "background"]})
    _write(data_dir / "req_list.json", ["link"])
    assert load_schema("req", base_dir=data_dir).required_names() == ("text", "background")
    assert isinstance(load_schema("req_list", base_dir=data_dir), PaletteSchema)


def test_load_schema_bad_shape(data_dir):
    _write(data_dir / "bad.json", {"required_colors": "text"})
    with pytest.raises(ConfigTypeError):
        load_schema("bad", base_dir=data_dir)


def test_loaded_schema_checks_loaded_palette(data_dir):
    _write(data_dir / "site.json", {"colors": {"bg": "#000", "fg": "bg"}})
    _write(data_dir / "app.json", {"required_colors": ["fg", "accent"]})
    palette = load_palette("site", base_dir=data_dir)
    schema = load_schema("app", base_dir=data_dir)
    with pytest.raises(UnknownColorError) as ei:
        schema.check(palette)
    assert ei.value.name == "accent"
