# tests/test_palette_subset.py
"""Tests for schema-driven subsetting: optimized_for / optimize_for and PaletteSchema."""

from __future__ import annotations

import pytest

from color_palette import (
    Concrete,
    Palette,
    PaletteSchema,
    RequiredNamesQuery,
    UnknownColorError,
)


# ---------- Dummies ----------
class ListQuery:
    """Minimal required-names provider (no schema class involved)."""

    def __init__(self, names):
        self.names = list(names)
        self.calls = 0

    def required_names(self):
        self.calls += 1
        return self.names


# ---------- Fixtures ----------
@pytest.fixture
def source():
    return Palette({"a": "#112233", "b": "a", "c": "b", "d": [0, 0, 0]})


# ---------- optimized_for ----------
def test_optimized_for_keeps_only_required(source):
    small = source.optimized_for(ListQuery(["a", "c"]))
    assert isinstance(small, Palette)
    assert small is not source
    assert set(small.names()) == {"a", "c"}
    assert small.get("a") == source.get("a")
    assert small.get("c") == source.get("c")


def test_optimized_for_entries_are_all_concrete(source):
    small = source.optimized_for(ListQuery(["c", "b"]))
    assert all(isinstance(e, Concrete) for e in small.raw_entries.values())
    assert small.as_css_hash() == {"c": "#112233", "b": "#112233"}


def test_optimized_for_missing_name_propagates(source):
    with pytest.raises(UnknownColorError) as ei:
        source.optimized_for(ListQuery(["a", "zzz"]))
    assert ei.value.name == "zzz"


def test_optimized_for_empty_requirements(source):
    assert source.optimized_for(ListQuery([])).names() == []


def test_optimized_for_keeps_subclass(source):
    class BrandPalette(Palette):
        pass

    brand = BrandPalette({"x": "#ffffff", "y": "x"})
    assert type(brand.optimized_for(ListQuery(["y"]))) is BrandPalette


def test_optimize_for_is_the_same_operation(source):
    q = ListQuery(["b", "d"])
    assert source.optimize_for(q).as_css_hash() == source.optimized_for(q).as_css_hash()
    with pytest.raises(UnknownColorError):
        source.optimize_for(ListQuery(["nope"]))


def test_query_protocol_is_structural():
    assert isinstance(ListQuery([]), RequiredNamesQuery)
    assert isinstance(PaletteSchema([]), RequiredNamesQuery)


# ---------- PaletteSchema ----------
def test_schema_dedupes_and_keeps_order():
    schema = PaletteSchema(["text", "background", "text"])
    assert schema.required_names() == ("text", "background")
    assert schema.required_colors() == schema.required_names()
    assert "text" in repr(schema)


@pytest.mark.parametrize("bad", [["ok", ""], ["ok", 3]])
def test_schema_rejects_bad_names(bad):
    with pytest.raises(ValueError):
        PaletteSchema(bad)


def test_schema_rejects_plain_string():
    with pytest.raises(TypeError):
        PaletteSchema("background")


def test_schema_check_passes_and_fails(source):
    assert PaletteSchema(["a", "c"]).check(source) is None
    with pytest.raises(UnknownColorError):
        PaletteSchema(["a", "missing"]).check(source)


def test_schema_optimize(source):
    small = PaletteSchema(["d"]).optimize(source)
    assert small.as_css_hash() == {"d": "#000000"}
