"""Tests for the named entity table."""

import html.entities

import pytest

from uniescape.codec.entities import (
    MAX_ENTITY_NAME_LENGTH,
    NamedEntityTable,
    build_default_table,
    get_entity_table,
    html5_single_code_point_names,
)
from uniescape.codec.entity_names import CANONICAL_ENTITY_NAMES


@pytest.fixture(scope="module")
def table():
    return get_entity_table()


class TestDefaultTable:
    def test_is_cached(self, table):
        assert get_entity_table() is table

    def test_common_names(self, table):
        assert table.name_for(0xA9) == "copy"
        assert table.name_for(0xE9) == "eacute"
        assert table.name_for(0xC9) == "Eacute"
        assert table.name_for(0x151) == "odblac"
        assert table.name_for(0x200D) == "zwj"

    def test_unnamed_code_points(self, table):
        assert table.name_for(0x1F600) is None
        assert table.name_for(0x1D6F2) is None
        assert table.name_for(0x41) is None

    def test_every_canonical_name_maps_back(self, table):
        for code_point, name in table.names.items():
            assert table.code_point_for(name) == code_point

    def test_canonical_names_agree_with_html5(self, table):
        for code_point, name in table.names.items():
            assert html.entities.html5[name + ";"] == chr(code_point)

    def test_names_are_short_ascii(self, table):
        for name in table.code_points:
            assert name.isascii()
            assert name[0].isalpha()
            assert len(name) <= MAX_ENTITY_NAME_LENGTH

    def test_mismatched_canonical_pairs_are_dropped(self, table):
        assert "NonBreakingSpace" not in table.names.values()
        assert "fjlig" not in table.names.values()
        assert "bne" not in table.names.values()

    def test_nbsp_has_no_canonical_name(self, table):
        assert table.name_for(0xA0) is None

    def test_aliases_decode(self, table):
        assert table.code_point_for("nbsp") == 0xA0
        assert table.code_point_for("NonBreakingSpace") == 0xA0
        assert table.code_point_for("AMP") == 0x26

    def test_multi_code_point_entities_are_not_names(self, table):
        assert not table.is_known_name("fjlig")
        assert table.code_point_for("fjlig") is None

    def test_is_known_name(self, table):
        assert table.is_known_name("amp")
        assert not table.is_known_name("foo")

    def test_size(self, table):
        assert len(table) > 1400
        assert len(table.code_points) >= len(table)

    def test_views_are_read_only(self, table):
        with pytest.raises(TypeError):
            table.names[0x41] = "A"


class TestNamedEntityTable:
    def test_custom_table(self):
        t = NamedEntityTable([(0xE9, "eacute")], aliases={"e1": 0xE9})
        assert t.name_for(0xE9) == "eacute"
        assert t.code_point_for("e1") == 0xE9
        assert len(t) == 1

    def test_canonical_wins_over_alias(self):
        t = NamedEntityTable([(0xE9, "eacute")], aliases={"eacute": 0x41})
        assert t.code_point_for("eacute") == 0xE9

    def test_duplicate_code_point_rejected(self):
        with pytest.raises(ValueError):
            NamedEntityTable([(0xE9, "eacute"), (0xE9, "eacute2")])

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValueError):
            NamedEntityTable([(0xE9, "eacute"), (0xEA, "eacute")])

    def test_repr(self):
        t = NamedEntityTable([(0xE9, "eacute")])
        assert repr(t) == "NamedEntityTable(canonical=1, names=1)"


class TestTableSources:
    def test_canonical_list_has_unique_code_points(self):
        code_points = [cp for cp, _ in CANONICAL_ENTITY_NAMES]
        assert len(code_points) == len(set(code_points))

    def test_html5_names_exclude_legacy_and_multi(self):
        names = html5_single_code_point_names()
        assert names["amp"] == 0x26
        assert "fjlig" not in names
        assert not any(name.endswith(";") for name in names)

    def test_build_default_table_is_fresh(self):
        assert build_default_table() is not get_entity_table()
