"""Tests for the map store and search node dataclasses."""

from __future__ import annotations

import pytest

from hexpath.domain.enums import RIVER_TAGS, TileProperty
from hexpath.domain.models import MapData, MapDataError, SearchNode, WeightedCoordinates
from hexpath.utils.hex_math import CubeCoordinates


class TestTileProperty:
    def test_values_are_names(self):
        assert [tag.value for tag in TileProperty] == ["NONE", "RIVER", "RIVERBANK"]

    def test_ordinals(self):
        assert TileProperty.NONE.ordinal == 0
        assert TileProperty.RIVERBANK.ordinal == 2
        assert TileProperty.from_ordinal(1) is TileProperty.RIVER

    def test_unknown_ordinal(self):
        with pytest.raises(ValueError, match="unknown tile property"):
            TileProperty.from_ordinal(3)

    def test_river_tags(self):
        assert TileProperty.NONE not in RIVER_TAGS
        assert {TileProperty.RIVER, TileProperty.RIVERBANK} == RIVER_TAGS


class TestMapData:
    def test_create_fills_missing_properties(self):
        map_data = MapData.create([[1, 2, 3, 4]], 2, 2)
        assert map_data.layers == ((1, 2, 3, 4),)
        assert map_data.properties == ((TileProperty.NONE,) * 4,)
        assert map_data.size == 4

    def test_create_accepts_tag_names(self):
        map_data = MapData.create([[1, 1]], 1, 2, [["RIVER", "NONE"]])
        assert map_data.properties[0] == (TileProperty.RIVER, TileProperty.NONE)

    def test_mismatched_property_count_falls_back_to_none(self):
        map_data = MapData.create([[1, 1], [2, 2]], 1, 2, [["RIVER", "RIVER"]])
        assert map_data.properties == ((TileProperty.NONE,) * 2,) * 2

    def test_zero_layers_allowed(self):
        map_data = MapData.create([], 3, 3)
        assert map_data.layers == ()
        assert not map_data.has_layer(0)

    def test_has_layer(self):
        map_data = MapData.create([[1], [1]], 1, 1)
        assert map_data.has_layer(0)
        assert map_data.has_layer(1)
        assert not map_data.has_layer(2)
        assert not map_data.has_layer(-1)

    @pytest.mark.parametrize(("rows", "columns"), [(0, 4), (4, 0), (-1, 2)])
    def test_rejects_non_positive_extents(self, rows, columns):
        with pytest.raises(MapDataError, match="positive"):
            MapData.create([[1] * 4], rows, columns)

    def test_rejects_wrong_layer_size(self):
        with pytest.raises(MapDataError, match="expected 4"):
            MapData.create([[1, 1, 1]], 2, 2)

    def test_rejects_negative_cost(self):
        with pytest.raises(MapDataError, match="negative"):
            MapData.create([[1, -1, 1, 1]], 2, 2)

    def test_rejects_wrong_property_size(self):
        with pytest.raises(MapDataError, match="property layer 0"):
            MapData.create([[1, 1, 1, 1]], 2, 2, [["NONE"]])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            MapData.create([[1]], 0, 1)


class TestSearchNode:
    def test_equality_ignores_costs(self):
        cell = CubeCoordinates(1, 0, -1)
        first = SearchNode(cell, 1, g=3, h=2, f=5)
        second = SearchNode(cell, 1)
        assert first == second
        assert hash(first) == hash(second)
        assert first != SearchNode(CubeCoordinates(0, 0, 0), 0)

    def test_score(self):
        node = SearchNode(CubeCoordinates(0, 0, 0), 0)
        node.score(4, 3)
        assert (node.g, node.h, node.f) == (4, 3, 7)


def test_weighted_coordinates_is_a_value():
    cell = CubeCoordinates(0, 1, -1)
    assert WeightedCoordinates(cell, 2) == WeightedCoordinates(cell, 2)
    assert WeightedCoordinates(cell, 2) != WeightedCoordinates(cell, 3)
