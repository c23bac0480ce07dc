"""Enumerations used by the hexpath domain."""

from __future__ import annotations

from enum import StrEnum


class TileProperty(StrEnum):
    """Terrain tags stored alongside every cost layer.

    The text map format stores the member name, the binary format its
    ordinal (declaration order).
    """

    NONE = "NONE"
    RIVER = "RIVER"
    RIVERBANK = "RIVERBANK"

    @property
    def ordinal(self) -> int:
        return list(TileProperty).index(self)

    @classmethod
    def from_ordinal(cls, value: int) -> TileProperty:
        members = list(cls)
        if not 0 <= value < len(members):
            raise ValueError(f"unknown tile property ordinal: {value}")
        return members[value]


RIVER_TAGS = frozenset({TileProperty.RIVER, TileProperty.RIVERBANK})
