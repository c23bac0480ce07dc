"""Pydantic schemas for persisted maps and API payloads."""

from hexpath.schemas.coordinates import (
    CubeCoordinatesModel,
    OffsetCoordinatesModel,
    WeightedCoordinatesModel,
)
from hexpath.schemas.map import MapDocument

__all__ = [
    "CubeCoordinatesModel",
    "MapDocument",
    "OffsetCoordinatesModel",
    "WeightedCoordinatesModel",
]
