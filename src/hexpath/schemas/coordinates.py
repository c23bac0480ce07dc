from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from hexpath.domain.models import WeightedCoordinates
from hexpath.utils.hex_math import CubeCoordinates, OffsetCoordinates


class CubeCoordinatesModel(BaseModel):
    x: int = Field(..., description="Axial column (q)")
    y: int = Field(..., description="Row (r)")
    z: int = Field(..., description="Third cube axis, -x - y")

    @model_validator(mode="after")
    def _check_sum(self) -> CubeCoordinatesModel:
        if self.x + self.y + self.z != 0:
            raise ValueError("cube coordinates must sum to zero")
        return self

    @classmethod
    def from_domain(cls, coordinates: CubeCoordinates) -> CubeCoordinatesModel:
        return cls(x=coordinates.x, y=coordinates.y, z=coordinates.z)

    def to_domain(self) -> CubeCoordinates:
        return CubeCoordinates(self.x, self.y, self.z)


class OffsetCoordinatesModel(BaseModel):
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")

    @classmethod
    def from_domain(cls, coordinates: OffsetCoordinates) -> OffsetCoordinatesModel:
        return cls(x=coordinates.x, y=coordinates.y)

    def to_domain(self) -> OffsetCoordinates:
        return OffsetCoordinates(self.x, self.y)


class WeightedCoordinatesModel(BaseModel):
    coordinates: CubeCoordinatesModel
    cost: int

    @classmethod
    def from_domain(cls, weighted: WeightedCoordinates) -> WeightedCoordinatesModel:
        return cls(
            coordinates=CubeCoordinatesModel.from_domain(weighted.coordinates),
            cost=weighted.cost,
        )
