from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hexpath.domain.enums import TileProperty
from hexpath.domain.models import MapData


class MapDocument(BaseModel):
    """Text form of a map store, field names as stored on disk."""

    model_config = ConfigDict(populate_by_name=True)

    map: list[list[int]] = Field(
        ..., alias="Map", description="Cost layers, row-major, 0 = impassable"
    )
    property_map: list[list[TileProperty]] = Field(
        default_factory=list,
        alias="PropertyMap",
        description="Terrain tag layers, same shape as the cost layers",
    )
    rows: int = Field(..., alias="Rows", gt=0, description="Number of grid rows")
    columns: int = Field(..., alias="Columns", gt=0, description="Number of grid columns")

    @classmethod
    def from_map_data(cls, map_data: MapData) -> MapDocument:
        return cls(
            map=[list(layer) for layer in map_data.layers],
            property_map=[list(layer) for layer in map_data.properties],
            rows=map_data.rows,
            columns=map_data.columns,
        )

    def to_map_data(self) -> MapData:
        return MapData.create(self.map, self.rows, self.columns, self.property_map)
