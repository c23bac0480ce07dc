"""HTTP routes for the hexpath API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from hexpath.api.runtime import ApiState
from hexpath.domain.models import MapData
from hexpath.domain.pathfinding import PathFinder
from hexpath.schemas import (
    CubeCoordinatesModel,
    MapDocument,
    OffsetCoordinatesModel,
    WeightedCoordinatesModel,
)
from hexpath.utils.hex_math import CubeCoordinates

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class MapSummary(BaseModel):
    name: str
    rows: int
    columns: int
    layer_count: int

    @classmethod
    def build(cls, name: str, map_data: MapData) -> MapSummary:
        return cls(
            name=name,
            rows=map_data.rows,
            columns=map_data.columns,
            layer_count=len(map_data.layers),
        )


class CostLayerResponse(BaseModel):
    layer: int
    costs: list[int]


class PathRequest(BaseModel):
    start: CubeCoordinatesModel
    end: CubeCoordinatesModel
    layer: int = 0


class OffsetPathRequest(BaseModel):
    start: OffsetCoordinatesModel
    end: OffsetCoordinatesModel
    layer: int = 0


class ReachableRequest(BaseModel):
    start: CubeCoordinatesModel
    max_cost: int
    layer: int = 0


class AttackableRequest(BaseModel):
    start: CubeCoordinatesModel
    move_range: int
    attack_range: int
    layer: int = 0
    non_blocking_obstacles: list[CubeCoordinatesModel] = Field(default_factory=list)
    blocking_obstacles: list[CubeCoordinatesModel] = Field(default_factory=list)
    include_reachable: bool = False


class WeightedPathRequest(BaseModel):
    coordinates: list[CubeCoordinatesModel]
    layer: int = 0


class CubePathResponse(BaseModel):
    path: list[CubeCoordinatesModel]


class OffsetPathResponse(BaseModel):
    path: list[OffsetCoordinatesModel]


class TilesResponse(BaseModel):
    tiles: list[CubeCoordinatesModel]


class WeightedPathResponse(BaseModel):
    path: list[WeightedCoordinatesModel]


def _pathfinder(state: ApiState, name: str) -> PathFinder:
    try:
        return state.maps.pathfinder(name)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="map not found") from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


def _tiles(cells: list[CubeCoordinates]) -> TilesResponse:
    return TilesResponse(tiles=[CubeCoordinatesModel.from_domain(cell) for cell in cells])


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "map_count": len(state.maps.list_maps()),
        "max_iterations": state.settings.max_iterations,
    }


@router.get("/maps", response_model=list[MapSummary])
async def list_maps(state: ApiStateDep) -> list[MapSummary]:
    summaries: list[MapSummary] = []
    for name in state.maps.list_maps():
        summaries.append(MapSummary.build(name, _pathfinder(state, name).map_data))
    return summaries


@router.put("/maps/{name}", response_model=MapSummary, status_code=status.HTTP_201_CREATED)
async def put_map(name: str, document: MapDocument, state: ApiStateDep) -> MapSummary:
    try:
        map_data = state.maps.save_map(name, document.to_map_data())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return MapSummary.build(name, map_data)


@router.get("/maps/{name}", response_model=MapDocument, response_model_by_alias=True)
async def get_map(name: str, state: ApiStateDep) -> MapDocument:
    return MapDocument.from_map_data(_pathfinder(state, name).map_data)


@router.delete("/maps/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_map(name: str, state: ApiStateDep) -> Response:
    try:
        state.maps.delete_map(name)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="map not found") from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/maps/{name}/layers/{layer}/costs", response_model=CostLayerResponse)
async def get_costs(name: str, layer: int, state: ApiStateDep) -> CostLayerResponse:
    finder = _pathfinder(state, name)
    return CostLayerResponse(layer=layer, costs=finder.get_cost_map(layer))


@router.post("/maps/{name}/path", response_model=CubePathResponse)
async def compute_path(name: str, request: PathRequest, state: ApiStateDep) -> CubePathResponse:
    finder = _pathfinder(state, name)
    path = finder.compute_path(request.start.to_domain(), request.end.to_domain(), request.layer)
    return CubePathResponse(path=[CubeCoordinatesModel.from_domain(cell) for cell in path])


@router.post("/maps/{name}/path/offset", response_model=OffsetPathResponse)
async def compute_path_offset(
    name: str, request: OffsetPathRequest, state: ApiStateDep
) -> OffsetPathResponse:
    finder = _pathfinder(state, name)
    path = finder.compute_path_offset(
        request.start.to_domain(), request.end.to_domain(), request.layer
    )
    return OffsetPathResponse(path=[OffsetCoordinatesModel.from_domain(cell) for cell in path])


@router.post("/maps/{name}/reachable", response_model=TilesResponse)
async def reachable_tiles(
    name: str, request: ReachableRequest, state: ApiStateDep
) -> TilesResponse:
    finder = _pathfinder(state, name)
    cells = finder.reachable_tiles(request.start.to_domain(), request.max_cost, request.layer)
    return _tiles(cells)


@router.post("/maps/{name}/attackable", response_model=TilesResponse)
async def attackable_tiles(
    name: str, request: AttackableRequest, state: ApiStateDep
) -> TilesResponse:
    finder = _pathfinder(state, name)
    cells = finder.attackable_tiles(
        request.start.to_domain(),
        request.move_range,
        request.attack_range,
        request.layer,
        non_blocking_obstacles=[cell.to_domain() for cell in request.non_blocking_obstacles],
        blocking_obstacles=[cell.to_domain() for cell in request.blocking_obstacles],
        include_reachable=request.include_reachable,
    )
    return _tiles(cells)


@router.get("/maps/{name}/neighbors", response_model=TilesResponse)
async def neighbor_tiles(
    name: str,
    state: ApiStateDep,
    x: Annotated[int, Query()],
    y: Annotated[int, Query()],
    z: Annotated[int, Query()],
) -> TilesResponse:
    try:
        center = CubeCoordinates(x, y, z)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    finder = _pathfinder(state, name)
    return _tiles(finder.neighbor_tiles(center))


@router.post("/maps/{name}/weighted-path", response_model=WeightedPathResponse)
async def create_weighted_path(
    name: str, request: WeightedPathRequest, state: ApiStateDep
) -> WeightedPathResponse:
    finder = _pathfinder(state, name)
    try:
        weighted = finder.create_weighted_path(
            [cell.to_domain() for cell in request.coordinates], request.layer
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return WeightedPathResponse(path=[WeightedCoordinatesModel.from_domain(w) for w in weighted])
