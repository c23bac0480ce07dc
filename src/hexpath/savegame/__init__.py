"""Import and export helpers for hexpath map files.

Two forms are supported:

* Text: a JSON object with ``Map``, ``PropertyMap``, ``Rows`` and ``Columns``
  (see :class:`~hexpath.schemas.map.MapDocument`).
* Binary: little-endian int32 values in a fixed order: ``Rows``, ``Columns``,
  the cost layer count, every cost layer, the property layer count, then
  every property layer as tag ordinals.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from hexpath.domain.enums import TileProperty
from hexpath.domain.models import MapData, MapDataError
from hexpath.schemas.map import MapDocument

TEXT_SUFFIX = ".json"
_INT32 = struct.Struct("<i")


class MapFormatError(ValueError):
    """Raised when a persisted map cannot be decoded."""


def dump_json(map_data: MapData, *, indent: int | None = 2) -> str:
    """Serialize a map store to its text form."""

    return MapDocument.from_map_data(map_data).model_dump_json(by_alias=True, indent=indent)


def load_json(payload: str | bytes) -> MapData:
    """Parse the text form of a map store."""

    try:
        document = MapDocument.model_validate_json(payload)
        return document.to_map_data()
    except (ValidationError, MapDataError) as exc:
        raise MapFormatError(f"invalid map document: {exc}") from exc


def write_binary(map_data: MapData, stream: BinaryIO) -> None:
    """Write the binary form of a map store to ``stream``."""

    size = map_data.size
    stream.write(struct.pack("<3i", map_data.rows, map_data.columns, len(map_data.layers)))
    for layer in map_data.layers:
        stream.write(struct.pack(f"<{size}i", *layer))
    stream.write(_INT32.pack(len(map_data.properties)))
    for layer in map_data.properties:
        stream.write(struct.pack(f"<{size}i", *(tag.ordinal for tag in layer)))


def read_binary(stream: BinaryIO) -> MapData:
    """Read the binary form of a map store from ``stream``.

    Raises:
        MapFormatError: If the header counts are not positive, the payload
            is truncated or holds unknown tag ordinals
    """

    rows = _read_int(stream)
    columns = _read_int(stream)
    layer_count = _read_int(stream)
    if rows <= 0 or columns <= 0 or layer_count <= 0:
        raise MapFormatError(
            f"rows, columns and layer count must be positive, got {rows}, {columns}, {layer_count}"
        )

    size = rows * columns
    layers = [_read_ints(stream, size) for _ in range(layer_count)]
    property_count = _read_int(stream)
    if property_count < 0:
        raise MapFormatError(f"property layer count must not be negative, got {property_count}")
    try:
        properties = [
            [TileProperty.from_ordinal(value) for value in _read_ints(stream, size)]
            for _ in range(property_count)
        ]
        return MapData.create(layers, rows, columns, properties)
    except MapFormatError:
        raise
    except ValueError as exc:
        raise MapFormatError(f"invalid binary map: {exc}") from exc


def save_map(map_data: MapData, path: Path | str) -> Path:
    """Write a map file, choosing the form from the file suffix."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.suffix == TEXT_SUFFIX:
        target.write_text(dump_json(map_data), encoding="utf-8")
    else:
        with target.open("wb") as stream:
            write_binary(map_data, stream)
    return target


def load_map(path: Path | str) -> MapData:
    """Read a map file written by :func:`save_map`."""

    source = Path(path)
    if source.suffix == TEXT_SUFFIX:
        return load_json(source.read_bytes())
    with source.open("rb") as stream:
        return read_binary(stream)


def _read_ints(stream: BinaryIO, count: int) -> tuple[int, ...]:
    data = stream.read(_INT32.size * count)
    try:
        return struct.unpack(f"<{count}i", data)
    except struct.error as exc:
        raise MapFormatError(f"truncated map payload, expected {count} values") from exc


def _read_int(stream: BinaryIO) -> int:
    return _read_ints(stream, 1)[0]
