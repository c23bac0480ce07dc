"""Persistence adapters for hexpath maps."""

from hexpath.repository.json_store import JsonMapRepository

__all__ = ["JsonMapRepository"]
