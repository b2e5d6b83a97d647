"""Identifier -> points storage used by the HTTP layer; the rules engine never touches it."""

from .points_store import InMemoryPointsStore, PointsStore

__all__ = ["InMemoryPointsStore", "PointsStore"]
