from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional


class PointsStore(ABC):
    @abstractmethod
    def put(self, receipt_id: str, points: int) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def get(self, receipt_id: str) -> Optional[int]:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def all(self) -> Dict[str, int]:  # pragma: no cover
        raise NotImplementedError


class InMemoryPointsStore(PointsStore):
    """Process-lifetime store. Scores are lost on restart."""

    def __init__(self):
        self._points: Dict[str, int] = {}

    def put(self, receipt_id: str, points: int) -> None:
        if not receipt_id or any(ch.isspace() for ch in receipt_id):
            raise ValueError(f"Invalid receipt id: {receipt_id!r}")
        if receipt_id in self._points:
            raise ValueError(f"Receipt id already stored: {receipt_id}")
        self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Optional[int]:
        return self._points.get(receipt_id)

    def all(self) -> Dict[str, int]:
        return dict(self._points)

    def __len__(self) -> int:
        return len(self._points)
