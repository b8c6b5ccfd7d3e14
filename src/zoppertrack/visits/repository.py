from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Executive, VisitRecord


class VisitRepository(Protocol):
    def list_executives(self) -> Sequence[Executive]:
        raise NotImplementedError

    def list_visits(self, *, date_filter: str, executive_id: Optional[str] = None) -> Sequence[VisitRecord]:
        """Visits inside one of the API's named windows ('Last 7 Days', ...)."""

        raise NotImplementedError
