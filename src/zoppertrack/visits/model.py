from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Executive:
    """Field executive as listed by the visit-report filters endpoint."""

    id: str
    name: str


@dataclass(frozen=True)
class VisitRecord:
    """One store visit. `visit_date` keeps the API's 'dd/mm/yyyy' text."""

    id: str
    executive_id: str
    executive_name: str
    visit_date: str
    store_name: str
