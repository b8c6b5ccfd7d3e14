from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Holiday:
    """Admin-curated non-working day as stored by the API."""

    id: str
    date_key: str
    name: str
