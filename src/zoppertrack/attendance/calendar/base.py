from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class WeekendPolicy(ABC):
    """Decides which calendar days are weekly offs (Strategy Pattern)."""

    @abstractmethod
    def is_weekend(self, day: date) -> bool:
        raise NotImplementedError
