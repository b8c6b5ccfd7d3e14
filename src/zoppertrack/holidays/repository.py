from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayStore(Protocol):
    def list_holidays(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def create_holiday(self, *, date_key: str, name: str) -> Holiday:
        raise NotImplementedError

    def delete_holiday(self, holiday_id: str) -> None:
        raise NotImplementedError
