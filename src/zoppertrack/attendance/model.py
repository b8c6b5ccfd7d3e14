from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import CellStatus, DateFilter
from ..core.exceptions import ValidationError
from ..visits.model import Executive


@dataclass(frozen=True)
class DateRangeSelector:
    """Which days the attendance view shows. `month`/`year` only for Custom."""

    mode: DateFilter
    month: Optional[int] = None
    year: Optional[int] = None

    def __post_init__(self):
        if self.mode == DateFilter.CUSTOM:
            if self.month is None or self.year is None:
                raise ValidationError("Custom range needs month and year")
            if not 1 <= int(self.month) <= 12:
                raise ValidationError("month must be between 1 and 12")
            if not 1 <= int(self.year) <= 9999:
                raise ValidationError("year must be between 1 and 9999")

    @classmethod
    def today(cls) -> "DateRangeSelector":
        return cls(DateFilter.TODAY)

    @classmethod
    def yesterday(cls) -> "DateRangeSelector":
        return cls(DateFilter.YESTERDAY)

    @classmethod
    def custom(cls, *, month: int, year: int) -> "DateRangeSelector":
        return cls(DateFilter.CUSTOM, month=int(month), year=int(year))


@dataclass(frozen=True)
class AttendanceCell:
    date_key: str
    executive_id: str
    visited: bool
    stores: tuple[str, ...]
    is_weekend: bool
    is_holiday: bool

    @property
    def is_working_day(self) -> bool:
        return not self.is_weekend and not self.is_holiday

    @property
    def status(self) -> CellStatus:
        if self.is_holiday:
            return CellStatus.HOLIDAY
        if self.is_weekend:
            return CellStatus.SUNDAY
        if self.visited:
            return CellStatus.VISITED
        return CellStatus.NOT_VISITED


@dataclass(frozen=True)
class ExecutiveSummary:
    present_days: int
    working_days: int

    @property
    def percentage(self) -> int:
        if self.working_days == 0:
            return 0
        # Round half up on integers.
        return (self.present_days * 200 + self.working_days) // (2 * self.working_days)

    @property
    def total_text(self) -> str:
        return f"{self.present_days}/{self.working_days}"


@dataclass(frozen=True)
class AttendanceRow:
    executive: Executive
    summary: ExecutiveSummary
    cells: tuple[AttendanceCell, ...]


@dataclass(frozen=True)
class AttendanceMatrix:
    selector: DateRangeSelector
    date_keys: tuple[str, ...]
    rows: tuple[AttendanceRow, ...]

    def cell(self, date_key: str, executive_id: str) -> Optional[AttendanceCell]:
        for row in self.rows:
            if row.executive.id != executive_id:
                continue
            for c in row.cells:
                if c.date_key == date_key:
                    return c
        return None

    def summary_for(self, executive_id: str) -> Optional[ExecutiveSummary]:
        for row in self.rows:
            if row.executive.id == executive_id:
                return row.summary
        return None
