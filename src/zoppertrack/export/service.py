from __future__ import annotations

import calendar
import io
import logging
from dataclasses import dataclass
from datetime import date

import pandas as pd

from ..attendance.model import AttendanceCell, AttendanceMatrix, DateRangeSelector
from ..common.datetime_utils import format_date_key_display
from ..core.constants import EXPORT_HEADER_NAME, EXPORT_HEADER_TOTAL, EXPORT_SHEET_NAME
from ..core.enums import CellStatus, DateFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes


def cell_text(cell: AttendanceCell) -> str:
    status = cell.status
    if status == CellStatus.VISITED and cell.stores:
        return f"{status.value} ({', '.join(cell.stores)})"
    return status.value


def filter_label(selector: DateRangeSelector) -> str:
    if selector.mode == DateFilter.CUSTOM:
        label = f"{selector.mode.value} {calendar.month_name[int(selector.month)]} {selector.year}"
    else:
        label = selector.mode.value
    return label.replace(" ", "_")


def export_filename(selector: DateRangeSelector, today: date) -> str:
    return f"Attendance_Report_{filter_label(selector)}_{today.isoformat()}.xlsx"


class AttendanceExportService:
    """Writes the attendance matrix to a one-sheet Excel workbook."""

    def build_rows(self, matrix: AttendanceMatrix) -> tuple[list[str], list[list[str]]]:
        header = [EXPORT_HEADER_NAME, EXPORT_HEADER_TOTAL] + [format_date_key_display(k) for k in matrix.date_keys]

        rows = []
        for row in matrix.rows:
            s = row.summary
            rows.append(
                [row.executive.name, f"{s.total_text} ({s.percentage}%)"]
                + [cell_text(c) for c in row.cells]
            )
        return header, rows

    def to_xlsx(self, matrix: AttendanceMatrix, *, today: date) -> ExportFile:
        header, rows = self.build_rows(matrix)
        df = pd.DataFrame(rows, columns=header)

        # Build the workbook in memory; nothing touches the disk.
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)

        filename = export_filename(matrix.selector, today)
        logger.info("Exported %d executives to %s", len(rows), filename)
        return ExportFile(filename=filename, content=output.getvalue())
