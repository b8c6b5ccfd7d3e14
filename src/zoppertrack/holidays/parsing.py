from __future__ import annotations

from typing import Any

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import PayloadError
from ..common.payload import as_text, parse_items, require_field, require_list, require_mapping
from .model import Holiday


def parse_holiday(obj: Any) -> Holiday:
    item = require_mapping(obj, "holiday")
    date_key = require_field(item, "date", "holiday")[:10]
    try:
        parse_iso_date(date_key)
    except ValueError:
        raise PayloadError(f"holiday date '{date_key}' is not YYYY-MM-DD")
    return Holiday(
        id=require_field(item, "id", "holiday"),
        date_key=date_key,
        name=as_text(item.get("name")),
    )


def parse_holidays_payload(payload: Any) -> list[Holiday]:
    """`{holidays: [{id, date, name}]}` -> holidays."""
    return parse_items(require_list(payload, "holidays"), parse_holiday, "holiday")


def parse_created_holiday(payload: Any) -> Holiday:
    """POST answers `{holiday: {...}}`; accept a bare record too."""
    body = require_mapping(payload, "response body")
    return parse_holiday(body.get("holiday", body))
