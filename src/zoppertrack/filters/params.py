from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from ..attendance.model import DateRangeSelector
from ..common.validators import require_int_in_range
from ..core.enums import DateFilter
from ..core.exceptions import ValidationError


def parse_date_filter(value: str) -> DateFilter:
    try:
        return DateFilter((value or "").strip())
    except ValueError:
        allowed = ", ".join(f.value for f in DateFilter)
        raise ValidationError(f"dateFilter must be one of: {allowed}")


def selector_from_params(params: Mapping, default: Optional[DateRangeSelector] = None) -> DateRangeSelector:
    """Build a selector from `dateFilter`, `month`, `year` query/body values."""
    raw = params.get("dateFilter")
    if not raw:
        if default is None:
            raise ValidationError("dateFilter is required")
        return default

    mode = parse_date_filter(raw)
    if mode != DateFilter.CUSTOM:
        return DateRangeSelector(mode)
    return DateRangeSelector.custom(
        month=require_int_in_range(params.get("month"), "month", 1, 12),
        year=require_int_in_range(params.get("year"), "year", 1, 9999),
    )


def selector_to_dict(selector: DateRangeSelector) -> dict:
    out = {"dateFilter": selector.mode.value}
    if selector.mode == DateFilter.CUSTOM:
        out["month"] = selector.month
        out["year"] = selector.year
    return out
