from __future__ import annotations

from typing import Any

from ..common.payload import as_text, parse_items, require_field, require_list, require_mapping
from .model import Executive, VisitRecord


def parse_executive(obj: Any) -> Executive:
    item = require_mapping(obj, "executive")
    return Executive(
        id=require_field(item, "id", "executive"),
        name=as_text(item.get("name")).strip(),
    )


def parse_visit(obj: Any) -> VisitRecord:
    item = require_mapping(obj, "visit")
    return VisitRecord(
        id=require_field(item, "id", "visit"),
        executive_id=require_field(item, "executiveId", "visit"),
        executive_name=as_text(item.get("executiveName")),
        visit_date=as_text(item.get("visitDate")),
        store_name=as_text(item.get("storeName")),
    )


def parse_executives_payload(payload: Any) -> list[Executive]:
    """`{executives: [{id, name}]}` -> executives sorted by name."""
    executives = parse_items(require_list(payload, "executives"), parse_executive, "executive")
    executives.sort(key=lambda e: e.name.casefold())
    return executives


def parse_visits_payload(payload: Any) -> list[VisitRecord]:
    """`{visits: [...]}` -> visit records, in API order."""
    return parse_items(require_list(payload, "visits"), parse_visit, "visit")
