from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from ..core.exceptions import PayloadError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def as_text(value: Any) -> str:
    return "" if value is None else str(value)


def require_mapping(obj: Any, what: str) -> dict:
    if not isinstance(obj, dict):
        raise PayloadError(f"{what} must be an object")
    return obj


def require_list(payload: Any, field: str) -> list:
    body = require_mapping(payload, "response body")
    items = body.get(field)
    if not isinstance(items, list):
        raise PayloadError(f"response body has no '{field}' list")
    return items


def require_field(item: dict, field: str, what: str) -> str:
    value = as_text(item.get(field)).strip()
    if not value:
        raise PayloadError(f"{what} is missing '{field}'")
    return value


def parse_items(items: list, parse: Callable[[Any], T], what: str) -> list[T]:
    """Parse every item, skipping (and logging) the malformed ones."""
    out: list[T] = []
    for index, item in enumerate(items):
        try:
            out.append(parse(item))
        except PayloadError as e:
            logger.warning("Skipping %s #%d: %s", what, index, e)
    return out
