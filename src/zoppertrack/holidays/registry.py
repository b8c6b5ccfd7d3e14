from __future__ import annotations

import logging
import threading
from typing import Optional

from ..common.datetime_utils import format_date_key_slashed, to_date_key
from ..common.validators import require_date_key
from ..core.exceptions import PayloadError, UpstreamError
from .model import Holiday
from .repository import HolidayStore

logger = logging.getLogger(__name__)


class HolidayRegistry:
    """Local holiday set kept in sync with the remote holiday store.

    Toggles are applied locally first and reverted when the remote call
    fails. Concurrent toggles of the same day are not coalesced; the lock
    only protects the set itself and is never held across a network call.
    """

    def __init__(self, store: HolidayStore):
        self._store = store
        self._lock = threading.Lock()
        self._dates: set[str] = set()
        self._ids: dict[str, str] = {}
        self._names: dict[str, str] = {}

    def load(self) -> frozenset[str]:
        holidays = self._store.list_holidays()
        with self._lock:
            self._dates = {h.date_key for h in holidays}
            self._ids = {h.date_key: h.id for h in holidays}
            self._names = {h.date_key: h.name for h in holidays}
            snapshot = frozenset(self._dates)
        logger.info("Loaded %d holidays", len(snapshot))
        return snapshot

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._dates)

    def contains(self, date_key: str) -> bool:
        with self._lock:
            return date_key in self._dates

    def holidays(self) -> list[dict]:
        with self._lock:
            return [{"date": d, "name": self._names.get(d, "")} for d in sorted(self._dates)]

    def toggle(self, date_key: str) -> bool:
        """Flip `date_key`; return whether it is a holiday afterwards."""
        date_key = to_date_key(require_date_key(date_key))

        with self._lock:
            was_holiday = date_key in self._dates
            if was_holiday:
                self._dates.discard(date_key)
            else:
                self._dates.add(date_key)

        try:
            if was_holiday:
                self._remove_remote(date_key)
            else:
                self._add_remote(date_key)
        except (UpstreamError, PayloadError) as e:
            if not was_holiday and isinstance(e, PayloadError) and self._exists_remotely(date_key):
                # Created upstream; only the response was unreadable.
                logger.warning("Holiday %s created but response was malformed: %s", date_key, e)
                return True
            logger.error("Holiday toggle for %s failed, rolling back: %s", date_key, e)
            with self._lock:
                if was_holiday:
                    self._dates.add(date_key)
                else:
                    self._dates.discard(date_key)
            return was_holiday

        return not was_holiday

    def _exists_remotely(self, date_key: str) -> bool:
        try:
            return self._find_remote_id(date_key) is not None
        except (UpstreamError, PayloadError) as e:
            logger.error("Could not confirm holiday %s upstream: %s", date_key, e)
            return False

    def _add_remote(self, date_key: str) -> None:
        created = self._store.create_holiday(
            date_key=date_key,
            name=f"Holiday - {format_date_key_slashed(date_key)}",
        )
        with self._lock:
            self._ids[date_key] = created.id
            self._names[date_key] = created.name

    def _remove_remote(self, date_key: str) -> None:
        holiday_id = self._ids.get(date_key) or self._find_remote_id(date_key)
        if holiday_id is None:
            logger.warning("No remote holiday for %s; treating it as already removed", date_key)
        else:
            self._store.delete_holiday(holiday_id)
        with self._lock:
            self._ids.pop(date_key, None)
            self._names.pop(date_key, None)

    def _find_remote_id(self, date_key: str) -> Optional[str]:
        match: Optional[Holiday] = next(
            (h for h in self._store.list_holidays() if h.date_key == date_key),
            None,
        )
        return match.id if match else None
