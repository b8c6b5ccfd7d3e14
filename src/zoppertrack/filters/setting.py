from __future__ import annotations

import logging
import threading
from typing import Callable

from ..attendance.model import DateRangeSelector

logger = logging.getLogger(__name__)

Listener = Callable[[DateRangeSelector], None]


class DateFilterSetting:
    """The admin's selected date filter, with change notifications.

    Used as the default range whenever a request does not name one.
    """

    def __init__(self, initial: DateRangeSelector):
        self._value = initial
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @property
    def value(self) -> DateRangeSelector:
        return self._value

    def set(self, new_value: DateRangeSelector) -> bool:
        """Store `new_value`; returns False (and notifies nobody) if unchanged."""
        with self._lock:
            if new_value == self._value:
                return False
            self._value = new_value
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(new_value)
            except Exception:
                logger.exception("Date filter listener %r failed", listener)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
