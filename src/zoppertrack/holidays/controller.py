from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import PayloadError, UpstreamError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    registry = container.holiday_registry

    def _loaded_holidays():
        try:
            registry.load()
        except (UpstreamError, PayloadError) as e:
            logger.error("Holiday load failed: %s", e)
            return jsonify({"error": str(e)}), 502
        return jsonify({"holidays": registry.holidays()})

    @app.route("/admin/holidays", methods=["GET"], endpoint="holidays_list")
    def holidays_list():
        return _loaded_holidays()

    @app.route("/admin/holidays/reload", methods=["POST"], endpoint="holidays_reload")
    def holidays_reload():
        # Re-sync after the store was edited elsewhere, e.g. by scripts/init_holidays.py.
        return _loaded_holidays()

    @app.route("/admin/holidays/<date_key>/toggle", methods=["POST"], endpoint="holidays_toggle")
    def holidays_toggle(date_key: str):
        # Failures are rolled back inside the registry; the caller only sees
        # the resulting state.
        is_holiday = registry.toggle(date_key)
        return jsonify({"date": date_key, "isHoliday": is_holiday})
