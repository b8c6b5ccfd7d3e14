from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file, url_for

from ..container import Container
from ..core.constants import EXPORT_MIMETYPE
from ..core.exceptions import PayloadError, UpstreamError
from ..filters.params import selector_from_params, selector_to_dict
from .model import AttendanceMatrix

logger = logging.getLogger(__name__)


def matrix_to_dict(matrix: AttendanceMatrix) -> dict:
    return {
        **selector_to_dict(matrix.selector),
        "dateKeys": list(matrix.date_keys),
        "executives": [
            {
                "id": row.executive.id,
                "name": row.executive.name,
                "presentDays": row.summary.present_days,
                "workingDays": row.summary.working_days,
                "percentage": row.summary.percentage,
                "cells": [
                    {
                        "date": c.date_key,
                        "status": c.status.value,
                        "visited": c.visited,
                        "stores": list(c.stores),
                        "isWeekend": c.is_weekend,
                        "isHoliday": c.is_holiday,
                    }
                    for c in row.cells
                ],
            }
            for row in matrix.rows
        ],
    }


def register(app: Flask, container: Container) -> None:
    def _selector():
        return selector_from_params(request.args, default=container.date_filter.value)

    def _upstream_failed(e: Exception):
        """Page-level error: message plus a link that re-issues the same request."""
        logger.error("Attendance load failed: %s", e)
        return jsonify({"error": str(e), "retry": request.full_path.rstrip("?")}), 502

    @app.route("/admin/attendance", methods=["GET"], endpoint="attendance_matrix")
    def attendance_matrix():
        selector = _selector()
        try:
            matrix = container.attendance_service.build_matrix(
                selector, executive_id=request.args.get("executiveId") or None
            )
        except (UpstreamError, PayloadError) as e:
            return _upstream_failed(e)

        body = matrix_to_dict(matrix)
        body["exportUrl"] = url_for("attendance_export", **request.args.to_dict())
        return jsonify(body)

    @app.route("/admin/attendance.xlsx", methods=["GET"], endpoint="attendance_export")
    def attendance_export():
        selector = _selector()
        try:
            matrix = container.attendance_service.build_matrix(
                selector, executive_id=request.args.get("executiveId") or None
            )
        except (UpstreamError, PayloadError) as e:
            return _upstream_failed(e)

        export = container.export_service.to_xlsx(matrix, today=container.attendance_service.today())
        return send_file(
            io.BytesIO(export.content),
            mimetype=EXPORT_MIMETYPE,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/admin/attendance/date-filter", methods=["GET"], endpoint="attendance_date_filter")
    def attendance_date_filter():
        return jsonify(selector_to_dict(container.date_filter.value))

    @app.route("/admin/attendance/date-filter", methods=["PUT"], endpoint="attendance_date_filter_update")
    def attendance_date_filter_update():
        data = request.get_json(silent=True) or {}
        container.date_filter.set(selector_from_params(data))
        return jsonify(selector_to_dict(container.date_filter.value))
