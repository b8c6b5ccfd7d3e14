from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_TODAY_FETCH_WINDOW
from .core.exceptions import ValidationError
from .core.logging_setup import configure_logging
from .holidays.controller import register as register_holidays

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        api_config = getattr(settings, "API_CONFIG")
        logger.info("settings=%s api=%s", settings_module, api_config.get("base_url"))
        container = build_container(
            api_config=api_config,
            today_window=getattr(settings, "TODAY_FETCH_WINDOW", DEFAULT_TODAY_FETCH_WINDOW),
            default_filter=getattr(settings, "DEFAULT_DATE_FILTER", None),
        )

    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    register_attendance(app, container)
    register_holidays(app, container)

    return app
