from __future__ import annotations

import importlib
import logging
import os

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.logging import setup_logging
from .schedules.controller import register as register_schedules
from .seats.controller import register as register_seats

logger = logging.getLogger(__name__)

_SERVICE_SETTINGS = (
    "CHECKIN_BUFFER_MINUTES",
    "SEAT_PROBE_LIMIT",
    "FALLBACK_GRID_ROWS",
    "FALLBACK_GRID_COLUMNS",
    "QR_PREFIX",
)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(environment=os.getenv("APP_ENV", "development"), level=getattr(settings, "LOG_LEVEL", None))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        service_settings = {k: getattr(settings, k) for k in _SERVICE_SETTINGS if hasattr(settings, k)}
        container = build_container(db_config=db_config, settings=service_settings)
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    app.extensions["classroom_attendance"] = container

    register_schedules(app, container)
    register_seats(app, container)
    register_attendance(app, container)

    return app
