from __future__ import annotations

import atexit
import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_CLASS_ID, DEFAULT_PORT
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "DB_PATH",
    "PORT",
    "DEFAULT_CLASS_ID",
    "REPORT_MISSING_RECORDS",
    "LOG_LEVEL",
    "DEBUG",
    "TESTING",
    "AUTO_INIT_DB",
)


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}
    values.update(overrides or {})
    values["SETTINGS_MODULE"] = settings_module
    return values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["PORT"] = int(settings.get("PORT", DEFAULT_PORT))
    app.config["DB_PATH"] = str(settings["DB_PATH"])

    logger.info("[attendance-tracker] settings=%s db=%s", settings["SETTINGS_MODULE"], app.config["DB_PATH"])

    container = build_container(
        db_path=app.config["DB_PATH"],
        default_class_id=str(settings.get("DEFAULT_CLASS_ID") or DEFAULT_CLASS_ID),
        report_missing=bool(settings.get("REPORT_MISSING_RECORDS", False)),
    )
    atexit.register(container.conn.close)
    app.extensions["attendance_tracker"] = container

    if settings.get("AUTO_INIT_DB", True):
        apply_schema(container.conn)
        logger.info("[attendance-tracker] schema ready (tables=%d)", len(list_tables(container.conn)))

    CORS(app)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    register_attendance(app, container)

    return app
