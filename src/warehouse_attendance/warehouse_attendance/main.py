from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.geofence import Geofence
from .container import Container, build_container
from .core import constants
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees


def _geofence_from_settings(settings: ModuleType) -> Geofence:
    return Geofence(
        latitude=float(getattr(settings, "WAREHOUSE_LATITUDE", constants.DEFAULT_WAREHOUSE_LATITUDE)),
        longitude=float(getattr(settings, "WAREHOUSE_LONGITUDE", constants.DEFAULT_WAREHOUSE_LONGITUDE)),
        max_radius_meters=int(getattr(settings, "MAX_RADIUS_METERS", constants.DEFAULT_MAX_RADIUS_METERS)),
    )


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    """Application factory.

    ``container`` lets tests inject in-memory repositories; otherwise MySQL
    repositories are built from the settings module's ``DB_CONFIG``.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PUBLIC_BASE_URL"] = getattr(settings, "PUBLIC_BASE_URL", None)
    app.logger.setLevel(logging.DEBUG if app.config["DEBUG"] else logging.INFO)

    geofence = _geofence_from_settings(settings)
    timezone = getattr(settings, "TIMEZONE", constants.DEFAULT_TIMEZONE)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s geofence=(%s, %s) r=%sm tz=%s",
            settings_module, DBConfig.from_dict(db_config).describe(),
            geofence.latitude, geofence.longitude, geofence.max_radius_meters, timezone,
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config)
            app.logger.info("demo seed ready")

        container = build_container(db_config=db_config, geofence=geofence, timezone=timezone)

    register_attendance(app, container)
    register_employees(app, container)

    return app
