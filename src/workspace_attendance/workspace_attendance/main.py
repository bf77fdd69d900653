from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_hhmm
from .common.http import register_error_handlers
from .container import AttendanceRules, Container, build_container
from .core.constants import HALF_DAY_HOURS, LATE_CUTOFF, NOTES_MAX_LENGTH, NOTES_MIN_LENGTH
from .database.bootstrap import apply_schema, list_tables
from .workcalendar.controller import register as register_calendar

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def rules_from_settings(settings) -> AttendanceRules:
    late_cutoff = getattr(settings, "LATE_CUTOFF", None)
    return AttendanceRules(
        late_cutoff=parse_hhmm(late_cutoff) if late_cutoff else LATE_CUTOFF,
        half_day_hours=float(getattr(settings, "HALF_DAY_HOURS", HALF_DAY_HOURS)),
        notes_min_length=int(getattr(settings, "NOTES_MIN_LENGTH", NOTES_MIN_LENGTH)),
        notes_max_length=int(getattr(settings, "NOTES_MAX_LENGTH", NOTES_MAX_LENGTH)),
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Flask app factory.

    Tests pass a container built over in-memory repositories; otherwise the
    MySQL container is built from the settings module selected by APP_ENV.
    """

    load_dotenv(override=False)

    from config import get_settings_module

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, rules=rules_from_settings(settings))

    app.extensions["container"] = container

    register_error_handlers(app)
    register_attendance(app, container)
    register_calendar(app, container)

    return app
