from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admins.controller import register as register_admins
from .attendance.controller import register as register_attendance
from .attendance.window import CheckinWindow
from .common.logging import configure_logging, get_logger
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .members.controller import register as register_members
from .reporting.controller import register as register_reporting

logger = get_logger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Flask app factory.

    Pass a ready `container` to run against other repositories (tests use
    in-memory ones); otherwise MySQL repositories are built from settings.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        target = DBConfig.from_dict(db_config)
        logger.info(
            "settings=%s db=%s@%s:%s/%s", settings_module, target.user, target.host, target.port, target.database
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(target)
            logger.info("schema ready (tables=%d)", len(list_tables(target)))

        window = CheckinWindow.from_settings(
            getattr(settings, "CHECKIN_WINDOW_START", None),
            getattr(settings, "CHECKIN_WINDOW_END", None),
        )
        container = build_container(db_config=db_config, window=window)

    register_admins(app, container)
    register_members(app, container)
    register_attendance(app, container)
    register_reporting(app, container)

    return app
