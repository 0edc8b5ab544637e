from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from daily_checkin.common.logging import configure_logging, get_logger
from daily_checkin.database.bootstrap import apply_schema, list_tables
from daily_checkin.database.connection import DBConfig

logger = get_logger("daily_checkin.scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    target = DBConfig.from_dict(settings.DB_CONFIG)
    apply_schema(target)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        target.user, target.host, target.port, target.database, len(list_tables(target)),
    )


if __name__ == "__main__":
    main()
