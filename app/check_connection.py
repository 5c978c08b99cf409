"""
Report configuration presence and database reachability, e.g. after deploying:

  python -m app.check_connection

Exit status 0 when the database answers, 1 otherwise. Secret values are never printed.
"""

import logging
import sys

from app.core.config import DEFAULT_JWT_SECRET, Settings, get_settings
from app.core.database import check_db_connected, session_scope

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Log which settings are present, then probe the database."""
    settings = get_settings()
    logger.info("APP_ENV=%s PORT=%s", settings.APP_ENV, settings.PORT)
    db_default = settings.DATABASE_URL == Settings.model_fields["DATABASE_URL"].default
    logger.info("DATABASE_URL: %s", "default (local Postgres)" if db_default else "set")
    jwt_default = settings.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET
    logger.info("JWT_SECRET: %s", "default (change before production)" if jwt_default else "set")

    try:
        with session_scope() as db:
            connected = check_db_connected(db)
    except Exception as e:
        logger.exception("Database session could not be opened: %s", e)
        return 1
    if not connected:
        logger.error("Database connection failed")
        return 1
    logger.info("Database connected")
    return 0


if __name__ == "__main__":
    sys.exit(main())
