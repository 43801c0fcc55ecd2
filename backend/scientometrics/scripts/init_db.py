"""
Initialize database schema.

Run ONCE when:
- first local setup
- new environment deployment

    python -m scientometrics.scripts.init_db
"""

import logging

from scientometrics.database.db.models import Base
from scientometrics.database.db.session import engine
from scientometrics.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def init_db(bind=engine) -> None:
    Base.metadata.create_all(bind=bind)


def main():
    setup_logging(to_file=False)
    logger.info(f"🔧 Initializing database schema at {engine.url.render_as_string(hide_password=True)}...")
    init_db()
    logger.info("✅ Database schema initialized.")


if __name__ == "__main__":
    main()
