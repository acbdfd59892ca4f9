"""
Database initialization.

Creates all tables registered on ``SQLModel.metadata``.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Creates the ``swimming_practices`` table (and its constraints) if it
    does not exist yet. Uses the application engine unless ``bind`` is given.
    """
    if bind is None:
        from app.db.session import engine as bind

    logger.info("Creating database tables on {}", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
