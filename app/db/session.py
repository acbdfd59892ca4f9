"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for ``url``.

    PostgreSQL gets a bounded connection pool; SQLite is opened so the
    connection can be shared with FastAPI's worker threads.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})

    if url.startswith("postgres://"):
        # SQLAlchemy only accepts the postgresql:// scheme
        url = url.replace("postgres://", "postgresql://", 1)

    return create_engine(
        url,
        echo=echo,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,  # Connection pool size
        max_overflow=10  # Max connections beyond pool_size
    )


# Create database engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @app.get("/practices")
        def list_practices(db: Session = Depends(get_db)):
            return SwimmingPracticeService(db).get_practices()
    """
    with Session(engine) as session:
        yield session
