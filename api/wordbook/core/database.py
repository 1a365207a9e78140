from sqlmodel import SQLModel, create_engine, Session
from wordbook.core.config import settings
import logging

logger = logging.getLogger(__name__)


def normalize_database_url(db_url: str) -> str:
    """SQLAlchemy prefers postgresql:// over postgres://"""
    if db_url.startswith("postgres://"):
        return db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def build_engine(db_url: str):
    """Create the engine, skipping pool sizing for SQLite."""
    db_url = normalize_database_url(db_url)
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},  # needed for SQLite
        )
    return create_engine(
        db_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


logger.info(f"Connecting to database: {settings.database_url[:20]}...")  # Log partial URL for debugging

engine = build_engine(settings.database_url)


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


def init_db():
    """Initialize database tables."""
    # Import models so they register with SQLModel.metadata
    from wordbook import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
