# File: readonly_cleaner/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from readonly_cleaner.core.config.settings import settings

# check_same_thread=False is needed only for SQLite
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}

# The engine connects lazily, so nothing touches the disk until init_db or a session runs
engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """
    Creates the activity log tables if they don't exist yet.
    Raises OSError if the default data directory can't be created,
    SQLAlchemyError if the database can't be opened.
    """
    from .base import Base
    import readonly_cleaner.features.activity_log.data.sql_models  # noqa: F401

    # The default SQLite file lives in DATA_DIR, which may not exist on first run.
    if settings.DATABASE_URL == settings.DEFAULT_DATABASE_URL:
        settings.ensure_dirs()

    Base.metadata.create_all(bind=engine)


def get_db():
    """Dependency for obtaining a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
