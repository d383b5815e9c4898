import logging
from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

SQLITE_FALLBACK_URL = "sqlite:///./printquote.db"

Base = declarative_base()


def build_database_url(settings: Settings):
    """Resolve the connection URL: DATABASE_URL, then the DB_* parts, then SQLite."""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    if settings.DB_HOST:
        return URL.create(
            "mysql+pymysql",
            username=settings.DB_USER,
            password=settings.DB_PASSWORD,
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            database=settings.DB_DATABASE,
        )

    logger.warning("DATABASE_URL / DB_HOST not found in environment variables, falling back to SQLite")
    return SQLITE_FALLBACK_URL


class Database:
    """Owns the pooled engine and the session factory bound to it."""

    def __init__(self, settings: Settings):
        url = build_database_url(settings)

        if str(url).startswith("sqlite"):
            # SQLite configuration
            self.engine: Engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                echo=False
            )
        else:
            # At most DB_POOL_SIZE connections; extra callers wait for a free one
            self.engine = create_engine(
                url,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=0,
                pool_pre_ping=True,
                pool_recycle=300,
                echo=False
            )

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info(f"Using database: {self.engine.dialect.name}")

    def create_tables(self):
        Base.metadata.create_all(bind=self.engine)


_database: Optional[Database] = None


def get_database(settings: Optional[Settings] = None) -> Database:
    """Get the process-wide database, creating the engine on first use."""
    global _database
    if _database is None:
        _database = Database(settings or get_settings())
    return _database


def get_session_factory() -> sessionmaker:
    """
    Dependency returning the session factory instead of an open session,
    so requests that never touch the database never check out a connection.
    """
    return get_database().SessionLocal


SessionFactory = Annotated[sessionmaker, Depends(get_session_factory)]
