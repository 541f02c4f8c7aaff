"""
Database bootstrap: create the database, synchronize tables, seed sample rows.

Run once before the HTTP server starts (see `app/main.py` and `manage.py`).
`synchronize_schema(..., drop_existing=True)` and `reset_database` destroy
all data and are meant for development only.
"""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.database.config.settings import Settings
from app.database.database import Base
from app.database.seed import seed_sample_data

# Регистрируем модели в Base.metadata
from app.directory.models.campus import Campus  # noqa: F401
from app.directory.models.student import Student  # noqa: F401

logger = logging.getLogger(__name__)


def ensure_database_exists(settings: Settings) -> bool:
    """
    Create the configured PostgreSQL database if it is missing.

    Returns True when the database was created. Other backends create their
    database on first connect, so nothing is done for them.
    """
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() != "postgresql":
        logger.info(f"Backend {url.get_backend_name()} needs no CREATE DATABASE, skipping")
        return False

    database = settings.DATABASE_NAME
    server_engine = create_engine(settings.SERVER_URL, isolation_level="AUTOCOMMIT")
    try:
        with server_engine.connect() as conn:
            exists = conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": database},
            ).scalar()
            if exists:
                logger.info(f"Database {database} already exists")
                return False
            quoted = server_engine.dialect.identifier_preparer.quote(database)
            conn.execute(text(f"CREATE DATABASE {quoted}"))
            logger.info(f"Database {database} created")
            return True
    except SQLAlchemyError as e:
        logger.error(f"Could not create database {database} on {url.host}:{url.port}: {e}")
        raise
    finally:
        server_engine.dispose()


def synchronize_schema(engine: Engine, drop_existing: bool = False) -> None:
    if drop_existing:
        logger.warning("Dropping all tables")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Synced to db")


def reset_database(engine: Engine, session_factory: sessionmaker) -> None:
    """Drop and recreate every table, then load the sample data."""
    synchronize_schema(engine, drop_existing=True)
    seed_sample_data(session_factory)
    logger.info("Successfully seeded db")


def boot(settings: Settings, engine: Engine, session_factory: sessionmaker, reset: bool = False) -> bool:
    """
    Prepare the database before serving requests.

    A failure is logged and stops the remaining steps; the caller still
    starts the server. Returns False in that case.
    """
    try:
        ensure_database_exists(settings)
        if reset:
            reset_database(engine, session_factory)
        else:
            synchronize_schema(engine, drop_existing=False)
    except SQLAlchemyError:
        logger.exception("Database bootstrap failed, the server starts without a ready schema")
        return False
    return True
