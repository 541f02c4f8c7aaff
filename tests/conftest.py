import pytest
from fastapi.testclient import TestClient

from app.database.bootstrap import reset_database, synchronize_schema
from app.database.config.settings import Settings
from app.database.database import create_db_engine, create_session_factory
from app.main import create_app


@pytest.fixture
def settings():
    return Settings(SQLALCHEMY_DATABASE_URI="sqlite://")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings.DATABASE_URL)
    synchronize_schema(engine, drop_existing=True)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def client(settings, session_factory):
    app = create_app(settings, session_factory)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded(engine, session_factory):
    reset_database(engine, session_factory)
