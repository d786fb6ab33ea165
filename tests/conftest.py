import pytest
from fastapi.testclient import TestClient

from treehole.core.config import Settings
from treehole.core.database import Database
from treehole.main import create_app
from treehole.services.message_service import MessageService

PREFIX = "/treehole"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        PATH_PREFIX=PREFIX,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def database(settings) -> Database:
    db = Database(settings.DATABASE_URL, timeout=settings.DB_TIMEOUT)
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture
def service(database) -> MessageService:
    return MessageService(database)


@pytest.fixture
def client(settings) -> TestClient:
    """TestClient with lifespan (schema init) running."""
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def api() -> str:
    return f"{PREFIX}/api/messages"
