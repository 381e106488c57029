"""
Test configuration and fixtures for the Webpage Analyse API.

The database and the upload directory point at a throwaway temp directory,
set before the app (and its settings) are imported.
"""

import os
import tempfile
from typing import Generator

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

load_dotenv()

_tmp_dir = tempfile.mkdtemp(prefix="webpage-analyse-tests-")

test_db_url = os.getenv("TEST_DATABASE_URL")
if test_db_url:
    if "postgresql://" in test_db_url and "asyncpg" not in test_db_url:
        test_db_url = test_db_url.replace("postgresql://", "postgresql+asyncpg://")
    os.environ["DATABASE_URL"] = test_db_url
else:
    os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_dir, 'test.db')}"

os.environ["UPLOAD_DIR"] = os.path.join(_tmp_dir, "uploads")


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Fresh TestClient per test. Entering the client runs the app lifespan,
    which creates the tables.
    """
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest.fixture
async def db_session():
    """Real session on the test database, tables created."""
    from app.platform.db.session import SessionLocal, init_db

    await init_db()
    async with SessionLocal() as session:
        yield session


@pytest.fixture
def file_store(tmp_path):
    from app.platform.storage.file_store import LocalFileStore

    return LocalFileStore(root=str(tmp_path / "files"))
