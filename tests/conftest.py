# tests/conftest.py
import os
import shutil
import tempfile

# point the engine at a throwaway sqlite file before anything imports db.database
_tmpdir = tempfile.mkdtemp(prefix="quiz-portal-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")

import pytest

from app import create_app
from db.database import SessionLocal, engine
from models.base import Base


@pytest.fixture(scope="session", autouse=True)
def database_dir():
    yield _tmpdir
    engine.dispose()
    shutil.rmtree(_tmpdir, ignore_errors=True)


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    yield app
    SessionLocal.remove()
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session():
    s = SessionLocal()
    yield s
    s.close()
