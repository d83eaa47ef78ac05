import os

# must be set before config.setting is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from core.db import CreateDBSession
from core.setup import DatabaseSetup
from main import create_app


@pytest.fixture
def database():
    db = DatabaseSetup("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with CreateDBSession(database) as session:
        yield session


@pytest.fixture
def client(database):
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def contact_data():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "subject": "Hi",
        "message": "Hello",
    }
