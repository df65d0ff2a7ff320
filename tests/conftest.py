import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_db
from app.database import RecordStore
from main import app


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    # each test gets its own empty store instead of the app-wide one
    app.dependency_overrides[get_db] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
