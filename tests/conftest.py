import os
import tempfile

# Keep test logs out of the project tree; must happen before config is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="doctors-logs-"))

import pytest
from fastapi.testclient import TestClient

from fake_mongo import FakeCollection, UnreachableCollection


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def client(collection):
    from main import app
    from database import get_collection

    app.dependency_overrides[get_collection] = lambda: collection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    from main import app
    from database import get_collection

    app.dependency_overrides[get_collection] = lambda: UnreachableCollection()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def doctor_payload():
    return {
        "name": "Asha Rao",
        "specialty": "Dermatologist",
        "qualification": "MBBS, MD (DERMATOLOGY)",
        "experience": 12,
        "location": "Kerala, Kochi",
        "consultationFee": 650,
    }
