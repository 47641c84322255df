# FILE: tests/conftest.py

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from memo_api.app import app
from memo_api.config import get_settings
from memo_api.services.memo_store import InMemoryMemoStore, get_memo_store


@pytest.fixture(scope="session")
def settings():
    """Provide settings for tests"""
    return get_settings()


@pytest.fixture
def memo_store():
    """Fresh empty store injected into every memo route"""
    store = InMemoryMemoStore()
    app.dependency_overrides[get_memo_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_memo_store, None)


@pytest.fixture
def client(memo_store):
    """HTTP client bound to the app and the fresh store"""
    return TestClient(app)


@pytest.fixture
def sample_title():
    """Sample memo title"""
    return "Aprender Testes"
