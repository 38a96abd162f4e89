"""
- Give every test its own RoundStore so rounds and stats never leak between tests
- Pin the secret so outcomes are predictable
- Provide a client fixture (TestClient(app)) that already has the overrides applied
"""
import os
import pytest

from fastapi.testclient import TestClient

# Keep the dev-only secret logging out of test runs
os.environ.setdefault("APP_ENV", "test")

from codebreaker.main import app, get_code_source, get_store
from codebreaker.store import RoundStore

SECRET = [0, 1, 2, 3]

def fixed_source(code):
    """A code source that ignores randomness and always hands out `code`."""
    def source(pegs, colors):
        return list(code)
    return source

@pytest.fixture
def store():
    return RoundStore()

@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use a fresh store and a known secret for every request."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_code_source] = lambda: fixed_source(SECRET)
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)
