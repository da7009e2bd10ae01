import os, sys

import pytest
from fastapi.testclient import TestClient

# Ensure agenda import path
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

from agenda.main import app  # noqa: E402
from agenda.api.dependencies import get_calendar_provider  # noqa: E402
from fakes import FakeProvider  # noqa: E402


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture(scope="function")
def client(fake_provider):
    app.dependency_overrides[get_calendar_provider] = lambda: fake_provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
