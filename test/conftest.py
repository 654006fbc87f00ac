import pytest
from fastapi.testclient import TestClient

from grubdash.main import app, build_handlers


@pytest.fixture
def client():
    # each lifespan builds fresh, empty stores
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def handlers():
    return build_handlers()
