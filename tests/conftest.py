import pytest
import respx
from fastapi.testclient import TestClient

from main import create_app

BACKEND_URL = "https://backend.test/api"


@pytest.fixture
def client():
    return TestClient(create_app(upstream_url=BACKEND_URL))


@pytest.fixture
def backend():
    with respx.mock(base_url=BACKEND_URL, assert_all_called=False) as respx_mock:
        yield respx_mock
