import pytest
from fastapi.testclient import TestClient

from kubedemo.config import Settings
from kubedemo.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app(Settings()))
