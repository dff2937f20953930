from datetime import datetime

from fastapi.testclient import TestClient

from kubedemo.config import DEFAULT_MESSAGE, Settings
from kubedemo.main import create_app


def parse_timestamp(value: str) -> datetime:
    assert value.endswith("Z")
    return datetime.fromisoformat(value[:-1] + "+00:00")


def test_root_defaults(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == DEFAULT_MESSAGE
    assert body["version"] == "v1"
    parse_timestamp(body["timestamp"])


def test_root_uses_settings():
    client = TestClient(create_app(Settings(version="v2", message="hi")))
    body = client.get("/").json()
    assert set(body) == {"message", "version", "timestamp"}
    assert body["message"] == "hi"
    assert body["version"] == "v2"
    parse_timestamp(body["timestamp"])


def test_root_reads_environment(monkeypatch):
    monkeypatch.setenv("VERSION", "v2")
    monkeypatch.setenv("MESSAGE", "hi")
    client = TestClient(create_app())
    body = client.get("/").json()
    assert body["message"] == "hi"
    assert body["version"] == "v2"


def test_timestamp_has_millisecond_precision(client):
    timestamp = client.get("/").json()["timestamp"]
    # 2026-10-18T12:00:00.000Z
    assert len(timestamp) == 24
    assert timestamp[19] == "."
