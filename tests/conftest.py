import pytest
from fastapi.testclient import TestClient

from api_service.celery_app import celery_app
from api_service.config import Settings
from api_service.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'board.db'}",
        SECRET_KEY="test-secret",
        CELERY_BROKER_URL="memory://",
    )


@pytest.fixture
def sent_tasks(monkeypatch):
    calls = []

    def fake_send_task(name, args=None, kwargs=None, **options):
        calls.append({"name": name, "kwargs": kwargs, "options": options})

    monkeypatch.setattr(celery_app, "send_task", fake_send_task)
    return calls


@pytest.fixture
def client(settings, sent_tasks):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def login_as(client):
    def _login(username="alice", email="a@x.com", password="pw123"):
        r = client.post("/api/register", json={"username": username, "email": email, "password": password})
        assert r.status_code == 201
        r = client.post("/api/login", json={"email": email, "password": password})
        assert r.status_code == 200
        return r.json()

    return _login


@pytest.fixture
def auth(login_as):
    return {"Authorization": f"Bearer {login_as()['token']}"}
