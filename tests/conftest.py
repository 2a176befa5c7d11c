from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.main import create_app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "attendance.db"


@pytest.fixture
def make_app(db_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    apps = []

    def _make(**overrides):
        settings = {"DB_PATH": str(db_path), "LOG_LEVEL": "WARNING"}
        settings.update(overrides)
        app = create_app(settings)
        apps.append(app)
        return app

    yield _make

    for app in apps:
        app.extensions["attendance_tracker"].conn.close()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
