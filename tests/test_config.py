import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "app_env, node_env, expected",
    [
        ("production", None, "config.production"),
        ("prod", None, "config.production"),
        ("testing", None, "config.testing"),
        ("TEST", None, "config.testing"),
        (None, "production", "config.production"),
        (None, None, "config.development"),
        ("development", "production", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, app_env, node_env, expected):
    for name, value in (("APP_ENV", app_env), ("NODE_ENV", node_env)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    assert get_settings_module() == expected


def test_production_and_development_default_paths_differ(monkeypatch):
    monkeypatch.delenv("DB_PATH", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    prod = importlib.reload(importlib.import_module("config.production"))
    dev = importlib.reload(importlib.import_module("config.development"))

    assert prod.DB_PATH == "/data/attendance.db"
    assert dev.DB_PATH == "./attendance.db"
    assert prod.PORT == dev.PORT == 10000


def test_testing_defaults_to_the_development_path(monkeypatch):
    monkeypatch.delenv("DB_PATH", raising=False)

    testing = importlib.reload(importlib.import_module("config.testing"))

    assert testing.DB_PATH == "./attendance.db"
