from __future__ import annotations

import logging

from backend.app import create_app
from backend.app.config import Settings, load_settings
from backend.app.log_config import KeyValueFormatter, setup_logging


def test_defaults_when_environment_is_empty(monkeypatch):
    for name in ("SIMULATOR_ENV", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("backend.app.config.load_dotenv", lambda: False)

    settings = load_settings()

    assert settings == Settings(env="dev", log_level="INFO", cors_origins=("*",))


def test_environment_overrides(monkeypatch):
    monkeypatch.setattr("backend.app.config.load_dotenv", lambda: False)
    monkeypatch.setenv("SIMULATOR_ENV", "prod")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://sim.example.com ,")

    settings = load_settings()

    assert settings.env == "prod"
    assert settings.log_level == "WARNING"
    assert settings.cors_origins == ("http://localhost:5173", "https://sim.example.com")


def test_create_app_keeps_settings(settings):
    app = create_app(settings)

    assert app.config["SETTINGS"] is settings
    assert "api" in app.blueprints


def test_setup_logging_is_idempotent():
    logger = setup_logging("INFO")
    setup_logging("DEBUG")

    ours = [h for h in logger.handlers if isinstance(h.formatter, KeyValueFormatter)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG


def test_formatter_line_shape():
    record = logging.LogRecord("backend.core", logging.INFO, __file__, 1, "ran %d years", (3,), None)

    line = KeyValueFormatter().format(record)

    assert line.endswith("level=INFO logger=backend.core msg=ran 3 years")
