"""Tests for environment-driven settings and the server runner."""

from pathlib import Path

import pytest
import server
from settings import Settings
from shared.logging import add_service_name, get_log_level


@pytest.fixture()
def clean_env(monkeypatch):
    for name in (
        "ENV",
        "ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_DIR",
        "HOST",
        "PORT",
        "STOREFRONT_SEED_FILE",
        "STOREFRONT_FRONTEND_DIR",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsFromEnv:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.env == "development"
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == "logs"
        assert settings.port == 3000
        assert settings.seed_file is None
        assert settings.frontend_dir is None
        assert settings.cors_origins == ["*"]

    def test_overrides(self, clean_env):
        clean_env.setenv("ENV", "production")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LOG_DIR", "")
        clean_env.setenv("STOREFRONT_SEED_FILE", "/tmp/products.json")
        clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        settings = Settings.from_env()

        assert settings.env == "production"
        assert settings.log_level == "INFO"
        assert settings.port == 8080
        assert settings.log_dir is None
        assert settings.seed_file == Path("/tmp/products.json")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_environment_alias(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "Staging")
        assert Settings.from_env().env == "staging"

    def test_log_level_override(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "error")
        assert get_log_level("test") == "ERROR"

    def test_test_env_logs_warnings(self, clean_env):
        assert get_log_level("test") == "WARNING"

    def test_serves_frontend_only_for_existing_dir(self, tmp_path):
        assert Settings(frontend_dir=tmp_path).serves_frontend is True
        assert Settings(frontend_dir=tmp_path / "nope").serves_frontend is False
        assert Settings().serves_frontend is False


class TestServiceName:
    def test_stamps_service_on_events(self):
        stamp = add_service_name("storefront")
        assert stamp(None, "info", {"event": "checkout.completed"}) == {
            "event": "checkout.completed",
            "service": "storefront",
        }

    def test_explicit_service_kept(self):
        stamp = add_service_name("storefront")
        assert stamp(None, "info", {"event": "x", "service": "worker"})["service"] == "worker"


class TestServerRunner:
    def test_runs_uvicorn_with_env_settings(self, clean_env, monkeypatch):
        calls = []
        monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        clean_env.setenv("PORT", "4000")

        server.main([])

        args, kwargs = calls[0]
        assert args == ("app:app",)
        assert "factory" not in kwargs
        assert kwargs["port"] == 4000
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["reload"] is False

    def test_cli_arguments_win(self, clean_env, monkeypatch):
        calls = []
        monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))

        server.main(["--host", "127.0.0.1", "--port", "9001", "--reload"])

        assert calls[0]["host"] == "127.0.0.1"
        assert calls[0]["port"] == 9001
        assert calls[0]["reload"] is True
