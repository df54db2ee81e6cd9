"""Storefront runtime settings.

Everything is read from environment variables once, at application start-up:

    ENV / ENVIRONMENT        development | test | staging | production
    LOG_LEVEL                overrides the per-environment default
    LOG_DIR                  rotating log directory ("" disables file logs)
    HOST, PORT               bind address for ``server.py``
    STOREFRONT_SEED_FILE     JSON list of products replacing the built-in catalogue
    STOREFRONT_FRONTEND_DIR  static front-end served at ``/``
    CORS_ORIGINS             comma-separated list of allowed origins
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shared.logging import get_environment, get_log_level


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    env: str = "development"
    log_level: str = "INFO"
    log_dir: str | None = "logs"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    seed_file: Path | None = None
    frontend_dir: Path | None = None
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        env = get_environment()
        origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
        return cls(
            env=env,
            log_level=get_log_level(env),
            log_dir=os.getenv("LOG_DIR", "logs") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            seed_file=_optional_path("STOREFRONT_SEED_FILE"),
            frontend_dir=_optional_path("STOREFRONT_FRONTEND_DIR"),
            cors_origins=origins or ["*"],
        )

    @property
    def serves_frontend(self) -> bool:
        return self.frontend_dir is not None and self.frontend_dir.is_dir()
