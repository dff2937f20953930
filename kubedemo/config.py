from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict


DEFAULT_MESSAGE = "Hello from Docker/Kubernetes demo"


def _env(name: str) -> Optional[str]:
    # Empty values count as unset.
    return os.getenv(name) or None


class Settings(BaseModel):
    """Process-wide configuration, resolved once at startup."""

    model_config = ConfigDict(frozen=True)

    port: int = 8080
    version: str = "v1"
    message: str = DEFAULT_MESSAGE
    host: str = "0.0.0.0"
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> Settings:
        values = {
            "port": _env("PORT"),
            "version": _env("VERSION"),
            "message": _env("MESSAGE"),
            "host": _env("HOST"),
            "log_level": _env("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})
