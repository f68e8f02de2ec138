from __future__ import annotations

import os
import secrets
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingConfigError

CLICKUP_API_URL = "https://api.clickup.com/api/v2"
CLICKUP_V3_API_URL = "https://api.clickup.com/api/v3"

REQUIRED_ENV_VARS = ("CLICKUP_PERSONAL_TOKEN",)


class AppConfig(BaseModel):
    """Process configuration, loaded once at startup."""

    clickup_personal_token: str = Field(repr=False)
    port: int = 3000
    log_level: str = "info"
    encryption_key: str = Field(repr=False)
    encryption_key_from_env: bool = False
    api_url: str = CLICKUP_API_URL
    v3_api_url: str = CLICKUP_V3_API_URL

    model_config = ConfigDict(frozen=True, extra="forbid")


def _env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def load_config(*, use_dotenv: bool = True) -> AppConfig:
    """Load configuration from the environment (optionally seeded from .env)."""
    if use_dotenv:
        load_dotenv()

    missing = [name for name in REQUIRED_ENV_VARS if not _env(name)]
    if missing:
        raise MissingConfigError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    raw_port = _env("PORT")
    try:
        port = int(raw_port) if raw_port else 3000
    except ValueError as exc:
        raise MissingConfigError("PORT must be an integer.") from exc

    env_key = _env("ENCRYPTION_KEY")
    return AppConfig(
        clickup_personal_token=_env("CLICKUP_PERSONAL_TOKEN") or "",
        port=port,
        log_level=_env("LOG_LEVEL") or "info",
        encryption_key=env_key or secrets.token_hex(32),
        encryption_key_from_env=env_key is not None,
    )


__all__ = [
    "AppConfig",
    "load_config",
    "CLICKUP_API_URL",
    "CLICKUP_V3_API_URL",
    "REQUIRED_ENV_VARS",
]
