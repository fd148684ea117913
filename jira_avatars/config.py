"""Configuration helpers for the Jira avatar client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class Settings:
    """Environment-driven connection settings for the Jira instance."""

    jira_host: Optional[str] = os.getenv("JIRA_HOST")
    jira_protocol: str = os.getenv("JIRA_PROTOCOL", "https")
    jira_port: Optional[int] = _optional_int("JIRA_PORT")
    jira_path_prefix: str = os.getenv("JIRA_PATH_PREFIX", "")
    jira_api_version: str = os.getenv("JIRA_API_VERSION", "2")
    jira_username: Optional[str] = os.getenv("JIRA_USERNAME")
    jira_password: Optional[str] = os.getenv("JIRA_PASSWORD")
    # Personal access token; takes precedence over basic auth when set
    jira_bearer_token: Optional[str] = os.getenv("JIRA_BEARER_TOKEN")
    jira_timeout: float = float(os.getenv("JIRA_TIMEOUT", "30"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance to avoid repeated environment reads."""

    return Settings()


settings = get_settings()
