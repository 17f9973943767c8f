from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from core.errors import ConfigError


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


DEFAULT_BASE_URL = "https://api.prolific.co"
DEFAULT_USER_AGENT = "prolific-mcp-server/1.0"

# --- Service ---
SERVICE_NAME = env("SERVICE_NAME", "prolific-mcp-gateway")
VERSION = env("VERSION", "1.0.0")
LOG_LEVEL = env("LOG_LEVEL", "INFO")
MCP_TRANSPORT = env("MCP_TRANSPORT", "stdio")


@dataclass(frozen=True)
class Settings:
    token: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None  # None = requests default (no timeout)


def load_settings() -> Settings:
    """Read Prolific credentials from the process environment."""
    token = env("PROLIFIC_TOKEN")
    if not token:
        raise ConfigError("PROLIFIC_TOKEN environment variable is required")

    raw_timeout = env("PROLIFIC_TIMEOUT")
    timeout = None
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"PROLIFIC_TIMEOUT must be a number, got {raw_timeout!r}")

    return Settings(
        token=token,
        base_url=env("PROLIFIC_URL", DEFAULT_BASE_URL).rstrip("/"),
        user_agent=env("PROLIFIC_USER_AGENT", DEFAULT_USER_AGENT),
        timeout=timeout,
    )
