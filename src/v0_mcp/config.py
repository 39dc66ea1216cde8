from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

from v0_mcp.errors import ConfigError
from v0_mcp.schemas import DEFAULT_MODEL, V0Model

__all__ = ["V0Config", "load_config"]

DEFAULT_BASE_URL: Final[str] = "https://api.v0.dev/v1"

_REQUIRED_VARS: Final[tuple[str, ...]] = ("V0_API_KEY",)

_LOG_LEVELS: Final[dict[str, str]] = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}


@dataclass(frozen=True, slots=True)
class V0Config:
    """Settings fixed at process start and passed to the service and tools."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    default_model: V0Model = DEFAULT_MODEL
    timeout: float = 60.0  # seconds
    max_retries: int = 2
    server_name: str = "v0-mcp"
    server_version: str = "1.0.0"
    log_level: str = "INFO"


def _parse_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


def load_config(env: Optional[Mapping[str, str]] = None) -> V0Config:
    """
    Build a `V0Config` from environment variables.

    Args:
        env: Mapping to read instead of ``os.environ``. When omitted, a
            ``.env`` file is loaded first.

    Raises:
        ConfigError: A required variable is missing or a value is malformed.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    missing = [key for key in _REQUIRED_VARS if not env.get(key)]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    model_name = env.get("V0_DEFAULT_MODEL") or DEFAULT_MODEL.value
    try:
        default_model = V0Model(model_name)
    except ValueError:
        allowed = ", ".join(m.value for m in V0Model)
        raise ConfigError(
            f"V0_DEFAULT_MODEL must be one of {allowed}, got {model_name!r}"
        ) from None

    level_name = (env.get("LOG_LEVEL") or "info").lower()
    try:
        log_level = _LOG_LEVELS[level_name]
    except KeyError:
        raise ConfigError(f"Unsupported LOG_LEVEL {level_name!r}") from None

    # V0_TIMEOUT is given in milliseconds; the OpenAI client takes seconds.
    timeout_ms = _parse_int(env, "V0_TIMEOUT", 60_000)

    return V0Config(
        api_key=env["V0_API_KEY"],
        base_url=env.get("V0_BASE_URL") or DEFAULT_BASE_URL,
        default_model=default_model,
        timeout=timeout_ms / 1000,
        max_retries=_parse_int(env, "V0_MAX_RETRIES", 2),
        server_name=env.get("MCP_SERVER_NAME") or "v0-mcp",
        server_version=env.get("MCP_SERVER_VERSION") or "1.0.0",
        log_level=log_level,
    )
