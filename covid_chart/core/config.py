from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_ORIGIN = "https://api.covid19api.com"


@dataclass
class Settings:
    api_origin: str
    request_timeout: float | None
    log_dir: str


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support COVID_CHART_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            env[k.strip()] = v.strip().strip('"').strip("'")
    except OSError:
        # An unreadable .env must not break CLI usage
        return {}
    return env


def _get_env(name: str, env_file: dict[str, str] | None = None) -> str | None:
    # Priority: process env -> .env
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    return None


def _parse_timeout(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ValueError(
            f"COVID_CHART_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from e
    return timeout if timeout > 0 else None


def get_settings() -> Settings:
    env_file = _read_env_file()
    origin = _get_env("COVID_CHART_API_ORIGIN", env_file) or DEFAULT_API_ORIGIN
    timeout = _parse_timeout(_get_env("COVID_CHART_REQUEST_TIMEOUT", env_file))
    log_dir = _get_env("COVID_CHART_LOG_DIR", env_file) or "logs"
    return Settings(
        api_origin=origin.rstrip("/"),
        request_timeout=timeout,
        log_dir=log_dir,
    )
