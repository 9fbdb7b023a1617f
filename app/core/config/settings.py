from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    explain_auth_mode: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    trust_x_forwarded_for: bool
    run_history_enabled: bool
    run_history_db_path: str
    run_history_retention_days: int
    explain_max_input_chars: int
    explain_config_path: str | None


settings = Settings(
    api_key=_get_env("API_KEY"),
    explain_auth_mode=(_get_env("EXPLAIN_AUTH_MODE", "public") or "public").strip().lower(),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://[::1]:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", False),
    run_history_enabled=_get_env_bool("RUN_HISTORY_ENABLED", True),
    run_history_db_path=_get_env("RUN_HISTORY_DB_PATH", "data/explain_runs.db") or "data/explain_runs.db",
    run_history_retention_days=_get_env_int("RUN_HISTORY_RETENTION_DAYS", 180),
    explain_max_input_chars=_get_env_int("EXPLAIN_MAX_INPUT_CHARS", 60000),
    explain_config_path=_get_env("EXPLAIN_CONFIG_PATH"),
)

if settings.explain_auth_mode not in {"public", "protected"}:
    raise RuntimeError("EXPLAIN_AUTH_MODE must be either 'public' or 'protected'.")

if settings.explain_auth_mode == "protected" and not settings.api_key:
    raise RuntimeError("EXPLAIN_AUTH_MODE=protected requires API_KEY to be set.")
