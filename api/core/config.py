"""
Environment-driven settings.

Connection parameters come either from a single `DATABASE_URL` or from the
discrete `DB_*` variables (`DB_HOST`, `DB_PORT`, `DB_USER`, `DB_PASSWORD`,
`DB_DATABASE`). `DATABASE_URL` wins when both are present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class PoolSettings:
    min_size: int
    max_size: int
    command_timeout: float


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects some libpq-only query params.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str | None:
    url = _env_str("DATABASE_URL")
    if not url:
        return None
    return _sanitize_database_url(url)


def connect_kwargs() -> dict[str, Any]:
    """
    Keyword arguments for `asyncpg.create_pool` describing where to connect.
    """
    url = database_url()
    if url is not None:
        return {"dsn": url}

    database = _env_str("DB_DATABASE")
    if not database:
        raise RuntimeError("Set DATABASE_URL or DB_DATABASE to configure the database.")

    return {
        "host": _env_str("DB_HOST", "localhost"),
        "port": _env_int("DB_PORT", 5432),
        "user": _env_str("DB_USER") or None,
        "password": _env_str("DB_PASSWORD") or None,
        "database": database,
    }


def pool_settings() -> PoolSettings:
    min_size = max(0, _env_int("DB_POOL_MIN_SIZE", 1))
    max_size = max(1, _env_int("DB_POOL_MAX_SIZE", 5))
    return PoolSettings(
        min_size=min(min_size, max_size),
        max_size=max_size,
        command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
    )


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
