"""
Environment-driven settings.

Values are read from the process environment. A local `.env` file (if any)
is loaded once on import so `uvicorn main:app` works without exporting
variables by hand.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only options such as sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class PoolSettings:
    min_size: int
    max_size: int
    acquire_timeout_s: float
    command_timeout_s: float


def database_url() -> str:
    """
    Return the DSN for the pool.

    `DATABASE_URL` wins when set; otherwise the DSN is assembled from
    DB_HOST / DB_PORT / DB_NAME / DB_USER / DB_PASSWORD.
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return _sanitize_database_url(url)

    user = _env_str("DB_USER")
    if not user:
        raise ConfigError("Set DATABASE_URL or DB_USER/DB_PASSWORD/DB_HOST/DB_PORT/DB_NAME.")

    password = os.environ.get("DB_PASSWORD", "")
    host = _env_str("DB_HOST", "localhost")
    port = _env_int("DB_PORT", 5432)
    name = _env_str("DB_NAME", "portobello")

    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")
    return f"postgresql://{credentials}@{host}:{port}/{quote(name, safe='')}"


def pool_settings() -> PoolSettings:
    min_size = max(1, _env_int("DB_POOL_MIN", 1))
    max_size = max(min_size, _env_int("DB_POOL_MAX", 3))
    return PoolSettings(
        min_size=min_size,
        max_size=max_size,
        acquire_timeout_s=float(max(1, _env_int("DB_POOL_TIMEOUT", 60))),
        command_timeout_s=float(max(1, _env_int("DB_COMMAND_TIMEOUT", 30))),
    )


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
