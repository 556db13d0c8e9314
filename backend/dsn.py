"""
DATABASE_URL normalisation.

Kept free of backend.config so alembic can import it without the R2
settings being present.
"""

from __future__ import annotations

_ASYNC_PREFIX = "postgresql+asyncpg://"


def asyncpg_dsn(url: str) -> str:
    """DSN for asyncpg, which rejects SQLAlchemy driver suffixes."""
    if url.startswith(_ASYNC_PREFIX):
        return "postgresql://" + url[len(_ASYNC_PREFIX) :]
    return url


def sync_dsn(url: str) -> str:
    """DSN for sync SQLAlchemy (alembic migrations via psycopg2)."""
    url = asyncpg_dsn(url)
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://") :]
    return url
