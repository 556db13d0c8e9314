"""Tests for DATABASE_URL normalisation."""

from __future__ import annotations

import pytest

from backend.dsn import asyncpg_dsn, sync_dsn


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@db:5432/teamsite", "postgresql://u:p@db:5432/teamsite"),
        ("postgresql+asyncpg://u:p@db/teamsite", "postgresql://u:p@db/teamsite"),
        ("postgresql://u:p@db/teamsite", "postgresql://u:p@db/teamsite"),
    ],
)
def test_sync_dsn(url, expected):
    assert sync_dsn(url) == expected


def test_asyncpg_dsn_strips_driver_suffix_only():
    assert asyncpg_dsn("postgresql+asyncpg://u@db/teamsite") == "postgresql://u@db/teamsite"
    assert asyncpg_dsn("postgres://u@db/teamsite") == "postgres://u@db/teamsite"
