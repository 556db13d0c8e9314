"""
teamsite configuration. All environment variables in one place.

Read from environment at runtime. Never hardcode secrets.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Database
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "")
    DATABASE_POOL_MIN: int = int(os.environ.get("DATABASE_POOL_MIN", "2"))
    DATABASE_POOL_MAX: int = int(os.environ.get("DATABASE_POOL_MAX", "10"))

    # R2 / S3 Storage
    R2_ENDPOINT: str = os.environ.get("R2_ENDPOINT", "")
    R2_ACCESS_KEY: str = os.environ.get("R2_ACCESS_KEY", "")
    R2_SECRET_KEY: str = os.environ.get("R2_SECRET_KEY", "")
    R2_PUBLIC_URL: str = os.environ.get("R2_PUBLIC_URL", "https://assets.teamsite.dev")
    TEAM_IMAGES_BUCKET: str = os.environ.get("TEAM_IMAGES_BUCKET", "team-images")

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


# Singleton instance
settings = Settings()

# Validate required settings (skip in test mode)
_testing = os.environ.get("TESTING", "").lower() == "true"

if not _testing:
    if not settings.DATABASE_URL:
        raise RuntimeError("DATABASE_URL environment variable is required")
    if not settings.R2_ENDPOINT:
        raise RuntimeError("R2_ENDPOINT environment variable is required")
    if not settings.R2_ACCESS_KEY:
        raise RuntimeError("R2_ACCESS_KEY environment variable is required")
    if not settings.R2_SECRET_KEY:
        raise RuntimeError("R2_SECRET_KEY environment variable is required")
