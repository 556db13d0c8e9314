"""
FastAPI dependencies that hand store collaborators to routes.

Tests swap the stores out with app.dependency_overrides.
"""

from __future__ import annotations

from fastapi import Depends

from backend.config import settings
from backend.repos.competition_repo import CompetitionRepo
from backend.repos.table_store import TableStore, table_store
from backend.repos.team_repo import TeamRepo
from backend.services.image_upload import ImageUploader
from backend.services.r2 import ObjectStore, r2_service


def get_table_store() -> TableStore:
    return table_store


def get_object_store() -> ObjectStore:
    return r2_service


def get_team_repo(store: TableStore = Depends(get_table_store)) -> TeamRepo:
    return TeamRepo(store)


def get_competition_repo(store: TableStore = Depends(get_table_store)) -> CompetitionRepo:
    return CompetitionRepo(store)


def get_image_uploader(objects: ObjectStore = Depends(get_object_store)) -> ImageUploader:
    return ImageUploader(objects, settings.TEAM_IMAGES_BUCKET)
