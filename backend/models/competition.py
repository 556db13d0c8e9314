"""Competition and entry models for the moderation tab."""

from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from backend.models.notification import Notification

EntryStatus = Literal["pending", "approved", "rejected"]


class Competition(BaseModel):
    """A competition as listed in the selector."""

    id: UUID
    title: str
    created_at: datetime | None = None


class CompetitionEntry(BaseModel):
    """Core entry model. Represents a row in the competition_entries table."""

    id: UUID
    competition_id: UUID
    name: str
    email: str
    phone: str
    ticket_number: str | None = None  # unset until a ticket is assigned
    proof_of_payment_url: str | None = None
    status: EntryStatus = "pending"
    created_at: datetime

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: str | None) -> str:
        return value or "pending"


class UpdateEntryStatusRequest(BaseModel):
    """What the admin client sends to approve or reject an entry."""

    model_config = {"extra": "forbid"}

    status: Literal["approved", "rejected"]


class CompetitionsResponse(BaseModel):
    """Competition selector contents."""

    competitions: list[Competition]
    notifications: list[Notification] = Field(default_factory=list)


class EntriesResponse(BaseModel):
    """Entries of one competition, newest first."""

    competition_id: UUID
    entries: list[CompetitionEntry]
    notifications: list[Notification] = Field(default_factory=list)


class EntryDetailResponse(BaseModel):
    """The detail dialog: the entry plus which moderation actions are enabled."""

    entry: CompetitionEntry
    can_approve: bool
    can_reject: bool
    notifications: list[Notification] = Field(default_factory=list)
