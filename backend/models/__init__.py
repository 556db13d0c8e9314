"""
Pydantic models for teamsite.

All data shapes defined here. No imports from db, repos, or routes.
"""

from backend.models.competition import (
    Competition,
    CompetitionEntry,
    EntryStatus,
    UpdateEntryStatusRequest,
)
from backend.models.notification import Notification
from backend.models.team import (
    PublicTeamMember,
    TeamMember,
    TeamMemberDraft,
    TeamMemberForm,
    UpdateTeamMemberRequest,
)

__all__ = [
    # Team models
    "TeamMember",
    "TeamMemberDraft",
    "TeamMemberForm",
    "UpdateTeamMemberRequest",
    "PublicTeamMember",
    # Competition models
    "Competition",
    "CompetitionEntry",
    "EntryStatus",
    "UpdateEntryStatusRequest",
    # Notifications
    "Notification",
]
