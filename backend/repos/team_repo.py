"""Repository for team member operations."""

from __future__ import annotations

import logging
from uuid import UUID

from backend.models.team import TeamMember, TeamMemberDraft
from backend.repos.table_store import Row, TableStore

logger = logging.getLogger(__name__)

TABLE = "teams"


def _row_to_member(row: Row) -> TeamMember:
    """Convert a store row to a TeamMember model."""
    return TeamMember(
        id=row["id"],
        name=row["name"],
        role=row["role"],
        bio=row["bio"],
        image_url=row["image_url"],
        linkedin_url=row.get("linkedin_url"),
        email=row.get("email"),
        status=row.get("status") or "active",
        created_at=row["created_at"],
    )


class TeamRepo:
    """All team-related store operations."""

    def __init__(self, store: TableStore):
        self.store = store

    async def list_active(self) -> list[TeamMember]:
        """
        List members shown on the public site.

        Returns:
            Active members ordered by created_at ASC (founding order)
        """
        rows = await self.store.select(TABLE, filters={"status": "active"}, order_by="created_at")
        return [_row_to_member(row) for row in rows]

    async def list_all(self) -> list[TeamMember]:
        """
        List every member regardless of status.

        Returns:
            Members ordered by created_at ASC
        """
        rows = await self.store.select(TABLE, order_by="created_at")
        return [_row_to_member(row) for row in rows]

    async def get(self, member_id: UUID) -> TeamMember | None:
        rows = await self.store.select(TABLE, filters={"id": member_id})
        return _row_to_member(rows[0]) if rows else None

    async def create(self, draft: TeamMemberDraft) -> TeamMember:
        """
        Insert a new member.

        Args:
            draft: Validated draft

        Returns:
            Newly created TeamMember
        """
        row = await self.store.insert(TABLE, draft.to_row())
        return _row_to_member(row)

    async def update(self, member_id: UUID, draft: TeamMemberDraft) -> TeamMember | None:
        """
        Overwrite a member's editable fields.

        Returns:
            Updated TeamMember, or None if no member has this id
        """
        rows = await self.store.update(TABLE, member_id, draft.to_row())
        if not rows:
            logger.warning("update matched no team member with id=%s", member_id)
            return None
        return _row_to_member(rows[0])

    async def delete(self, member_id: UUID) -> bool:
        """
        Permanently delete a member.

        Returns:
            True if deleted, False if not found
        """
        return await self.store.delete(TABLE, member_id) > 0
