"""Repository for competitions and their entries."""

from __future__ import annotations

import logging
from uuid import UUID

from backend.models.competition import Competition, CompetitionEntry, EntryStatus
from backend.repos.table_store import Row, TableStore

logger = logging.getLogger(__name__)


def _row_to_entry(row: Row) -> CompetitionEntry:
    """Convert a store row to a CompetitionEntry model."""
    return CompetitionEntry(
        id=row["id"],
        competition_id=row["competition_id"],
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        ticket_number=row.get("ticket_number"),
        proof_of_payment_url=row.get("proof_of_payment_url"),
        status=row.get("status"),
        created_at=row["created_at"],
    )


class CompetitionRepo:
    """Store operations for the moderation tab."""

    def __init__(self, store: TableStore):
        self.store = store

    async def list_competitions(self) -> list[Competition]:
        """List competitions for the selector, newest first."""
        rows = await self.store.select(
            "competitions",
            columns=("id", "title", "created_at"),
            order_by="created_at",
            ascending=False,
        )
        return [Competition(**row) for row in rows]

    async def list_entries(self, competition_id: UUID) -> list[CompetitionEntry]:
        """
        List the entries of one competition.

        Args:
            competition_id: Competition UUID

        Returns:
            Entries ordered by created_at DESC
        """
        rows = await self.store.select(
            "competition_entries",
            filters={"competition_id": competition_id},
            order_by="created_at",
            ascending=False,
        )
        return [_row_to_entry(row) for row in rows]

    async def get_entry(self, entry_id: UUID) -> CompetitionEntry | None:
        rows = await self.store.select("competition_entries", filters={"id": entry_id})
        return _row_to_entry(rows[0]) if rows else None

    async def update_status(self, entry_id: UUID, status: EntryStatus) -> CompetitionEntry | None:
        """
        Move an entry to a new moderation status. Only the status column is written.

        Returns:
            Updated entry, or None if no entry has this id
        """
        rows = await self.store.update("competition_entries", entry_id, {"status": status})
        if not rows:
            logger.warning("status update matched no entry with id=%s", entry_id)
            return None
        return _row_to_entry(rows[0])
