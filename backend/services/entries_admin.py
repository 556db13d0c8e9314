"""Competition entries tab: pick a competition, review entries, approve or reject."""

from __future__ import annotations

import logging
from typing import Any, Literal
from uuid import UUID

from backend.errors import FetchError
from backend.models.competition import Competition, CompetitionEntry, EntryStatus
from backend.repos.competition_repo import CompetitionRepo
from backend.services.crud_sync import CrudBackend, CrudMessages, CrudSync
from backend.services.notifier import Notifier

logger = logging.getLogger(__name__)

ModerationStatus = Literal["approved", "rejected"]

ENTRY_MESSAGES = CrudMessages(
    fetch_failed="Failed to fetch entries",
    updated="Entry status updated",
    update_failed="Failed to update entry status",
)


class EntryBackend(CrudBackend[CompetitionEntry, EntryStatus]):
    """Entries are scoped by competition id and only ever get their status updated."""

    def __init__(self, repo: CompetitionRepo):
        self.repo = repo

    async def list_items(self, scope: Any | None) -> list[CompetitionEntry]:
        if scope is None:
            return []
        return await self.repo.list_entries(scope)

    async def update(self, item_id: UUID, draft: EntryStatus) -> CompetitionEntry | None:
        return await self.repo.update_status(item_id, draft)


class ModerationDialog:
    """The entry detail overlay."""

    def __init__(self) -> None:
        self.subject: CompetitionEntry | None = None
        self.visible = False

    def open(self, entry: CompetitionEntry) -> None:
        self.subject = entry
        self.visible = True

    def close(self) -> None:
        self.visible = False

    def can_transition(self, status: ModerationStatus) -> bool:
        """False when the shown entry already has this status (button disabled)."""
        return self.subject is not None and self.subject.status != status

    @property
    def can_approve(self) -> bool:
        return self.can_transition("approved")

    @property
    def can_reject(self) -> bool:
        return self.can_transition("rejected")


class EntriesAdmin:
    """State of the entries tab for one admin."""

    def __init__(self, repo: CompetitionRepo, notifier: Notifier):
        self.repo = repo
        self.notifier = notifier
        self.competitions: list[Competition] = []
        self.sync: CrudSync[CompetitionEntry, EntryStatus] = CrudSync(EntryBackend(repo), notifier, ENTRY_MESSAGES)
        self.dialog = ModerationDialog()

    @property
    def selected_competition(self) -> UUID | None:
        return self.sync.scope

    @property
    def entries(self) -> list[CompetitionEntry]:
        return self.sync.items

    @property
    def loading(self) -> bool:
        return self.sync.loading

    async def load_competitions(self) -> bool:
        try:
            self.competitions = await self.repo.list_competitions()
        except FetchError:
            self.notifier.error("Failed to fetch competitions")
            return False
        return True

    async def select_competition(self, competition_id: UUID | None) -> bool:
        """
        Show the entries of another competition, or none.

        Selecting again before the previous load finishes is safe: only the
        latest selection's response is kept.
        """
        return await self.sync.select_scope(competition_id)

    def open_details(self, entry: CompetitionEntry) -> None:
        self.dialog.open(entry)

    def close_details(self) -> None:
        self.dialog.close()

    async def transition(self, entry_id: UUID, status: ModerationStatus) -> bool:
        """
        Approve or reject an entry.

        The open dialog reflects the new status as soon as the write
        succeeds; the entries list is re-fetched afterwards.
        """
        subject = self.dialog.subject
        if subject is not None and subject.id == entry_id and not self.dialog.can_transition(status):
            logger.info("entry %s is already %s; ignoring", entry_id, status)
            return False

        if not await self.sync.update(entry_id, status, refresh=False):
            return False

        if self.dialog.subject is not None and self.dialog.subject.id == entry_id:
            self.dialog.subject = self.dialog.subject.model_copy(update={"status": status})
        if self.selected_competition is not None:
            await self.sync.refresh()
        return True
