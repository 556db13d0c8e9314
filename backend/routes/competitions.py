"""Competition entries admin routes: selector, entries list, detail and moderation."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from backend.deps import get_competition_repo
from backend.models.competition import (
    CompetitionsResponse,
    EntriesResponse,
    EntryDetailResponse,
    UpdateEntryStatusRequest,
)
from backend.repos.competition_repo import CompetitionRepo
from backend.services.entries_admin import EntriesAdmin
from backend.services.notifier import Notifier

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _failed(admin: EntriesAdmin) -> HTTPException:
    last = admin.notifier.last
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=last.description if last else "Request failed.",
    )


def _detail(admin: EntriesAdmin) -> EntryDetailResponse:
    return EntryDetailResponse(
        entry=admin.dialog.subject,
        can_approve=admin.dialog.can_approve,
        can_reject=admin.dialog.can_reject,
        notifications=admin.notifier.drain(),
    )


async def _open_entry(admin: EntriesAdmin, entry_id: UUID) -> None:
    entry = await admin.repo.get_entry(entry_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found.")
    admin.open_details(entry)


@router.get("/competitions", status_code=200)
async def list_competitions(repo: CompetitionRepo = Depends(get_competition_repo)) -> CompetitionsResponse:
    """Competitions for the selector, newest first."""
    admin = EntriesAdmin(repo, Notifier())
    if not await admin.load_competitions():
        raise _failed(admin)
    return CompetitionsResponse(competitions=admin.competitions, notifications=admin.notifier.drain())


@router.get("/competitions/{competition_id}/entries", status_code=200)
async def list_entries(
    competition_id: UUID,
    repo: CompetitionRepo = Depends(get_competition_repo),
) -> EntriesResponse:
    """Entries of one competition, newest first."""
    admin = EntriesAdmin(repo, Notifier())
    if not await admin.select_competition(competition_id):
        raise _failed(admin)
    return EntriesResponse(
        competition_id=competition_id,
        entries=admin.entries,
        notifications=admin.notifier.drain(),
    )


@router.get("/entries/{entry_id}", status_code=200)
async def get_entry(
    entry_id: UUID,
    repo: CompetitionRepo = Depends(get_competition_repo),
) -> EntryDetailResponse:
    """One entry as shown in the detail dialog."""
    admin = EntriesAdmin(repo, Notifier())
    await _open_entry(admin, entry_id)
    return _detail(admin)


@router.patch("/entries/{entry_id}/status", status_code=200)
async def update_entry_status(
    entry_id: UUID,
    req: UpdateEntryStatusRequest,
    repo: CompetitionRepo = Depends(get_competition_repo),
) -> EntryDetailResponse:
    """Approve or reject an entry. Moving an entry to the status it already has → 409."""
    admin = EntriesAdmin(repo, Notifier())
    await _open_entry(admin, entry_id)
    if not admin.dialog.can_transition(req.status):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Entry is already {req.status}.")
    if not await admin.transition(entry_id, req.status):
        raise _failed(admin)
    return _detail(admin)
