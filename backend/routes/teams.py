"""Team routes: public roster, admin list/create/update/delete and portrait upload."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from backend.deps import get_image_uploader, get_team_repo
from backend.models.team import (
    AdminTeamsResponse,
    RosterResponse,
    TeamMemberForm,
    UpdateTeamMemberRequest,
    UploadResponse,
)
from backend.repos.team_repo import TeamRepo
from backend.services.image_upload import ImageUploader
from backend.services.notifier import Notifier
from backend.services.roster import PublicRoster
from backend.services.team_admin import TeamAdminSession

router = APIRouter(prefix="/api/teams", tags=["teams"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


def _session(repo: TeamRepo, uploader: ImageUploader) -> TeamAdminSession:
    return TeamAdminSession(repo, uploader, Notifier())


def _failed(session: TeamAdminSession, status_code: int = status.HTTP_502_BAD_GATEWAY) -> HTTPException:
    last = session.notifier.last
    return HTTPException(status_code=status_code, detail=last.description if last else "Request failed.")


def _result(session: TeamAdminSession) -> AdminTeamsResponse:
    return AdminTeamsResponse(members=session.members, notifications=session.notifier.drain())


async def _submit(session: TeamAdminSession) -> AdminTeamsResponse:
    if not await session.submit():
        if session.missing_fields:
            raise _failed(session, status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise _failed(session)
    return _result(session)


@router.get("", status_code=200)
async def list_active_team(repo: TeamRepo = Depends(get_team_repo)) -> RosterResponse:
    """Active members in founding order. An empty or failed load hides the section."""
    roster = PublicRoster(repo)
    await roster.load()
    return RosterResponse(show_section=roster.visible, cards=roster.cards())


@admin_router.get("/teams", status_code=200)
async def list_team_members(
    repo: TeamRepo = Depends(get_team_repo),
    uploader: ImageUploader = Depends(get_image_uploader),
) -> AdminTeamsResponse:
    """All members, any status, oldest first."""
    session = _session(repo, uploader)
    if not await session.load():
        raise _failed(session)
    return _result(session)


@admin_router.post("/teams", status_code=201)
async def create_team_member(
    form: TeamMemberForm,
    repo: TeamRepo = Depends(get_team_repo),
    uploader: ImageUploader = Depends(get_image_uploader),
) -> AdminTeamsResponse:
    """Create a member and return the re-fetched table."""
    session = _session(repo, uploader)
    session.open_create()
    session.apply(**form.model_dump())
    return await _submit(session)


@admin_router.put("/teams/{member_id}", status_code=200)
async def update_team_member(
    member_id: UUID,
    req: UpdateTeamMemberRequest,
    repo: TeamRepo = Depends(get_team_repo),
    uploader: ImageUploader = Depends(get_image_uploader),
) -> AdminTeamsResponse:
    """Edit a member. Omitted fields keep their stored values."""
    session = _session(repo, uploader)
    member = await repo.get(member_id)
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found.")
    session.open_edit(member)
    # JSON null clears a field the same way an empty string does
    fields = req.model_dump(exclude_unset=True)
    session.apply(**{name: "" if value is None else value for name, value in fields.items()})
    return await _submit(session)


@admin_router.delete("/teams/{member_id}", status_code=200)
async def delete_team_member(
    member_id: UUID,
    confirm: bool = Query(default=False),
    repo: TeamRepo = Depends(get_team_repo),
    uploader: ImageUploader = Depends(get_image_uploader),
) -> AdminTeamsResponse:
    """Permanently delete a member. Requires ?confirm=true."""
    session = _session(repo, uploader)
    if not await repo.get(member_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found.")
    if not await session.delete(member_id, confirm=lambda _prompt: confirm):
        if not confirm:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Deletion not confirmed.")
        raise _failed(session)
    return _result(session)


@admin_router.post("/uploads/team-image", status_code=201)
async def upload_team_image(
    file: UploadFile = File(...),
    repo: TeamRepo = Depends(get_team_repo),
    uploader: ImageUploader = Depends(get_image_uploader),
) -> UploadResponse:
    """Store a portrait under a random name and return its public URL."""
    session = _session(repo, uploader)
    url = await session.upload_image(file.filename or "upload", await file.read(), file.content_type)
    if url is None:
        raise _failed(session)
    return UploadResponse(url=url, notifications=session.notifier.drain())
