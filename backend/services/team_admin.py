"""
Team members admin tab.

One TeamAdminSession per admin working the tab. The session owns the draft
buffer and moves through:

    idle --open_create/open_edit--> editing --submit--> submitting
    submitting --ok--> idle (draft reset, list re-fetched)
    submitting --failed--> editing (draft kept for retry)
"""

from __future__ import annotations

import logging
from typing import Any, Literal
from uuid import UUID

from backend.errors import DraftValidationError, UploadError
from backend.models.team import TeamMember, TeamMemberDraft, TeamMemberForm
from backend.repos.team_repo import TeamRepo
from backend.services.crud_sync import Confirm, CrudBackend, CrudMessages, CrudSync
from backend.services.image_upload import ImageUploader
from backend.services.notifier import Notifier

logger = logging.getLogger(__name__)

SessionState = Literal["idle", "editing", "submitting"]

TEAM_MESSAGES = CrudMessages(
    fetch_failed="Failed to fetch team members",
    created="Team member added successfully",
    create_failed="Failed to add team member",
    updated="Team member updated successfully",
    update_failed="Failed to update team member",
    deleted="Team member deleted successfully",
    delete_failed="Failed to delete team member",
    confirm_delete="Are you sure you want to delete this team member?",
)


class TeamBackend(CrudBackend[TeamMember, TeamMemberDraft]):
    """CRUD capabilities over the teams table. The admin list is never scoped."""

    def __init__(self, repo: TeamRepo):
        self.repo = repo

    async def list_items(self, scope: Any | None) -> list[TeamMember]:
        return await self.repo.list_all()

    async def create(self, draft: TeamMemberDraft) -> TeamMember:
        return await self.repo.create(draft)

    async def update(self, item_id: UUID, draft: TeamMemberDraft) -> TeamMember | None:
        return await self.repo.update(item_id, draft)

    async def delete(self, item_id: UUID) -> bool:
        return await self.repo.delete(item_id)


class TeamAdminSession:
    """Admin table and create/edit dialog for team members."""

    def __init__(self, repo: TeamRepo, uploader: ImageUploader, notifier: Notifier):
        self.uploader = uploader
        self.notifier = notifier
        self.sync: CrudSync[TeamMember, TeamMemberDraft] = CrudSync(TeamBackend(repo), notifier, TEAM_MESSAGES)
        self.state: SessionState = "idle"
        self.editing_id: UUID | None = None
        self.form = TeamMemberForm()
        self.uploading = False
        self.missing_fields: list[str] = []

    @property
    def members(self) -> list[TeamMember]:
        return self.sync.items

    @property
    def loading(self) -> bool:
        return self.sync.loading

    async def load(self) -> bool:
        return await self.sync.refresh()

    def find(self, member_id: UUID) -> TeamMember | None:
        return next((m for m in self.members if m.id == member_id), None)

    def _reset(self) -> None:
        self.editing_id = None
        self.form = TeamMemberForm()
        self.missing_fields = []

    def open_create(self) -> None:
        self._reset()
        self.state = "editing"

    def open_edit(self, member: TeamMember) -> None:
        self._reset()
        self.editing_id = member.id
        self.form = TeamMemberForm.from_member(member)
        self.state = "editing"

    def cancel(self) -> None:
        self._reset()
        self.state = "idle"

    def apply(self, **fields: str) -> None:
        """Write form field values into the draft buffer."""
        if self.state != "editing":
            raise RuntimeError("No create/edit dialog is open")
        self.form = self.form.model_copy(update=fields)

    async def upload_image(self, filename: str, data: bytes, content_type: str | None = None) -> str | None:
        """
        Upload a portrait and put its public URL into the draft.

        Returns:
            The public URL, or None if the upload failed
        """
        self.uploading = True
        try:
            url = await self.uploader.upload(filename, data, content_type)
        except UploadError:
            logger.exception("Upload error for %s", filename)
            self.notifier.error("Error uploading image")
            return None
        finally:
            self.uploading = False
        self.form = self.form.model_copy(update={"image_url": url})
        self.notifier.success("Image uploaded successfully")
        return url

    async def submit(self) -> bool:
        """
        Validate the draft and create or update the member.

        Nothing reaches the store unless name, role, bio and image URL are
        all filled in.
        """
        if self.state != "editing":
            logger.warning("submit called with no open dialog (state=%s)", self.state)
            return False
        if self.uploading:
            self.notifier.error("Wait for the image upload to finish")
            return False
        try:
            draft = self.form.to_draft()
        except DraftValidationError as e:
            self.missing_fields = e.missing
            self.notifier.error(str(e))
            return False
        self.missing_fields = []

        self.state = "submitting"
        if self.editing_id is not None:
            ok = await self.sync.update(self.editing_id, draft)
        else:
            ok = await self.sync.create(draft)

        if ok:
            self._reset()
            self.state = "idle"
        else:
            self.state = "editing"
        return ok

    async def delete(self, member_id: UUID, confirm: Confirm) -> bool:
        return await self.sync.delete(member_id, confirm)
