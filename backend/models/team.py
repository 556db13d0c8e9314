"""Team member models for the public roster and the admin table."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, ValidationError

from backend.errors import DraftValidationError
from backend.models.notification import Notification
from backend.ui.hover import HoverOptions
from backend.ui.reveal import RevealOptions

REQUIRED_FIELDS = ("name", "role", "bio", "image_url")


class TeamMember(BaseModel):
    """Core team member model. Represents a row in the teams table."""

    id: UUID
    name: str
    role: str
    bio: str
    image_url: str
    linkedin_url: str | None = None
    email: str | None = None
    status: str = "active"
    created_at: datetime


class TeamMemberDraft(BaseModel):
    """A validated draft, ready to be written to the teams table."""

    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    bio: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    linkedin_url: str | None = None
    email: EmailStr | None = None
    status: str = "active"

    def to_row(self) -> dict[str, str | None]:
        return self.model_dump(mode="json")


class TeamMemberForm(BaseModel):
    """
    Draft buffer behind the create/edit dialog.

    Every field is a plain string; blank means "not filled in". Converting to
    a TeamMemberDraft applies the required-field policy.
    """

    model_config = {"extra": "forbid"}

    name: str = ""
    role: str = ""
    bio: str = ""
    image_url: str = ""
    linkedin_url: str = ""
    email: str = ""
    status: str = "active"

    @classmethod
    def from_member(cls, member: TeamMember) -> TeamMemberForm:
        """Populate the buffer from an existing record for editing."""
        return cls(
            name=member.name,
            role=member.role,
            bio=member.bio,
            image_url=member.image_url,
            linkedin_url=member.linkedin_url or "",
            email=member.email or "",
            status=member.status,
        )

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    def to_draft(self) -> TeamMemberDraft:
        """
        Validate the buffer.

        Optional fields left blank become None rather than "".

        Raises:
            DraftValidationError: if a required field is blank or a value is malformed
        """
        missing = self.missing_fields()
        if missing:
            raise DraftValidationError(missing)
        try:
            return TeamMemberDraft(
                name=self.name.strip(),
                role=self.role.strip(),
                bio=self.bio.strip(),
                image_url=self.image_url.strip(),
                linkedin_url=self.linkedin_url.strip() or None,
                email=self.email.strip() or None,
                status=self.status.strip() or "active",
            )
        except ValidationError as e:
            invalid = [str(err["loc"][0]) for err in e.errors()]
            raise DraftValidationError(invalid, f"Invalid values for: {', '.join(invalid)}") from e


class UpdateTeamMemberRequest(BaseModel):
    """What the admin client sends to edit a member. All fields optional."""

    model_config = {"extra": "forbid"}

    name: str | None = None
    role: str | None = None
    bio: str | None = None
    image_url: str | None = None
    linkedin_url: str | None = None
    email: str | None = None
    status: str | None = None


class PublicTeamMember(BaseModel):
    """What the public roster exposes. No status, no timestamps."""

    id: UUID
    name: str
    role: str
    bio: str
    image_url: str
    linkedin_url: str | None
    email: str | None

    @classmethod
    def from_model(cls, member: TeamMember) -> PublicTeamMember:
        """Convert internal TeamMember model to public API response."""
        return cls(
            id=member.id,
            name=member.name,
            role=member.role,
            bio=member.bio,
            image_url=member.image_url,
            linkedin_url=member.linkedin_url,
            email=member.email,
        )


class RosterCard(BaseModel):
    """One roster card with the animation settings the page applies to it."""

    member: PublicTeamMember
    reveal: RevealOptions
    hover: HoverOptions


class RosterResponse(BaseModel):
    """What GET /api/teams returns."""

    show_section: bool
    cards: list[RosterCard]


class AdminTeamsResponse(BaseModel):
    """Admin table contents after an operation, plus the notifications it raised."""

    members: list[TeamMember]
    notifications: list[Notification] = Field(default_factory=list)


class UploadResponse(BaseModel):
    """What the image upload endpoint returns."""

    url: str
    notifications: list[Notification] = Field(default_factory=list)
