"""Tests for the draft buffer and entry models."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from backend.errors import DraftValidationError
from backend.models.competition import CompetitionEntry
from backend.models.team import TeamMember, TeamMemberForm


def _member(**overrides) -> TeamMember:
    values = {
        "id": uuid4(),
        "name": "Ada",
        "role": "Founder",
        "bio": "First programmer.",
        "image_url": "https://cdn.test/ada.png",
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return TeamMember(**values)


def test_blank_form_lists_all_required_fields():
    with pytest.raises(DraftValidationError) as exc_info:
        TeamMemberForm().to_draft()
    assert exc_info.value.missing == ["name", "role", "bio", "image_url"]
    assert "name, role, bio, image_url" in str(exc_info.value)


def test_optional_fields_blank_become_none():
    draft = TeamMemberForm(name="Ada", role="Founder", bio="Bio", image_url="u", linkedin_url=" ", email="").to_draft()
    assert draft.linkedin_url is None
    assert draft.email is None
    assert draft.to_row() == {
        "name": "Ada",
        "role": "Founder",
        "bio": "Bio",
        "image_url": "u",
        "linkedin_url": None,
        "email": None,
        "status": "active",
    }


def test_values_are_trimmed():
    draft = TeamMemberForm(name="  Ada ", role="Founder", bio="Bio", image_url=" u ").to_draft()
    assert draft.name == "Ada"
    assert draft.image_url == "u"


def test_form_from_member_turns_none_into_blank():
    form = TeamMemberForm.from_member(_member(linkedin_url=None, email=None, status="inactive"))
    assert form.linkedin_url == ""
    assert form.email == ""
    assert form.status == "inactive"


def test_form_forbids_unknown_fields():
    with pytest.raises(ValueError):
        TeamMemberForm(nickname="x")


def test_entry_status_defaults_to_pending():
    entry = CompetitionEntry(
        id=uuid4(),
        competition_id=uuid4(),
        name="Grace",
        email="grace@example.com",
        phone="+15551234567",
        status=None,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )
    assert entry.status == "pending"
    assert entry.ticket_number is None
    assert entry.proof_of_payment_url is None
