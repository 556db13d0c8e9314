"""Public team roster: active members in founding order, with their card animations."""

from __future__ import annotations

import logging

from backend.models.team import PublicTeamMember, RosterCard, TeamMember
from backend.repos.team_repo import TeamRepo
from backend.ui.hover import HoverOptions
from backend.ui.reveal import RevealOptions

logger = logging.getLogger(__name__)

# Seconds between consecutive cards fading in
CARD_STAGGER = 0.1


class PublicRoster:
    """
    Read-only view of the active team.

    Loads once. A failed load is logged and treated as an empty team, so the
    public page simply leaves the section out instead of showing an error.
    """

    def __init__(self, repo: TeamRepo):
        self.repo = repo
        self.members: list[TeamMember] = []
        self.loading = True
        self._loaded = False

    async def load(self) -> list[TeamMember]:
        if self._loaded:
            return self.members
        self._loaded = True
        try:
            self.members = await self.repo.list_active()
        except Exception:
            logger.exception("Error fetching active team members")
        finally:
            self.loading = False
        return self.members

    @property
    def visible(self) -> bool:
        """Whether the team section should be rendered at all."""
        return not self.loading and bool(self.members)

    def cards(self) -> list[RosterCard]:
        return [
            RosterCard(
                member=PublicTeamMember.from_model(member),
                reveal=RevealOptions(direction="up", delay=round(CARD_STAGGER * (index + 1), 3)),
                hover=HoverOptions(),
            )
            for index, member in enumerate(self.members)
        ]
