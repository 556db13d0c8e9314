#!/usr/bin/env python3
"""
Seed demo data: a small team and one competition with a few entries.

Usage:
    python scripts/seed_demo_team.py

Goes through the same repositories the admin tabs use, so the rows look
exactly like ones created from the UI.
"""

import asyncio
import sys

# Add project root to path
sys.path.insert(0, ".")

from backend.db import close_pool, init_pool  # noqa: E402
from backend.models.team import TeamMemberForm  # noqa: E402
from backend.repos.table_store import table_store  # noqa: E402
from backend.repos.team_repo import TeamRepo  # noqa: E402

DEMO_TEAM = [
    TeamMemberForm(
        name="Amara Okafor",
        role="Founder & CEO",
        bio="Started the company from a kitchen table and still answers support email on Sundays.",
        image_url="https://assets.teamsite.dev/team-images/demo-amara.jpg",
        linkedin_url="https://www.linkedin.com/in/amara-okafor-demo",
    ),
    TeamMemberForm(
        name="Jonas Lindqvist",
        role="Head of Engineering",
        bio="Keeps the lights on and the deploys boring.",
        image_url="https://assets.teamsite.dev/team-images/demo-jonas.jpg",
        email="jonas@example.com",
    ),
    TeamMemberForm(
        name="Priya Raman",
        role="Community Lead",
        bio="Runs the competitions and reads every entry.",
        image_url="https://assets.teamsite.dev/team-images/demo-priya.jpg",
    ),
]

DEMO_ENTRANTS = [
    ("Grace Hopper", "grace@example.com", "+15550000001", "approved"),
    ("Alan Turing", "alan@example.com", "+15550000002", "pending"),
    ("Katherine Johnson", "katherine@example.com", "+15550000003", None),
]


async def seed_team() -> None:
    repo = TeamRepo(table_store)
    for form in DEMO_TEAM:
        member = await repo.create(form.to_draft())
        print(f"Created team member: {member.name} ({member.id})")


async def seed_competition() -> None:
    competition = await table_store.insert("competitions", {"title": "Summer Giveaway"})
    print(f"Created competition: {competition['id']}")
    for index, (name, email, phone, status) in enumerate(DEMO_ENTRANTS, start=1):
        await table_store.insert(
            "competition_entries",
            {
                "competition_id": competition["id"],
                "name": name,
                "email": email,
                "phone": phone,
                "ticket_number": f"SG-{index:04d}" if status == "approved" else None,
                "status": status,
            },
        )
    print(f"Created {len(DEMO_ENTRANTS)} entries")


async def main():
    await init_pool()

    try:
        await seed_team()
        await seed_competition()
    finally:
        await close_pool()


if __name__ == "__main__":
    asyncio.run(main())
