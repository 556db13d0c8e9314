"""Initial schema: team members, competitions and competition entries.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from alembic import op


# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Team members shown on the public roster
    op.execute("""
        CREATE TABLE teams (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name TEXT NOT NULL,
            role TEXT NOT NULL,
            bio TEXT NOT NULL,
            image_url TEXT NOT NULL,
            linkedin_url TEXT,
            email TEXT,
            status TEXT NOT NULL DEFAULT 'active',
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)

    op.execute("""
        CREATE INDEX idx_teams_status_created ON teams(status, created_at);
    """)

    op.execute("""
        CREATE TABLE competitions (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            title TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)

    # Entries are submitted by end users; status NULL reads as pending
    op.execute("""
        CREATE TABLE competition_entries (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            competition_id UUID NOT NULL REFERENCES competitions(id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            ticket_number TEXT,
            proof_of_payment_url TEXT,
            status TEXT DEFAULT 'pending' CHECK (status IN ('pending', 'approved', 'rejected')),
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)

    op.execute("""
        CREATE INDEX idx_competition_entries_competition
        ON competition_entries(competition_id, created_at DESC);
    """)


def downgrade():
    op.execute("DROP TABLE IF EXISTS competition_entries;")
    op.execute("DROP TABLE IF EXISTS competitions;")
    op.execute("DROP TABLE IF EXISTS teams;")
