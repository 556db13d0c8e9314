"""
Repository layer for teamsite.

All SQL lives here and ONLY here. No database access outside this module.
"""

from backend.repos.competition_repo import CompetitionRepo
from backend.repos.table_store import PostgresTableStore, TableStore
from backend.repos.team_repo import TeamRepo

__all__ = [
    "TableStore",
    "PostgresTableStore",
    "TeamRepo",
    "CompetitionRepo",
]
