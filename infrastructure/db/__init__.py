"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations can be
injected into services and routers for clean separation of concerns and
testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseAreaRepository,
        SupabaseOutcomeRepository,
        SupabaseOutcomeSetRepository,
        SupabaseFilterRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    area_repo = SupabaseAreaRepository(client)
    outcome_repo = SupabaseOutcomeRepository(client)
    outcome_set_repo = SupabaseOutcomeSetRepository(client)
    filter_repo = SupabaseFilterRepository(client)
"""

from infrastructure.db.area_repository import SupabaseAreaRepository
from infrastructure.db.outcome_repository import SupabaseOutcomeRepository
from infrastructure.db.outcome_set_repository import SupabaseOutcomeSetRepository
from infrastructure.db.filter_repository import SupabaseFilterRepository

__all__ = [
    # Areas and area <-> outcome mappings
    "SupabaseAreaRepository",

    # Outcomes and outcome sets
    "SupabaseOutcomeRepository",
    "SupabaseOutcomeSetRepository",

    # Course filters
    "SupabaseFilterRepository",
]
