"""
Infrastructure Layer for the Outcome Mapper API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseAreaRepository,
    SupabaseOutcomeRepository,
    SupabaseOutcomeSetRepository,
    SupabaseFilterRepository,
)

__all__ = [
    "SupabaseAreaRepository",
    "SupabaseOutcomeRepository",
    "SupabaseOutcomeSetRepository",
    "SupabaseFilterRepository",
]
