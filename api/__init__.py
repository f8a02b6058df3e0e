"""
API package for the Outcome Mapper API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_area_repo,
    get_outcome_repo,
    get_outcome_set_repo,
    get_filter_repo,
    get_outcome_mapper,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_area_repo",
    "get_outcome_repo",
    "get_outcome_set_repo",
    "get_filter_repo",
    # Services
    "get_outcome_mapper",
]
