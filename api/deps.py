"""
FastAPI dependency providers for the Outcome Mapper API.

Routers depend on get_outcome_mapper(); it is assembled from the four
repository providers, each of which wraps the shared Supabase client.
Providers are annotated with the Protocol types from application.ports so
tests can swap in the in-memory fakes through app.dependency_overrides.

The Supabase client is created once per process. Repositories and the
service are cheap and are built per request.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    AreaRepository,
    FilterRepository,
    OutcomeRepository,
    OutcomeSetRepository,
)
from application.services import OutcomeMapperService

# Concrete implementations
from infrastructure import (
    SupabaseAreaRepository,
    SupabaseFilterRepository,
    SupabaseOutcomeRepository,
    SupabaseOutcomeSetRepository,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """Settings provider; delegates to the cached backend.settings.get_settings."""
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Build the Supabase client from settings on first use.

    Returns:
        The client, or None while the Supabase URL or key is missing
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Supabase client for endpoints that cannot work without the database.

    Raises:
        HTTPException: 503 while credentials are missing
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_area_repo(
    client: Client = Depends(get_supabase_client_required),
) -> AreaRepository:
    """
    Get AreaRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseAreaRepository(client)


def get_outcome_repo(
    client: Client = Depends(get_supabase_client_required),
) -> OutcomeRepository:
    """Get OutcomeRepository implementation."""
    return SupabaseOutcomeRepository(client)


def get_outcome_set_repo(
    client: Client = Depends(get_supabase_client_required),
) -> OutcomeSetRepository:
    """Get OutcomeSetRepository implementation."""
    return SupabaseOutcomeSetRepository(client)


def get_filter_repo(
    client: Client = Depends(get_supabase_client_required),
) -> FilterRepository:
    """Get FilterRepository implementation."""
    return SupabaseFilterRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_outcome_mapper(
    outcomes: OutcomeRepository = Depends(get_outcome_repo),
    outcome_sets: OutcomeSetRepository = Depends(get_outcome_set_repo),
    filters: FilterRepository = Depends(get_filter_repo),
    areas: AreaRepository = Depends(get_area_repo),
) -> OutcomeMapperService:
    """
    Get OutcomeMapperService with injected repositories.

    Args:
        outcomes: Outcome repository (injected)
        outcome_sets: Outcome set repository (injected)
        filters: Filter repository (injected)
        areas: Area repository (injected)

    Returns:
        OutcomeMapperService: Service for area <-> outcome mapping
    """
    return OutcomeMapperService(
        outcomes=outcomes,
        outcome_sets=outcome_sets,
        filters=filters,
        areas=areas,
    )
