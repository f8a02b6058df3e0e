"""
Domain layer for the Outcome Mapper API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Area,
    FilterCriteria,
    MappableOutcomes,
    Outcome,
    OutcomeFilter,
    OutcomeSet,
    OutcomeSetMapping,
)

__all__ = [
    "Area",
    "FilterCriteria",
    "MappableOutcomes",
    "Outcome",
    "OutcomeFilter",
    "OutcomeSet",
    "OutcomeSetMapping",
]
