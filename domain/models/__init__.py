"""
Domain models for the Outcome Mapper API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Area: A (component, area, item_id) piece of content outcomes attach to
- Outcome: A gradable competency definition
- OutcomeSet: A named grouping of outcomes
- OutcomeFilter: A course-scoped rule selecting eligible outcomes
- OutcomeSetMapping / MappableOutcomes: Read models for presentation

Usage:
    >>> from domain.models import Area, Outcome, OutcomeFilter, FilterCriteria

    >>> outcome_filter = OutcomeFilter(
    ...     outcome_set_id=3,
    ...     criteria=[FilterCriteria(edulevels="9", subjects="Math")],
    ... )
    >>> outcome_filter.matches(
    ...     Outcome(outcome_set_id=3, description="Solve linear equations",
    ...             edulevels=["9"], subjects=["Math"])
    ... )
    True
"""

from domain.models.area import Area
from domain.models.mappings import MappableOutcomes, OutcomeSetMapping
from domain.models.outcome import Outcome
from domain.models.outcome_filter import FilterCriteria, OutcomeFilter
from domain.models.outcome_set import OutcomeSet

__all__ = [
    # Entities
    "Area",
    "Outcome",
    "OutcomeSet",
    "OutcomeFilter",
    "FilterCriteria",
    # Read models
    "OutcomeSetMapping",
    "MappableOutcomes",
]
