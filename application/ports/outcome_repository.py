"""
Outcome Repository Interface (Port).

This module defines the abstract interface for outcome lookups. Most
lookups return dicts keyed by outcome ID so callers can union and
subtract result sets cheaply.
"""
from typing import Protocol, Optional, List, Dict, Any, Iterable

from domain.models import Area, Outcome, OutcomeFilter


class OutcomeRepository(Protocol):
    """Abstract interface for outcome persistence."""

    def find(self, outcome_id: int) -> Optional[Outcome]:
        """
        Get an outcome by ID (including soft-deleted outcomes).

        Returns:
            Outcome if found, None otherwise
        """
        ...

    def find_by_ids(self, outcome_ids: Iterable[int]) -> Dict[int, Outcome]:
        """
        Get outcomes by ID.

        Args:
            outcome_ids: Outcome IDs to fetch

        Returns:
            Dict of outcome_id -> Outcome. Unknown IDs are absent.
        """
        ...

    def find_by(self, criteria: Dict[str, Any]) -> List[Outcome]:
        """Get all outcomes whose fields equal the given values."""
        ...

    def find_by_outcome_set(self, outcome_set_id: int) -> Dict[int, Outcome]:
        """Get the non-deleted outcomes of an outcome set."""
        ...

    def find_by_area(
        self,
        area: Area,
        *,
        filter_deleted: bool = True,
    ) -> Dict[int, Outcome]:
        """
        Get the outcomes mapped to an area.

        Args:
            area: Area to look up
            filter_deleted: Exclude soft-deleted outcomes (default True)

        Returns:
            Dict of outcome_id -> Outcome
        """
        ...

    def find_by_area_and_filter(
        self,
        area: Area,
        outcome_filter: OutcomeFilter,
    ) -> Dict[int, Outcome]:
        """
        Get the outcomes that an area may be mapped to under a filter.

        Returns assessable outcomes matching the filter. Deleted outcomes
        are only included when they are still mapped to the area, so an
        operator can unmap them.
        """
        ...

    def find_by_filter(self, outcome_filter: OutcomeFilter) -> Dict[int, Outcome]:
        """Get the non-deleted, assessable outcomes matching a filter."""
        ...

    def find_by_area_itemids(
        self,
        component: str,
        area: str,
        item_ids: Iterable[int],
    ) -> Dict[int, List[Outcome]]:
        """
        Get non-deleted mapped outcomes for several items of one component area.

        Returns:
            Dict of item_id -> list of outcomes. Items without mappings
            are absent.
        """
        ...

    def save(self, outcome: Outcome) -> Outcome:
        """Insert or update an outcome, returning it with its ID set."""
        ...

    def remove(self, outcome: Outcome) -> None:
        """Soft-delete an outcome."""
        ...
