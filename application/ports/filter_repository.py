"""
Filter Repository Interface (Port).

Filters are course-scoped and are always replaced wholesale per course
via sync().
"""
from typing import Protocol, Optional, List, Dict, Any, Sequence

from domain.models import OutcomeFilter


class FilterRepository(Protocol):
    """Abstract interface for course filter persistence."""

    def find(self, filter_id: int) -> Optional[OutcomeFilter]:
        """Get a filter by ID, or None if not found."""
        ...

    def find_by(self, criteria: Dict[str, Any]) -> List[OutcomeFilter]:
        """Get all filters whose fields equal the given values."""
        ...

    def find_by_course(self, course_id: int) -> List[OutcomeFilter]:
        """Get all filters of a course."""
        ...

    def save(self, outcome_filter: OutcomeFilter) -> OutcomeFilter:
        """Insert or update a filter, returning it with its ID set."""
        ...

    def remove(self, outcome_filter: OutcomeFilter) -> None:
        """Delete a filter. Missing filters are ignored."""
        ...

    def sync(self, course_id: int, filters: Sequence[OutcomeFilter]) -> List[OutcomeFilter]:
        """
        Replace all filters of a course with the given filters.

        Args:
            course_id: Course to sync
            filters: New filters; their course_id must equal course_id

        Returns:
            The persisted filters
        """
        ...

    def remove_by_course(self, course_id: int) -> None:
        """Delete every filter of a course. Other courses are untouched."""
        ...
