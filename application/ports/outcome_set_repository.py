"""
Outcome Set Repository Interface (Port).
"""
from typing import Protocol, Optional, List, Dict, Any

from domain.models import Area, OutcomeSet


class OutcomeSetRepository(Protocol):
    """Abstract interface for outcome set persistence."""

    def find(self, outcome_set_id: int) -> Optional[OutcomeSet]:
        """Get an outcome set by ID, or None if not found."""
        ...

    def find_by(self, criteria: Dict[str, Any]) -> List[OutcomeSet]:
        """Get all outcome sets whose fields equal the given values."""
        ...

    def find_by_area(self, area: Area) -> List[OutcomeSet]:
        """
        Get the outcome sets associated with an area.

        An outcome set is associated with an area when at least one of its
        outcomes is mapped to the area. Soft-deleted sets are excluded.
        """
        ...

    def find_used_by_course(self, course_id: int) -> Dict[int, OutcomeSet]:
        """
        Get the outcome sets referenced by a course's filters.

        Returns:
            Dict of outcome_set_id -> OutcomeSet
        """
        ...

    def save(self, outcome_set: OutcomeSet) -> OutcomeSet:
        """Insert or update an outcome set, returning it with its ID set."""
        ...

    def remove(self, outcome_set: OutcomeSet) -> None:
        """Soft-delete an outcome set."""
        ...
