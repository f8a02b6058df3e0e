"""
Fake Outcome Set Repository for testing.
"""
from typing import Optional, List, Dict, Any

from domain.models import Area, OutcomeSet
from tests.fakes.area_repository import FakeAreaRepository
from tests.fakes.filter_repository import FakeFilterRepository
from tests.fakes.outcome_repository import FakeOutcomeRepository


class FakeOutcomeSetRepository:
    """
    In-memory fake implementation of OutcomeSetRepository for testing.

    Area and course lookups are answered from the sibling fakes, the same
    way the real repository joins mapping, outcome and filter tables.
    """

    def __init__(
        self,
        areas: FakeAreaRepository,
        outcomes: FakeOutcomeRepository,
        filters: FakeFilterRepository,
    ):
        self._areas = areas
        self._outcomes = outcomes
        self._filters = filters
        self._outcome_sets: Dict[int, OutcomeSet] = {}
        self._next_id = 1

    def reset(self) -> None:
        """Clear all stored outcome sets."""
        self._outcome_sets.clear()
        self._next_id = 1

    def seed(self, outcome_sets: List[OutcomeSet]) -> None:
        """Seed the repository with outcome sets."""
        for outcome_set in outcome_sets:
            self.save(outcome_set)

    def _active(self, outcome_set_ids) -> List[OutcomeSet]:
        found = [
            self._outcome_sets[i] for i in set(outcome_set_ids)
            if i in self._outcome_sets and not self._outcome_sets[i].deleted
        ]
        return [s.model_copy(deep=True) for s in sorted(found, key=lambda s: s.name)]

    # =========================================================================
    # OutcomeSetRepository Protocol Methods
    # =========================================================================

    def find(self, outcome_set_id: int) -> Optional[OutcomeSet]:
        """Get an outcome set by ID."""
        outcome_set = self._outcome_sets.get(outcome_set_id)
        return outcome_set.model_copy(deep=True) if outcome_set else None

    def find_by(self, criteria: Dict[str, Any]) -> List[OutcomeSet]:
        """Get all outcome sets whose fields equal the given values."""
        unknown = set(criteria) - set(OutcomeSet.model_fields)
        if unknown:
            raise ValueError(f"Unknown lookup field(s): {', '.join(sorted(unknown))}")
        return [
            s.model_copy(deep=True)
            for s in self._outcome_sets.values()
            if all(getattr(s, k) == v for k, v in criteria.items())
        ]

    def find_by_area(self, area: Area) -> List[OutcomeSet]:
        """Get the outcome sets owning at least one outcome mapped to an area."""
        mapped = self._outcomes.find_by_ids(self._areas.mapped_outcome_ids(area.id))
        return self._active(o.outcome_set_id for o in mapped.values())

    def find_used_by_course(self, course_id: int) -> Dict[int, OutcomeSet]:
        """Get the outcome sets referenced by a course's filters."""
        filters = self._filters.find_by_course(course_id)
        return {s.id: s for s in self._active(f.outcome_set_id for f in filters)}

    def save(self, outcome_set: OutcomeSet) -> OutcomeSet:
        """Insert or update an outcome set."""
        if outcome_set.id is None:
            outcome_set = outcome_set.model_copy(update={"id": self._next_id})
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, outcome_set.id + 1)
        self._outcome_sets[outcome_set.id] = outcome_set.model_copy(deep=True)
        return outcome_set

    def remove(self, outcome_set: OutcomeSet) -> None:
        """Soft-delete an outcome set."""
        stored = self._outcome_sets.get(outcome_set.id)
        if stored is not None:
            self._outcome_sets[outcome_set.id] = stored.model_copy(update={"deleted": True})
