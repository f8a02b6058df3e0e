"""
Fake Outcome Repository for testing.

This module provides an in-memory implementation of OutcomeRepository.
Area lookups read mapping rows from a FakeAreaRepository.
"""
from typing import Optional, List, Dict, Any, Iterable

from domain.models import Area, Outcome, OutcomeFilter
from tests.fakes.area_repository import FakeAreaRepository


class FakeOutcomeRepository:
    """
    In-memory fake implementation of OutcomeRepository for testing.

    Usage:
        areas = FakeAreaRepository()
        repo = FakeOutcomeRepository(areas)
        repo.seed([Outcome(id=7, outcome_set_id=1, description="Add fractions")])
    """

    def __init__(self, areas: FakeAreaRepository):
        """Initialize with the area fake that owns mapping rows."""
        self._areas = areas
        self._outcomes: Dict[int, Outcome] = {}
        self._next_id = 1

    def reset(self) -> None:
        """Clear all stored outcomes."""
        self._outcomes.clear()
        self._next_id = 1

    def seed(self, outcomes: List[Outcome]) -> None:
        """
        Seed the repository with test data.

        Args:
            outcomes: Outcomes to store (IDs are assigned when missing)
        """
        for outcome in outcomes:
            self.save(outcome)

    def _copy(self, outcomes: Iterable[Outcome]) -> Dict[int, Outcome]:
        return {o.id: o.model_copy(deep=True) for o in sorted(outcomes, key=lambda o: o.id)}

    # =========================================================================
    # OutcomeRepository Protocol Methods
    # =========================================================================

    def find(self, outcome_id: int) -> Optional[Outcome]:
        """Get an outcome by ID."""
        outcome = self._outcomes.get(outcome_id)
        return outcome.model_copy(deep=True) if outcome else None

    def find_by_ids(self, outcome_ids: Iterable[int]) -> Dict[int, Outcome]:
        """Get outcomes by ID; unknown IDs are absent."""
        return self._copy(self._outcomes[i] for i in set(outcome_ids) if i in self._outcomes)

    def find_by(self, criteria: Dict[str, Any]) -> List[Outcome]:
        """Get all outcomes whose fields equal the given values."""
        unknown = set(criteria) - set(Outcome.model_fields)
        if unknown:
            raise ValueError(f"Unknown lookup field(s): {', '.join(sorted(unknown))}")
        matches = [
            o for o in self._outcomes.values()
            if all(getattr(o, k) == v for k, v in criteria.items())
        ]
        return list(self._copy(matches).values())

    def find_by_outcome_set(self, outcome_set_id: int) -> Dict[int, Outcome]:
        """Get the non-deleted outcomes of an outcome set."""
        return self._copy(
            o for o in self._outcomes.values()
            if o.outcome_set_id == outcome_set_id and not o.deleted
        )

    def find_by_area(
        self,
        area: Area,
        *,
        filter_deleted: bool = True,
    ) -> Dict[int, Outcome]:
        """Get the outcomes mapped to an area."""
        mapped = self._areas.mapped_outcome_ids(area.id)
        return self._copy(
            o for i, o in self._outcomes.items()
            if i in mapped and not (filter_deleted and o.deleted)
        )

    def find_by_area_and_filter(
        self,
        area: Area,
        outcome_filter: OutcomeFilter,
    ) -> Dict[int, Outcome]:
        """Get the assessable outcomes an area may be mapped to under a filter."""
        mapped = self._areas.mapped_outcome_ids(area.id)
        return self._copy(
            o for o in self._outcomes.values()
            if o.assessable
            and (not o.deleted or o.id in mapped)
            and outcome_filter.matches(o)
        )

    def find_by_filter(self, outcome_filter: OutcomeFilter) -> Dict[int, Outcome]:
        """Get the non-deleted, assessable outcomes matching a filter."""
        return self._copy(
            o for o in self._outcomes.values()
            if o.is_mappable and outcome_filter.matches(o)
        )

    def find_by_area_itemids(
        self,
        component: str,
        area: str,
        item_ids: Iterable[int],
    ) -> Dict[int, List[Outcome]]:
        """Get non-deleted mapped outcomes for several items, keyed by item ID."""
        results: Dict[int, List[Outcome]] = {}
        for item_id in item_ids:
            model = self._areas.find_one(component, area, item_id)
            if model is None:
                continue
            outcomes = list(self.find_by_area(model).values())
            if outcomes:
                results[item_id] = outcomes
        return results

    def save(self, outcome: Outcome) -> Outcome:
        """Insert or update an outcome."""
        if outcome.id is None:
            outcome = outcome.model_copy(update={"id": self._next_id})
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, outcome.id + 1)
        self._outcomes[outcome.id] = outcome.model_copy(deep=True)
        return outcome

    def remove(self, outcome: Outcome) -> None:
        """Soft-delete an outcome."""
        stored = self._outcomes.get(outcome.id)
        if stored is not None:
            self._outcomes[outcome.id] = stored.model_copy(update={"deleted": True})
