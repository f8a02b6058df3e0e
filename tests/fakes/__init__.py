"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import create_outcome_repos, create_outcome_mapper

    repos = create_outcome_repos()
    repos.outcomes.seed([Outcome(id=7, outcome_set_id=1, description="Add fractions")])
    mapper = create_outcome_mapper(repos)
"""
from dataclasses import dataclass
from typing import List, Optional

from application.services import OutcomeMapperService
from domain.models import FilterCriteria, Outcome, OutcomeFilter, OutcomeSet

# Import all fake implementations
from tests.fakes.area_repository import FakeAreaRepository
from tests.fakes.filter_repository import FakeFilterRepository
from tests.fakes.outcome_repository import FakeOutcomeRepository
from tests.fakes.outcome_set_repository import FakeOutcomeSetRepository


@dataclass
class FakeOutcomeRepos:
    """The four fakes wired together so lookups see each other's data."""

    areas: FakeAreaRepository
    outcomes: FakeOutcomeRepository
    outcome_sets: FakeOutcomeSetRepository
    filters: FakeFilterRepository

    def reset(self) -> None:
        """Reset every fake."""
        self.areas.reset()
        self.outcomes.reset()
        self.outcome_sets.reset()
        self.filters.reset()


# =============================================================================
# Factory Functions
# =============================================================================


def create_outcome_repos() -> FakeOutcomeRepos:
    """
    Create an empty, wired set of fake repositories.

    Returns:
        FakeOutcomeRepos with areas, outcomes, outcome_sets and filters
    """
    areas = FakeAreaRepository()
    outcomes = FakeOutcomeRepository(areas)
    filters = FakeFilterRepository()
    outcome_sets = FakeOutcomeSetRepository(areas, outcomes, filters)
    return FakeOutcomeRepos(
        areas=areas,
        outcomes=outcomes,
        outcome_sets=outcome_sets,
        filters=filters,
    )


def create_outcome_mapper(repos: Optional[FakeOutcomeRepos] = None) -> OutcomeMapperService:
    """
    Create an OutcomeMapperService backed by fakes.

    Args:
        repos: Fakes to use; new empty ones are created when omitted

    Returns:
        OutcomeMapperService wired to the fakes
    """
    repos = repos or create_outcome_repos()
    return OutcomeMapperService(
        outcomes=repos.outcomes,
        outcome_sets=repos.outcome_sets,
        filters=repos.filters,
        areas=repos.areas,
    )


def create_standards_catalog(
    *,
    course_id: int = 2,
) -> FakeOutcomeRepos:
    """
    Create fakes pre-populated with a small standards catalog.

    Contents:
    - Outcome set 1 "Common Core Math": outcomes 11 (grade 9), 12 (grade 10),
      13 (grade 9, not assessable), 14 (grade 9, deleted)
    - Outcome set 2 "Science Standards": outcomes 21, 22
    - Outcome set 3 "Unused Framework": outcome 31
    - Course ``course_id`` filters set 1 to grade 9 Math and includes all of set 2

    Args:
        course_id: Course that receives the filters

    Returns:
        Pre-populated FakeOutcomeRepos
    """
    repos = create_outcome_repos()

    repos.outcome_sets.seed([
        OutcomeSet(id=1, idnumber="CCSS.MATH", name="Common Core Math"),
        OutcomeSet(id=2, idnumber="NGSS", name="Science Standards"),
        OutcomeSet(id=3, idnumber="UNUSED", name="Unused Framework"),
    ])

    outcomes: List[Outcome] = [
        Outcome(id=11, outcome_set_id=1, idnumber="M.9.1", description="Solve linear equations",
                edulevels=["9"], subjects=["Math"]),
        Outcome(id=12, outcome_set_id=1, idnumber="M.10.1", description="Prove triangle congruence",
                edulevels=["10"], subjects=["Math"]),
        Outcome(id=13, outcome_set_id=1, idnumber="M.9.H", description="Math heading",
                assessable=False, edulevels=["9"], subjects=["Math"]),
        Outcome(id=14, outcome_set_id=1, idnumber="M.9.OLD", description="Retired standard",
                deleted=True, edulevels=["9"], subjects=["Math"]),
        Outcome(id=21, outcome_set_id=2, idnumber="S.1", description="Plan an investigation",
                edulevels=["9"], subjects=["Science"]),
        Outcome(id=22, outcome_set_id=2, idnumber="S.2", description="Analyze data",
                edulevels=["10"], subjects=["Science"]),
        Outcome(id=31, outcome_set_id=3, idnumber="U.1", description="Unused outcome"),
    ]
    repos.outcomes.seed(outcomes)

    repos.filters.seed([
        OutcomeFilter(
            course_id=course_id,
            outcome_set_id=1,
            criteria=[FilterCriteria(edulevels="9", subjects="Math")],
        ),
        OutcomeFilter(course_id=course_id, outcome_set_id=2),
    ])
    return repos


__all__ = [
    "FakeAreaRepository",
    "FakeOutcomeRepository",
    "FakeOutcomeSetRepository",
    "FakeFilterRepository",
    "FakeOutcomeRepos",
    "create_outcome_repos",
    "create_outcome_mapper",
    "create_standards_catalog",
]
