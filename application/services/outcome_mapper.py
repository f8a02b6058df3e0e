"""
Outcome Mapper Service.

Assists with the common use cases of mapping outcomes and outcome sets to
content areas:
- Resolving which outcomes an area may be mapped to inside a course
- Saving single and multiple outcome selections for an area
- Saving and reading a course's outcome set filters

Invariant kept by every mutating operation: an Area row exists if and only
if it has at least one mapped outcome.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from application.exceptions import ContractViolationError, OutcomeNotFoundError
from application.ports import (
    AreaRepository,
    FilterRepository,
    OutcomeRepository,
    OutcomeSetRepository,
)
from domain.models import (
    Area,
    MappableOutcomes,
    Outcome,
    OutcomeFilter,
    OutcomeSet,
    OutcomeSetMapping,
)

logger = logging.getLogger(__name__)


class OutcomeMapperService:
    """
    Service orchestrating the area, outcome, outcome set and filter repositories.

    Dependencies are injected via constructor for testability. The course
    is always passed explicitly; there is no "current course" fallback.

    Usage:
        >>> mapper = OutcomeMapperService(
        ...     outcomes=outcome_repo,
        ...     outcome_sets=outcome_set_repo,
        ...     filters=filter_repo,
        ...     areas=area_repo,
        ... )
        >>> area = mapper.save_single_mapping("mod_forum", "forum", 42, outcome_id=7)
        >>> mapper.get_outcome_mappings("mod_forum", "forum", 42)
        [Outcome(id=7, ...)]
    """

    def __init__(
        self,
        outcomes: OutcomeRepository,
        outcome_sets: OutcomeSetRepository,
        filters: FilterRepository,
        areas: AreaRepository,
    ) -> None:
        self._outcomes = outcomes
        self._outcome_sets = outcome_sets
        self._filters = filters
        self._areas = areas

    # =========================================================================
    # Filter resolution
    # =========================================================================

    def resolve_eligible_outcomes(
        self,
        area: Area,
        course_id: int,
    ) -> Tuple[List[OutcomeSet], Dict[int, Outcome]]:
        """
        Find the outcomes of an area that pass the course's filters.

        Only outcome sets associated with the area that are referenced by
        at least one course filter contribute; other sets are silently
        skipped.

        Args:
            area: Area to resolve
            course_id: Course whose filters apply

        Returns:
            Tuple of (eligible outcome sets, dict of outcome_id -> Outcome)
        """
        course_filters = self._filters.find_by_course(course_id)
        area_sets = self._outcome_sets.find_by_area(area)

        outcome_sets: List[OutcomeSet] = []
        outcomes: Dict[int, Outcome] = {}
        for outcome_set in area_sets:
            for outcome_filter in course_filters:
                if outcome_filter.outcome_set_id != outcome_set.id:
                    continue
                for outcome_id, outcome in self._outcomes.find_by_area_and_filter(
                    area, outcome_filter
                ).items():
                    outcomes.setdefault(outcome_id, outcome)
                if outcome_set not in outcome_sets:
                    outcome_sets.append(outcome_set)

        logger.debug(
            f"Resolved {len(outcomes)} eligible outcomes in {len(outcome_sets)} "
            f"outcome sets for area {area.key} in course {course_id}"
        )
        return outcome_sets, outcomes

    # =========================================================================
    # Course outcome set filters
    # =========================================================================

    def get_outcome_set_mappings(self, course_id: int) -> List[OutcomeSetMapping]:
        """
        Get a course's filter configuration as flat rows.

        One row is produced per (filter, criteria entry) whose outcome set
        is in use by the course.
        """
        used_sets = self._outcome_sets.find_used_by_course(course_id)
        filters = self._filters.find_by({"course_id": course_id})

        rows: List[OutcomeSetMapping] = []
        for outcome_filter in filters:
            outcome_set = used_sets.get(outcome_filter.outcome_set_id)
            if outcome_set is None:
                continue
            for criteria in outcome_filter.criteria:
                rows.append(OutcomeSetMapping(
                    outcome_set_id=outcome_set.id,
                    name=outcome_set.name,
                    edulevels=criteria.edulevels,
                    subjects=criteria.subjects,
                ))
        return rows

    def save_outcome_set_mappings(
        self,
        course_id: int,
        filters: Sequence[OutcomeFilter],
    ) -> List[OutcomeFilter]:
        """
        Replace a course's filters.

        Args:
            course_id: Course to save filters for
            filters: New filters; their course_id is overwritten

        Returns:
            The persisted filters

        Raises:
            ContractViolationError: If any element is not an OutcomeFilter
        """
        scoped: List[OutcomeFilter] = []
        for outcome_filter in filters:
            if not isinstance(outcome_filter, OutcomeFilter):
                raise ContractViolationError(
                    "The filters parameter should be a sequence of OutcomeFilter "
                    f"instances, got {type(outcome_filter).__name__}"
                )
            scoped.append(outcome_filter.model_copy(update={"course_id": course_id}))

        logger.info(f"Syncing {len(scoped)} outcome set filters for course {course_id}")
        return self._filters.sync(course_id, scoped)

    def remove_course_filters(self, course_id: int) -> None:
        """Delete ALL outcome set filters of a course."""
        logger.info(f"Removing all outcome set filters for course {course_id}")
        self._filters.remove_by_course(course_id)

    # =========================================================================
    # Reading mappings
    # =========================================================================

    def get_mappable_outcomes(self, course_id: int) -> MappableOutcomes:
        """
        Get every outcome set and outcome an operator may pick in a course.

        Outcome sets are those used by the course's filters; outcomes are
        the non-deleted, assessable outcomes matching at least one filter.
        """
        used_sets = self._outcome_sets.find_used_by_course(course_id)
        outcomes: Dict[int, Outcome] = {}
        for outcome_filter in self._filters.find_by_course(course_id):
            if outcome_filter.outcome_set_id not in used_sets:
                continue
            for outcome_id, outcome in self._outcomes.find_by_filter(outcome_filter).items():
                outcomes.setdefault(outcome_id, outcome)

        return MappableOutcomes(
            outcomesets=list(used_sets.values()),
            outcomes=list(outcomes.values()),
        )

    def get_outcome_mappings_for_form(
        self,
        component: str,
        area: str,
        item_id: int,
        course_id: int,
    ) -> Optional[MappableOutcomes]:
        """
        Get the eligible outcome sets and outcomes for an existing area.

        Returns:
            MappableOutcomes, or None when the area has no mappings
        """
        model = self._areas.find_one(component, area, item_id)
        if model is None:
            return None

        outcome_sets, outcomes = self.resolve_eligible_outcomes(model, course_id)
        return MappableOutcomes(
            outcomesets=outcome_sets,
            outcomes=list(outcomes.values()),
        )

    def get_outcome_mappings(self, component: str, area: str, item_id: int) -> List[Outcome]:
        """Get the outcomes mapped to a single item."""
        results = self._outcomes.find_by_area_itemids(component, area, [item_id])
        return results.get(item_id, [])

    def get_many_outcome_mappings(
        self,
        component: str,
        area: str,
        item_ids: Iterable[int],
    ) -> Dict[int, List[Outcome]]:
        """
        Get outcome mappings for several items in a given component & area.

        Returns:
            Dict of item_id -> outcomes. Items that are not mapped to any
            outcome are absent.
        """
        return self._outcomes.find_by_area_itemids(component, area, list(item_ids))

    # =========================================================================
    # Saving mappings
    # =========================================================================

    def save_single_mapping(
        self,
        component: str,
        area: str,
        item_id: int,
        outcome_id: Optional[int],
    ) -> Optional[Area]:
        """
        Map exactly one outcome to an area, or unmap everything.

        Args:
            component: Component name
            area: Area name
            item_id: Item ID
            outcome_id: Outcome to map, or None to unmap

        Returns:
            The area, or None when there was nothing to save or the area
            was removed

        Raises:
            OutcomeNotFoundError: If outcome_id does not exist
        """
        model = self._areas.find_one(component, area, item_id)

        if outcome_id is None:
            if model is None:
                logger.debug(f"Nothing to save for area {(component, area, item_id)}")
                return None
            logger.info(f"Unmapping all outcomes from area {model.key}")
            self._areas.remove(model)
            return None

        mapped = self._outcomes.find_by_area(model, filter_deleted=False) if model else {}
        outcome = mapped.pop(outcome_id, None)
        if outcome is None:
            outcome = self._outcomes.find(outcome_id)
            if outcome is None:
                raise OutcomeNotFoundError([outcome_id])

        if model is None:
            model = self._areas.save(Area(component=component, area=area, item_id=item_id))
            logger.info(f"Created outcome area {model.key} (id={model.id})")

        self._areas.remove_area_outcomes(model, mapped.values())
        self._areas.save_area_outcomes(model, [outcome])
        logger.info(f"Mapped outcome {outcome_id} to area {model.key}")
        return model

    def save_multi_mapping(
        self,
        component: str,
        area: str,
        item_id: int,
        outcome_ids: Iterable[int],
        course_id: int,
    ) -> Optional[Area]:
        """
        Save the selected outcomes of an area.

        Eligible outcomes (see resolve_eligible_outcomes) that are not
        selected are unmapped; every selected outcome is mapped, whether or
        not it is eligible. Mappings outside the eligible set are kept.

        Args:
            component: Component name
            area: Area name
            item_id: Item ID
            outcome_ids: Selected outcome IDs
            course_id: Course whose filters decide eligibility

        Returns:
            The area, or None when there was nothing to save or no
            mappings remain

        Raises:
            OutcomeNotFoundError: If any outcome ID does not exist
        """
        outcome_ids = list(dict.fromkeys(outcome_ids))
        model = self._areas.find_one(component, area, item_id)

        if model is None and not outcome_ids:
            logger.debug(f"Nothing to save for area {(component, area, item_id)}")
            return None

        selected = self._outcomes.find_by_ids(outcome_ids)
        missing = set(outcome_ids) - set(selected)
        if missing:
            raise OutcomeNotFoundError(missing)

        if model is None:
            model = self._areas.save(Area(component=component, area=area, item_id=item_id))
            logger.info(f"Created outcome area {model.key} (id={model.id})")

        _, choices = self.resolve_eligible_outcomes(model, course_id)
        for outcome_id in selected:
            choices.pop(outcome_id, None)

        self._areas.remove_area_outcomes(model, choices.values())
        self._areas.save_area_outcomes(model, selected.values())

        # After saving, check to see if any outcomes remain
        if not self._outcomes.find_by_area(model, filter_deleted=False):
            logger.info(f"No outcomes left on area {model.key}, removing it")
            self._areas.remove(model)
            return None

        logger.info(
            f"Saved {len(selected)} outcome mappings on area {model.key} "
            f"(unmapped {len(choices)})"
        )
        return model

    def remove_area(self, area: Area) -> None:
        """Remove an outcome area and ALL data associated with it."""
        logger.info(f"Removing outcome area {area.key}")
        self._areas.remove(area)

    def remove_area_by_key(self, component: str, area: str, item_id: int) -> bool:
        """
        Remove an area looked up by its natural key.

        Returns:
            True if an area was removed, False if it did not exist
        """
        model = self._areas.find_one(component, area, item_id)
        if model is None:
            logger.debug(f"Area {(component, area, item_id)} already absent")
            return False
        self.remove_area(model)
        return True
