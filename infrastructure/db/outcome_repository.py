"""
Supabase Outcome Repository Implementation.

This module implements the OutcomeRepository protocol using Supabase as the
backend. Filter matching on edulevels/subjects is done in Python via
OutcomeFilter.matches() after narrowing the query to the filter's
outcome set.
"""
import logging
from typing import Optional, Dict, Any, List, Iterable, Set

from supabase import Client

from domain.models import Area, Outcome, OutcomeFilter
from infrastructure.db.tables import (
    AREAS_TABLE,
    AREA_OUTCOMES_TABLE,
    OUTCOMES_TABLE,
    OUTCOME_COLUMNS,
    outcome_to_row,
    row_to_outcome,
    to_columns,
)

logger = logging.getLogger(__name__)


class SupabaseOutcomeRepository:
    """Supabase implementation of OutcomeRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    # =========================================================================
    # Helpers
    # =========================================================================

    def _mapped_outcome_ids(self, area_ids: List[int]) -> Dict[int, Set[int]]:
        """Get area_id -> mapped outcome IDs."""
        if not area_ids:
            return {}
        result = self._client.table(AREA_OUTCOMES_TABLE) \
            .select("outcomeareaid, outcomeid") \
            .in_("outcomeareaid", area_ids) \
            .execute()

        mapped: Dict[int, Set[int]] = {}
        for row in result.data or []:
            mapped.setdefault(row["outcomeareaid"], set()).add(row["outcomeid"])
        return mapped

    def _fetch_by_ids(self, outcome_ids: Iterable[int]) -> Dict[int, Outcome]:
        outcome_ids = list(outcome_ids)
        if not outcome_ids:
            return {}
        result = self._client.table(OUTCOMES_TABLE) \
            .select("*") \
            .in_("id", outcome_ids) \
            .execute()
        outcomes = [row_to_outcome(row) for row in result.data or []]
        return {o.id: o for o in outcomes}

    # =========================================================================
    # OutcomeRepository Protocol Methods
    # =========================================================================

    def find(self, outcome_id: int) -> Optional[Outcome]:
        """Get an outcome by ID."""
        try:
            result = self._client.table(OUTCOMES_TABLE) \
                .select("*") \
                .eq("id", outcome_id) \
                .execute()

            if result.data:
                return row_to_outcome(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching outcome {outcome_id}: {e}")
            raise

    def find_by_ids(self, outcome_ids: Iterable[int]) -> Dict[int, Outcome]:
        """Get outcomes by ID; unknown IDs are absent."""
        try:
            return self._fetch_by_ids(outcome_ids)

        except Exception as e:
            logger.error(f"Error fetching outcomes by ids: {e}")
            raise

    def find_by(self, criteria: Dict[str, Any]) -> List[Outcome]:
        """Get all outcomes whose fields equal the given values."""
        columns = to_columns(criteria, OUTCOME_COLUMNS)
        try:
            query = self._client.table(OUTCOMES_TABLE).select("*")
            for column, value in columns.items():
                query = query.eq(column, value)
            result = query.execute()
            return [row_to_outcome(row) for row in result.data or []]

        except Exception as e:
            logger.error(f"Error finding outcomes by {criteria}: {e}")
            raise

    def find_by_outcome_set(self, outcome_set_id: int) -> Dict[int, Outcome]:
        """Get the non-deleted outcomes of an outcome set."""
        try:
            result = self._client.table(OUTCOMES_TABLE) \
                .select("*") \
                .eq("outcomesetid", outcome_set_id) \
                .eq("deleted", False) \
                .execute()
            outcomes = [row_to_outcome(row) for row in result.data or []]
            return {o.id: o for o in outcomes}

        except Exception as e:
            logger.error(f"Error fetching outcomes of set {outcome_set_id}: {e}")
            raise

    def find_by_area(
        self,
        area: Area,
        *,
        filter_deleted: bool = True,
    ) -> Dict[int, Outcome]:
        """Get the outcomes mapped to an area."""
        if area.id is None:
            return {}
        try:
            mapped = self._mapped_outcome_ids([area.id]).get(area.id, set())
            outcomes = self._fetch_by_ids(sorted(mapped))
            if filter_deleted:
                outcomes = {k: o for k, o in outcomes.items() if not o.deleted}
            return outcomes

        except Exception as e:
            logger.error(f"Error fetching outcomes for area {area.key}: {e}")
            raise

    def find_by_area_and_filter(
        self,
        area: Area,
        outcome_filter: OutcomeFilter,
    ) -> Dict[int, Outcome]:
        """Get the assessable outcomes an area may be mapped to under a filter."""
        try:
            mapped: Set[int] = set()
            if area.id is not None:
                mapped = self._mapped_outcome_ids([area.id]).get(area.id, set())

            result = self._client.table(OUTCOMES_TABLE) \
                .select("*") \
                .eq("outcomesetid", outcome_filter.outcome_set_id) \
                .eq("assessable", True) \
                .execute()

            outcomes: Dict[int, Outcome] = {}
            for row in result.data or []:
                outcome = row_to_outcome(row)
                if outcome.deleted and outcome.id not in mapped:
                    continue
                if outcome_filter.matches(outcome):
                    outcomes[outcome.id] = outcome
            return outcomes

        except Exception as e:
            logger.error(f"Error fetching filtered outcomes for area {area.key}: {e}")
            raise

    def find_by_filter(self, outcome_filter: OutcomeFilter) -> Dict[int, Outcome]:
        """Get the non-deleted, assessable outcomes matching a filter."""
        try:
            result = self._client.table(OUTCOMES_TABLE) \
                .select("*") \
                .eq("outcomesetid", outcome_filter.outcome_set_id) \
                .eq("assessable", True) \
                .eq("deleted", False) \
                .execute()

            outcomes = [row_to_outcome(row) for row in result.data or []]
            return {o.id: o for o in outcomes if outcome_filter.matches(o)}

        except Exception as e:
            logger.error(f"Error fetching outcomes for filter {outcome_filter.id}: {e}")
            raise

    def find_by_area_itemids(
        self,
        component: str,
        area: str,
        item_ids: Iterable[int],
    ) -> Dict[int, List[Outcome]]:
        """Get non-deleted mapped outcomes for several items, keyed by item ID."""
        item_ids = list(item_ids)
        if not item_ids:
            return {}
        try:
            areas = self._client.table(AREAS_TABLE) \
                .select("id, itemid") \
                .eq("component", component) \
                .eq("area", area) \
                .in_("itemid", item_ids) \
                .execute()
            item_by_area = {r["id"]: r["itemid"] for r in areas.data or []}
            if not item_by_area:
                return {}

            mapped = self._mapped_outcome_ids(list(item_by_area))
            all_ids = sorted(set().union(*mapped.values())) if mapped else []
            outcomes = self._fetch_by_ids(all_ids)

            results: Dict[int, List[Outcome]] = {}
            for area_id, outcome_ids in mapped.items():
                found = [
                    outcomes[oid] for oid in sorted(outcome_ids)
                    if oid in outcomes and not outcomes[oid].deleted
                ]
                if found:
                    results[item_by_area[area_id]] = found
            return results

        except Exception as e:
            logger.error(f"Error fetching outcome mappings for {component}/{area}: {e}")
            raise

    def save(self, outcome: Outcome) -> Outcome:
        """Insert or update an outcome."""
        row = outcome_to_row(outcome)
        try:
            if outcome.id is None:
                result = self._client.table(OUTCOMES_TABLE).insert(row).execute()
            else:
                result = self._client.table(OUTCOMES_TABLE) \
                    .update(row) \
                    .eq("id", outcome.id) \
                    .execute()

            if not result.data:
                raise RuntimeError("Saving outcome returned no data")
            return row_to_outcome(result.data[0])

        except Exception as e:
            logger.error(f"Error saving outcome {outcome.idnumber}: {e}")
            raise

    def remove(self, outcome: Outcome) -> None:
        """Soft-delete an outcome."""
        if outcome.id is None:
            return
        try:
            self._client.table(OUTCOMES_TABLE) \
                .update({"deleted": True}) \
                .eq("id", outcome.id) \
                .execute()

        except Exception as e:
            logger.error(f"Error deleting outcome {outcome.id}: {e}")
            raise
