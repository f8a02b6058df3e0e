"""
Supabase Outcome Set Repository Implementation.
"""
import logging
from typing import Optional, Dict, Any, List, Iterable

from supabase import Client

from domain.models import Area, OutcomeSet
from infrastructure.db.tables import (
    AREA_OUTCOMES_TABLE,
    FILTERS_TABLE,
    OUTCOMES_TABLE,
    OUTCOME_SETS_TABLE,
    OUTCOME_SET_COLUMNS,
    outcome_set_to_row,
    row_to_outcome_set,
    to_columns,
)

logger = logging.getLogger(__name__)


class SupabaseOutcomeSetRepository:
    """Supabase implementation of OutcomeSetRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def _fetch_active(self, outcome_set_ids: Iterable[int]) -> List[OutcomeSet]:
        """Fetch non-deleted outcome sets by ID, ordered by name."""
        outcome_set_ids = sorted(set(outcome_set_ids))
        if not outcome_set_ids:
            return []
        result = self._client.table(OUTCOME_SETS_TABLE) \
            .select("*") \
            .in_("id", outcome_set_ids) \
            .eq("deleted", False) \
            .order("name") \
            .execute()
        return [row_to_outcome_set(row) for row in result.data or []]

    def find(self, outcome_set_id: int) -> Optional[OutcomeSet]:
        """Get an outcome set by ID."""
        try:
            result = self._client.table(OUTCOME_SETS_TABLE) \
                .select("*") \
                .eq("id", outcome_set_id) \
                .execute()

            if result.data:
                return row_to_outcome_set(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching outcome set {outcome_set_id}: {e}")
            raise

    def find_by(self, criteria: Dict[str, Any]) -> List[OutcomeSet]:
        """Get all outcome sets whose fields equal the given values."""
        columns = to_columns(criteria, OUTCOME_SET_COLUMNS)
        try:
            query = self._client.table(OUTCOME_SETS_TABLE).select("*")
            for column, value in columns.items():
                query = query.eq(column, value)
            result = query.execute()
            return [row_to_outcome_set(row) for row in result.data or []]

        except Exception as e:
            logger.error(f"Error finding outcome sets by {criteria}: {e}")
            raise

    def find_by_area(self, area: Area) -> List[OutcomeSet]:
        """Get the outcome sets owning at least one outcome mapped to an area."""
        if area.id is None:
            return []
        try:
            links = self._client.table(AREA_OUTCOMES_TABLE) \
                .select("outcomeid") \
                .eq("outcomeareaid", area.id) \
                .execute()
            outcome_ids = sorted({r["outcomeid"] for r in links.data or []})
            if not outcome_ids:
                return []

            outcomes = self._client.table(OUTCOMES_TABLE) \
                .select("outcomesetid") \
                .in_("id", outcome_ids) \
                .execute()
            return self._fetch_active(r["outcomesetid"] for r in outcomes.data or [])

        except Exception as e:
            logger.error(f"Error fetching outcome sets for area {area.key}: {e}")
            raise

    def find_used_by_course(self, course_id: int) -> Dict[int, OutcomeSet]:
        """Get the outcome sets referenced by a course's filters."""
        try:
            filters = self._client.table(FILTERS_TABLE) \
                .select("outcomesetid") \
                .eq("courseid", course_id) \
                .execute()
            outcome_sets = self._fetch_active(r["outcomesetid"] for r in filters.data or [])
            return {s.id: s for s in outcome_sets}

        except Exception as e:
            logger.error(f"Error fetching outcome sets used by course {course_id}: {e}")
            raise

    def save(self, outcome_set: OutcomeSet) -> OutcomeSet:
        """Insert or update an outcome set."""
        row = outcome_set_to_row(outcome_set)
        try:
            if outcome_set.id is None:
                result = self._client.table(OUTCOME_SETS_TABLE).insert(row).execute()
            else:
                result = self._client.table(OUTCOME_SETS_TABLE) \
                    .update(row) \
                    .eq("id", outcome_set.id) \
                    .execute()

            if not result.data:
                raise RuntimeError(f"Saving outcome set '{outcome_set.name}' returned no data")
            return row_to_outcome_set(result.data[0])

        except Exception as e:
            logger.error(f"Error saving outcome set '{outcome_set.name}': {e}")
            raise

    def remove(self, outcome_set: OutcomeSet) -> None:
        """Soft-delete an outcome set."""
        if outcome_set.id is None:
            return
        try:
            self._client.table(OUTCOME_SETS_TABLE) \
                .update({"deleted": True}) \
                .eq("id", outcome_set.id) \
                .execute()

        except Exception as e:
            logger.error(f"Error deleting outcome set {outcome_set.id}: {e}")
            raise
