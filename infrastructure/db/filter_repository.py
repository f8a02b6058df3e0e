"""
Supabase Filter Repository Implementation.

Course filters are stored in ``outcome_filters`` with their criteria list
kept in the ``filter`` JSON column.
"""
import logging
from typing import Optional, Dict, Any, List, Sequence

from supabase import Client

from domain.models import OutcomeFilter
from infrastructure.db.tables import (
    FILTERS_TABLE,
    FILTER_COLUMNS,
    filter_to_row,
    row_to_filter,
    to_columns,
)

logger = logging.getLogger(__name__)


class SupabaseFilterRepository:
    """Supabase implementation of FilterRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def find(self, filter_id: int) -> Optional[OutcomeFilter]:
        """Get a filter by ID."""
        try:
            result = self._client.table(FILTERS_TABLE) \
                .select("*") \
                .eq("id", filter_id) \
                .execute()

            if result.data:
                return row_to_filter(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching filter {filter_id}: {e}")
            raise

    def find_by(self, criteria: Dict[str, Any]) -> List[OutcomeFilter]:
        """Get all filters whose fields equal the given values."""
        columns = to_columns(criteria, FILTER_COLUMNS)
        try:
            query = self._client.table(FILTERS_TABLE).select("*")
            for column, value in columns.items():
                query = query.eq(column, value)
            result = query.execute()
            return [row_to_filter(row) for row in result.data or []]

        except Exception as e:
            logger.error(f"Error finding filters by {criteria}: {e}")
            raise

    def find_by_course(self, course_id: int) -> List[OutcomeFilter]:
        """Get all filters of a course."""
        return self.find_by({"course_id": course_id})

    def save(self, outcome_filter: OutcomeFilter) -> OutcomeFilter:
        """Insert or update a filter."""
        row = filter_to_row(outcome_filter)
        try:
            if outcome_filter.id is None:
                result = self._client.table(FILTERS_TABLE).insert(row).execute()
            else:
                result = self._client.table(FILTERS_TABLE) \
                    .update(row) \
                    .eq("id", outcome_filter.id) \
                    .execute()

            if not result.data:
                raise RuntimeError("Saving filter returned no data")
            return row_to_filter(result.data[0])

        except Exception as e:
            logger.error(f"Error saving filter for course {outcome_filter.course_id}: {e}")
            raise

    def remove(self, outcome_filter: OutcomeFilter) -> None:
        """Delete a filter."""
        if outcome_filter.id is None:
            return
        try:
            self._client.table(FILTERS_TABLE) \
                .delete() \
                .eq("id", outcome_filter.id) \
                .execute()

        except Exception as e:
            logger.error(f"Error deleting filter {outcome_filter.id}: {e}")
            raise

    def sync(self, course_id: int, filters: Sequence[OutcomeFilter]) -> List[OutcomeFilter]:
        """
        Replace all filters of a course.

        New rows are inserted before the old ones are deleted, so a failed
        insert leaves the course's previous filters in place.
        """
        for outcome_filter in filters:
            if outcome_filter.course_id != course_id:
                raise ValueError(
                    f"Filter course_id {outcome_filter.course_id} does not match {course_id}"
                )
        try:
            existing = self._client.table(FILTERS_TABLE) \
                .select("id") \
                .eq("courseid", course_id) \
                .execute()
            old_ids = [r["id"] for r in existing.data or []]

            saved: List[OutcomeFilter] = []
            if filters:
                rows = [filter_to_row(f) for f in filters]
                result = self._client.table(FILTERS_TABLE).insert(rows).execute()
                saved = [row_to_filter(row) for row in result.data or []]

            if old_ids:
                self._client.table(FILTERS_TABLE) \
                    .delete() \
                    .in_("id", old_ids) \
                    .execute()
            return saved

        except Exception as e:
            logger.error(f"Error syncing filters for course {course_id}: {e}")
            raise

    def remove_by_course(self, course_id: int) -> None:
        """Delete every filter of a course."""
        try:
            self._client.table(FILTERS_TABLE) \
                .delete() \
                .eq("courseid", course_id) \
                .execute()

        except Exception as e:
            logger.error(f"Error removing filters for course {course_id}: {e}")
            raise
