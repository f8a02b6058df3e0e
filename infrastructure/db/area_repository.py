"""
Supabase Area Repository Implementation.

This module implements the AreaRepository protocol using Supabase as the
backend. Areas live in ``outcome_areas``; the area <-> outcome association
rows live in ``outcome_area_outcomes``.
"""
import logging
from typing import Optional, Dict, Any, List, Iterable

from supabase import Client

from domain.models import Area, Outcome
from infrastructure.db.tables import (
    AREAS_TABLE,
    AREA_OUTCOMES_TABLE,
    AREA_COLUMNS,
    area_to_row,
    row_to_area,
    to_columns,
)

logger = logging.getLogger(__name__)


class SupabaseAreaRepository:
    """
    Supabase implementation of AreaRepository.

    Failures are logged and re-raised so the caller sees the original
    backing-store error.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def find(self, area_id: int) -> Optional[Area]:
        """Get an area by its storage ID."""
        try:
            result = self._client.table(AREAS_TABLE) \
                .select("*") \
                .eq("id", area_id) \
                .execute()

            if result.data:
                return row_to_area(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching area {area_id}: {e}")
            raise

    def find_one(
        self,
        component: str,
        area: str,
        item_id: int,
    ) -> Optional[Area]:
        """Get an area by its natural key."""
        try:
            result = self._client.table(AREAS_TABLE) \
                .select("*") \
                .eq("component", component) \
                .eq("area", area) \
                .eq("itemid", item_id) \
                .execute()

            if result.data:
                return row_to_area(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching area ({component}, {area}, {item_id}): {e}")
            raise

    def find_by(self, criteria: Dict[str, Any]) -> List[Area]:
        """Get all areas whose fields equal the given values."""
        columns = to_columns(criteria, AREA_COLUMNS)
        try:
            query = self._client.table(AREAS_TABLE).select("*")
            for column, value in columns.items():
                query = query.eq(column, value)
            result = query.execute()
            return [row_to_area(row) for row in result.data or []]

        except Exception as e:
            logger.error(f"Error finding areas by {criteria}: {e}")
            raise

    def save(self, area: Area) -> Area:
        """Insert or update an area."""
        row = area_to_row(area)
        try:
            if area.id is None:
                result = self._client.table(AREAS_TABLE).insert(row).execute()
            else:
                result = self._client.table(AREAS_TABLE) \
                    .update(row) \
                    .eq("id", area.id) \
                    .execute()

            if not result.data:
                raise RuntimeError(f"Saving area {area.key} returned no data")
            return row_to_area(result.data[0])

        except Exception as e:
            logger.error(f"Error saving area {area.key}: {e}")
            raise

    def remove(self, area: Area) -> None:
        """Delete an area together with all of its outcome mappings."""
        if area.id is None:
            return
        try:
            self._client.table(AREA_OUTCOMES_TABLE) \
                .delete() \
                .eq("outcomeareaid", area.id) \
                .execute()
            self._client.table(AREAS_TABLE) \
                .delete() \
                .eq("id", area.id) \
                .execute()

        except Exception as e:
            logger.error(f"Error removing area {area.key}: {e}")
            raise

    def save_area_outcomes(self, area: Area, outcomes: Iterable[Outcome]) -> None:
        """Map outcomes to an area, skipping ones already mapped."""
        outcome_ids = [o.id for o in outcomes]
        if not outcome_ids:
            return
        try:
            existing = self._client.table(AREA_OUTCOMES_TABLE) \
                .select("outcomeid") \
                .eq("outcomeareaid", area.id) \
                .execute()
            mapped = {r["outcomeid"] for r in existing.data or []}

            rows = [
                {"outcomeareaid": area.id, "outcomeid": outcome_id}
                for outcome_id in dict.fromkeys(outcome_ids)
                if outcome_id not in mapped
            ]
            if rows:
                self._client.table(AREA_OUTCOMES_TABLE).insert(rows).execute()

        except Exception as e:
            logger.error(f"Error saving outcome mappings for area {area.key}: {e}")
            raise

    def remove_area_outcomes(self, area: Area, outcomes: Iterable[Outcome]) -> None:
        """Unmap outcomes from an area."""
        outcome_ids = [o.id for o in outcomes]
        if not outcome_ids or area.id is None:
            return
        try:
            self._client.table(AREA_OUTCOMES_TABLE) \
                .delete() \
                .eq("outcomeareaid", area.id) \
                .in_("outcomeid", outcome_ids) \
                .execute()

        except Exception as e:
            logger.error(f"Error removing outcome mappings for area {area.key}: {e}")
            raise
