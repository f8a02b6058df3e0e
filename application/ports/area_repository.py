"""
Area Repository Interface (Port).

This module defines the abstract interface for content area persistence,
including the area <-> outcome association rows.
"""
from typing import Protocol, Optional, List, Dict, Any, Iterable

from domain.models import Area, Outcome


class AreaRepository(Protocol):
    """
    Abstract interface for area persistence.

    Areas are identified by (component, area, item_id). The repository also
    owns the many-to-many mapping rows between areas and outcomes.
    """

    def find(self, area_id: int) -> Optional[Area]:
        """
        Get an area by its storage ID.

        Args:
            area_id: Area ID

        Returns:
            Area if found, None otherwise
        """
        ...

    def find_one(
        self,
        component: str,
        area: str,
        item_id: int,
    ) -> Optional[Area]:
        """
        Get an area by its natural key.

        Args:
            component: Component name
            area: Area name
            item_id: Item ID

        Returns:
            Area if found, None otherwise
        """
        ...

    def find_by(self, criteria: Dict[str, Any]) -> List[Area]:
        """
        Get all areas whose fields equal the given values.

        Args:
            criteria: Mapping of Area field name -> required value

        Returns:
            List of matching areas (possibly empty)
        """
        ...

    def save(self, area: Area) -> Area:
        """
        Insert or update an area.

        Args:
            area: Area to persist

        Returns:
            The persisted area with its ID set
        """
        ...

    def remove(self, area: Area) -> None:
        """
        Delete an area together with all of its outcome mappings.

        Removing an area that does not exist is a no-op.
        """
        ...

    def save_area_outcomes(self, area: Area, outcomes: Iterable[Outcome]) -> None:
        """
        Map outcomes to an area.

        Outcomes that are already mapped are left untouched.
        """
        ...

    def remove_area_outcomes(self, area: Area, outcomes: Iterable[Outcome]) -> None:
        """
        Unmap outcomes from an area.

        Outcomes that are not mapped are ignored. The area row itself is
        never removed here.
        """
        ...
