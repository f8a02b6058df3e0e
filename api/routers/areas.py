"""
Areas router for area <-> outcome mappings.

This router contains endpoints for:
- GET /areas/{component}/{area}/outcomes?item_ids= - Mappings of several items
- GET /areas/{component}/{area}/{item_id}/outcomes - Mappings of one item
- GET /areas/{component}/{area}/{item_id}/form - Eligible choices for an item
- PUT /areas/{component}/{area}/{item_id}/outcome - Save a single outcome mapping
- PUT /areas/{component}/{area}/{item_id}/outcomes - Save multiple outcome mappings
- DELETE /areas/{component}/{area}/{item_id} - Remove an area and its mappings
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict

from api.deps import get_outcome_mapper
from application.services import OutcomeMapperService
from domain.models import Area, MappableOutcomes

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/areas",
    tags=["Areas"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class SingleMappingRequest(BaseModel):
    """Request mapping one outcome, or none to unmap."""
    model_config = ConfigDict(extra="forbid")

    outcome_id: Optional[int] = None


class MultiMappingRequest(BaseModel):
    """Request saving the selected outcomes of an area."""
    model_config = ConfigDict(extra="forbid")

    outcome_ids: List[int] = []
    course_id: int


def _area_response(area: Optional[Area]) -> dict:
    return {
        "success": True,
        "area": area.model_dump() if area else None,
        "mapped": area is not None,
    }


# =============================================================================
# Read Endpoints
# =============================================================================


@router.get("/{component}/{area}/outcomes")
def get_many_outcome_mappings(
    component: str,
    area: str,
    item_ids: List[int] = Query(..., description="Item IDs to look up"),
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """Get outcome mappings for several items, keyed by item ID."""
    results = mapper.get_many_outcome_mappings(component, area, item_ids)
    return {
        "success": True,
        "mappings": {
            str(item_id): [o.model_dump() for o in outcomes]
            for item_id, outcomes in results.items()
        },
    }


@router.get("/{component}/{area}/{item_id}/outcomes")
def get_outcome_mappings(
    component: str,
    area: str,
    item_id: int,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """Get the outcomes mapped to one item."""
    outcomes = mapper.get_outcome_mappings(component, area, item_id)
    return {
        "success": True,
        "outcomes": [o.model_dump() for o in outcomes],
        "count": len(outcomes),
    }


@router.get("/{component}/{area}/{item_id}/form")
def get_outcome_mappings_for_form(
    component: str,
    area: str,
    item_id: int,
    course_id: int = Query(..., description="Course whose filters apply"),
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Get the eligible outcome sets and outcomes for an item.

    Returns empty lists when the item has no mappings yet.
    """
    result = mapper.get_outcome_mappings_for_form(component, area, item_id, course_id)
    return (result or MappableOutcomes()).model_dump()


# =============================================================================
# Write Endpoints
# =============================================================================


@router.put("/{component}/{area}/{item_id}/outcome")
def save_single_mapping(
    component: str,
    area: str,
    item_id: int,
    request: SingleMappingRequest,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Map exactly one outcome to an item, or unmap everything.

    Returns 404 when the outcome does not exist.
    """
    model = mapper.save_single_mapping(component, area, item_id, request.outcome_id)
    return _area_response(model)


@router.put("/{component}/{area}/{item_id}/outcomes")
def save_multi_mapping(
    component: str,
    area: str,
    item_id: int,
    request: MultiMappingRequest,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Save the selected outcomes of an item.

    Returns 404 when any outcome does not exist.
    """
    model = mapper.save_multi_mapping(
        component, area, item_id, request.outcome_ids, request.course_id
    )
    return _area_response(model)


@router.delete("/{component}/{area}/{item_id}")
def remove_area(
    component: str,
    area: str,
    item_id: int,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """Remove an area and ALL of its mappings. Idempotent."""
    removed = mapper.remove_area_by_key(component, area, item_id)
    return {"success": True, "removed": removed}
