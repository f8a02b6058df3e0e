"""
Courses router for course-level outcome set filters.

This router contains endpoints for:
- GET /courses/{course_id}/outcome-sets/mappings - Filter rows of a course
- PUT /courses/{course_id}/outcome-sets/mappings - Replace a course's filters
- DELETE /courses/{course_id}/outcome-sets/mappings - Remove all course filters
- GET /courses/{course_id}/mappable-outcomes - Outcome sets/outcomes for the selection panel
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from api.deps import get_outcome_mapper
from application.services import OutcomeMapperService
from domain.models import FilterCriteria, OutcomeFilter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/courses",
    tags=["Courses"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class FilterCriteriaPayload(BaseModel):
    """One criteria entry of a course filter."""
    model_config = ConfigDict(extra="forbid")

    edulevels: Optional[str] = None
    subjects: Optional[str] = None


class OutcomeSetFilterPayload(BaseModel):
    """Filter binding an outcome set to a course."""
    model_config = ConfigDict(extra="forbid")

    outcome_set_id: int
    criteria: List[FilterCriteriaPayload] = []


class SaveOutcomeSetMappingsRequest(BaseModel):
    """Request replacing all filters of a course."""
    filters: List[OutcomeSetFilterPayload]


# =============================================================================
# Outcome Set Filter Endpoints
# =============================================================================


@router.get("/{course_id}/outcome-sets/mappings")
def get_outcome_set_mappings(
    course_id: int,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Get the outcome set filter rows of a course.

    Returns:
        Filter rows with count
    """
    rows = mapper.get_outcome_set_mappings(course_id)
    return {
        "success": True,
        "mappings": [row.model_dump() for row in rows],
        "count": len(rows),
    }


@router.put("/{course_id}/outcome-sets/mappings")
def save_outcome_set_mappings(
    course_id: int,
    request: SaveOutcomeSetMappingsRequest,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Replace all outcome set filters of a course.

    Returns:
        The saved filters
    """
    filters = [
        OutcomeFilter(
            outcome_set_id=f.outcome_set_id,
            criteria=[FilterCriteria(**c.model_dump()) for c in f.criteria],
        )
        for f in request.filters
    ]
    saved = mapper.save_outcome_set_mappings(course_id, filters)
    return {
        "success": True,
        "filters": [f.model_dump() for f in saved],
        "count": len(saved),
    }


@router.delete("/{course_id}/outcome-sets/mappings")
def remove_outcome_set_mappings(
    course_id: int,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """Delete ALL outcome set filters of a course."""
    mapper.remove_course_filters(course_id)
    return {"success": True}


# =============================================================================
# Selection Panel Endpoints
# =============================================================================


@router.get("/{course_id}/mappable-outcomes")
def get_mappable_outcomes(
    course_id: int,
    mapper: OutcomeMapperService = Depends(get_outcome_mapper),
):
    """
    Get the outcome sets and outcomes that can be mapped in a course.

    Returns:
        {"outcomesets": [...], "outcomes": [...]}
    """
    result = mapper.get_mappable_outcomes(course_id)
    if result.is_empty:
        logger.info(f"No mappable outcomes found for course {course_id}")
    return result.model_dump()
