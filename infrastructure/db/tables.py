"""
Table names and row converters shared by the Supabase repositories.

Column names follow the storage schema (e.g. ``itemid``, ``outcomesetid``);
domain models use snake_case field names.
"""
from typing import Any, Dict

from domain.models import Area, FilterCriteria, Outcome, OutcomeFilter, OutcomeSet

AREAS_TABLE = "outcome_areas"
AREA_OUTCOMES_TABLE = "outcome_area_outcomes"
OUTCOMES_TABLE = "outcomes"
OUTCOME_SETS_TABLE = "outcome_sets"
FILTERS_TABLE = "outcome_filters"

# Domain field name -> column name, for find_by() criteria
AREA_COLUMNS = {"id": "id", "component": "component", "area": "area", "item_id": "itemid"}
OUTCOME_COLUMNS = {
    "id": "id",
    "outcome_set_id": "outcomesetid",
    "idnumber": "idnumber",
    "description": "description",
    "assessable": "assessable",
    "deleted": "deleted",
}
OUTCOME_SET_COLUMNS = {
    "id": "id",
    "idnumber": "idnumber",
    "name": "name",
    "deleted": "deleted",
}
FILTER_COLUMNS = {"id": "id", "course_id": "courseid", "outcome_set_id": "outcomesetid"}


def to_columns(criteria: Dict[str, Any], columns: Dict[str, str]) -> Dict[str, Any]:
    """Translate find_by() criteria into column filters, rejecting unknown fields."""
    unknown = set(criteria) - set(columns)
    if unknown:
        raise ValueError(f"Unknown lookup field(s): {', '.join(sorted(unknown))}")
    return {columns[name]: value for name, value in criteria.items()}


def row_to_area(row: Dict[str, Any]) -> Area:
    return Area(
        id=row["id"],
        component=row["component"],
        area=row["area"],
        item_id=row["itemid"],
    )


def area_to_row(area: Area) -> Dict[str, Any]:
    return {"component": area.component, "area": area.area, "itemid": area.item_id}


def row_to_outcome(row: Dict[str, Any]) -> Outcome:
    return Outcome(
        id=row["id"],
        outcome_set_id=row["outcomesetid"],
        idnumber=row.get("idnumber"),
        description=row.get("description") or "",
        assessable=bool(row.get("assessable", True)),
        deleted=bool(row.get("deleted", False)),
        edulevels=row.get("edulevels"),
        subjects=row.get("subjects"),
    )


def outcome_to_row(outcome: Outcome) -> Dict[str, Any]:
    return {
        "outcomesetid": outcome.outcome_set_id,
        "idnumber": outcome.idnumber,
        "description": outcome.description,
        "assessable": outcome.assessable,
        "deleted": outcome.deleted,
        "edulevels": outcome.edulevels,
        "subjects": outcome.subjects,
    }


def row_to_outcome_set(row: Dict[str, Any]) -> OutcomeSet:
    return OutcomeSet(
        id=row["id"],
        idnumber=row.get("idnumber"),
        name=row["name"],
        description=row.get("description"),
        deleted=bool(row.get("deleted", False)),
    )


def outcome_set_to_row(outcome_set: OutcomeSet) -> Dict[str, Any]:
    return {
        "idnumber": outcome_set.idnumber,
        "name": outcome_set.name,
        "description": outcome_set.description,
        "deleted": outcome_set.deleted,
    }


def row_to_filter(row: Dict[str, Any]) -> OutcomeFilter:
    return OutcomeFilter(
        id=row["id"],
        course_id=row["courseid"],
        outcome_set_id=row["outcomesetid"],
        criteria=[FilterCriteria(**entry) for entry in (row.get("filter") or [])],
    )


def filter_to_row(outcome_filter: OutcomeFilter) -> Dict[str, Any]:
    return {
        "courseid": outcome_filter.course_id,
        "outcomesetid": outcome_filter.outcome_set_id,
        "filter": [c.model_dump() for c in outcome_filter.criteria],
    }
