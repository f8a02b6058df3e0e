"""
Course filter models.

A filter binds an outcome set to a course, optionally narrowed down by
education level and subject criteria. Only outcomes that match at least
one of a course's filters are eligible for mapping inside that course.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.outcome import Outcome


class FilterCriteria(BaseModel):
    """
    One inclusion rule of a filter.

    A criteria entry matches an outcome when every field that is set is
    among the outcome's values. Unset fields match anything.

    Examples:
        >>> criteria = FilterCriteria(edulevels="9", subjects="Math")
        >>> criteria.matches(Outcome(outcome_set_id=1, description="x",
        ...                          edulevels=["9", "10"], subjects=["Math"]))
        True
    """

    model_config = ConfigDict(extra="forbid")

    edulevels: Optional[str] = Field(default=None, description="Education level")
    subjects: Optional[str] = Field(default=None, description="Subject")

    def matches(self, outcome: Outcome) -> bool:
        if self.edulevels is not None and self.edulevels not in outcome.edulevels:
            return False
        if self.subjects is not None and self.subjects not in outcome.subjects:
            return False
        return True


class OutcomeFilter(BaseModel):
    """
    Course-scoped rule binding an OutcomeSet to inclusion criteria.

    A filter with no criteria includes the whole outcome set.
    """

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = Field(default=None, description="Storage identifier")
    course_id: Optional[int] = Field(
        default=None,
        description="Owning course, assigned when the filters are saved",
    )
    outcome_set_id: int = Field(..., description="Filtered outcome set")
    criteria: List[FilterCriteria] = Field(default_factory=list)

    def matches(self, outcome: Outcome) -> bool:
        """Check whether an outcome falls within this filter."""
        if outcome.outcome_set_id != self.outcome_set_id:
            return False
        if not self.criteria:
            return True
        return any(c.matches(outcome) for c in self.criteria)
