"""
Outcome model - a gradable competency definition.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Outcome(BaseModel):
    """
    A gradable competency or objective.

    Outcomes belong to exactly one OutcomeSet. They are immutable once
    created except for soft-deletion (``deleted``). The ``edulevels`` and
    ``subjects`` lists are the metadata that course filters match against.
    """

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = Field(default=None, description="Storage identifier")
    outcome_set_id: int = Field(..., description="Owning outcome set")
    idnumber: Optional[str] = Field(default=None, description="External identifier")
    description: str = Field(..., description="Human readable outcome text")
    assessable: bool = Field(default=True, description="Can be graded")
    deleted: bool = Field(default=False, description="Soft-deleted flag")
    edulevels: List[str] = Field(default_factory=list, description="Education levels")
    subjects: List[str] = Field(default_factory=list, description="Subjects")

    @field_validator("edulevels", "subjects", mode="before")
    @classmethod
    def coerce_none_to_empty(cls, v):
        """Storage returns NULL for empty metadata."""
        return [] if v is None else v

    @property
    def is_mappable(self) -> bool:
        """Whether the outcome can currently be offered for mapping."""
        return self.assessable and not self.deleted
