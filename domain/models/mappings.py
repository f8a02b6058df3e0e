"""
Read models returned by the mapper service to presentation layers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.outcome import Outcome
from domain.models.outcome_set import OutcomeSet


class OutcomeSetMapping(BaseModel):
    """One (outcome set, criteria) row of a course's filter configuration."""

    outcome_set_id: int
    name: str
    edulevels: Optional[str] = None
    subjects: Optional[str] = None


class MappableOutcomes(BaseModel):
    """
    Outcome sets and outcomes an operator can choose from.

    Serializes to ``{"outcomesets": [...], "outcomes": [...]}`` for list
    rendering widgets.
    """

    outcomesets: List[OutcomeSet] = Field(default_factory=list)
    outcomes: List[Outcome] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.outcomesets and not self.outcomes
