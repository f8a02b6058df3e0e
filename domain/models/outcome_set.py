"""
OutcomeSet model - a named grouping of outcomes.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OutcomeSet(BaseModel):
    """Named grouping of outcomes (e.g. a published standards framework)."""

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = Field(default=None, description="Storage identifier")
    idnumber: Optional[str] = Field(default=None, description="External identifier")
    name: str = Field(..., min_length=1, description="Display name")
    description: Optional[str] = Field(default=None)
    deleted: bool = Field(default=False, description="Soft-deleted flag")
