"""
Area model - a piece of content that outcomes can be mapped to.

An area is identified by the (component, area, item_id) triple, e.g.
("mod_forum", "forum", 42). At most one row exists per triple.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Area(BaseModel):
    """
    Content area that can carry outcome mappings.

    An Area row only exists while it has at least one mapped outcome;
    the mapper service creates it on first mapping and removes it when
    the last mapping goes away.

    Examples:
        >>> area = Area(component="mod_forum", area="forum", item_id=42)
        >>> area.key
        ('mod_forum', 'forum', 42)
    """

    model_config = ConfigDict(extra="forbid")

    id: Optional[int] = Field(
        default=None,
        description="Storage identifier, None until persisted",
    )
    component: str = Field(..., min_length=1, description="Owning component name")
    area: str = Field(..., min_length=1, description="Area name within the component")
    item_id: int = Field(..., description="Identifier of the item within the area")

    @property
    def key(self) -> Tuple[str, str, int]:
        """Natural key of the area."""
        return (self.component, self.area, self.item_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
