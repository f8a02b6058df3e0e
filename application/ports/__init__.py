"""
Repository Interfaces (Ports) for the Outcome Mapper API.

This package defines abstract interfaces that decouple the mapper service
from infrastructure (database). Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the service needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import AreaRepository, OutcomeRepository

    class OutcomeMapperService:
        def __init__(self, areas: AreaRepository, outcomes: OutcomeRepository, ...):
            self.areas = areas
"""

# Content areas and area <-> outcome mappings
from application.ports.area_repository import AreaRepository

# Outcomes
from application.ports.outcome_repository import OutcomeRepository

# Outcome sets
from application.ports.outcome_set_repository import OutcomeSetRepository

# Course filters
from application.ports.filter_repository import FilterRepository

__all__ = [
    "AreaRepository",
    "OutcomeRepository",
    "OutcomeSetRepository",
    "FilterRepository",
]
