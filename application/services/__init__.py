"""
Application Services for the Outcome Mapper API.

Services coordinate repository ports to implement business operations.
Dependencies are injected via constructors for testability.
"""

from application.services.outcome_mapper import OutcomeMapperService

__all__ = [
    "OutcomeMapperService",
]
