"""
Application-level error types for the outcome mapper.

Two kinds of failure exist:
- Not-found errors: a required entity id does not exist. Surfaced to the
  caller (the API turns these into 404s), never retried.
- Contract violations: the caller passed something of the wrong type.
  These are programming errors and are never caught internally.

Backing-store failures are not wrapped; they propagate unmodified.
"""

from typing import Iterable, List, Optional


class MapperError(Exception):
    """Base class for outcome mapper errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MapperError, LookupError):
    """Raised when a referenced entity does not exist."""


class OutcomeNotFoundError(NotFoundError):
    """Raised when one or more outcome ids do not exist."""

    def __init__(self, outcome_ids: Iterable[int], message: Optional[str] = None):
        self.outcome_ids: List[int] = sorted(outcome_ids)
        super().__init__(
            message or f"Outcome(s) not found: {', '.join(map(str, self.outcome_ids))}"
        )


class ContractViolationError(MapperError, TypeError):
    """Raised when a caller passes an argument of the wrong type."""
