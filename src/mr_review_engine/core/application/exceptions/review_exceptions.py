"""Application-layer exception hierarchy for the review engine.

Reviewer transport failures are never wrapped here: whatever the reviewer
port raises reaches the caller unchanged.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ReviewerResponseParseError(ApplicationError):
    """The reviewer answered, but not with a review the engine can read."""
