from mr_review_engine.core.application.exceptions.review_exceptions import (
    ApplicationError,
    ReviewerResponseParseError,
)

__all__ = [
    "ApplicationError",
    "ReviewerResponseParseError",
]
