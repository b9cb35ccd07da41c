from mr_review_engine.infrastructure.observability.logging.review_log_processor import (
    ReviewLogProcessor,
)

__all__ = ["ReviewLogProcessor"]
