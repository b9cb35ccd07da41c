from mr_review_engine.core.domain.review.batch_planner import BatchPlanner, InvalidBatchSizeError
from mr_review_engine.core.domain.review.batch_run_outcome import BatchRunOutcome
from mr_review_engine.core.domain.review.result_aggregator import ResultAggregator
from mr_review_engine.core.domain.review.review_batch import ReviewBatch

__all__ = [
    "BatchPlanner",
    "BatchRunOutcome",
    "InvalidBatchSizeError",
    "ResultAggregator",
    "ReviewBatch",
]
