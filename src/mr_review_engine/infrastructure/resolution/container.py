from mr_review_engine.core.application.ports import ReviewerPort
from mr_review_engine.core.application.skills.review.review_batch_skill import ReviewBatchSkill
from mr_review_engine.core.application.skills.review.review_document_builder import (
    ReviewDocumentBuilder,
)
from mr_review_engine.core.application.workflows.review.batched_review_workflow import (
    BatchedReviewWorkflow,
)
from mr_review_engine.core.domain.diff import FileDiffAnnotator
from mr_review_engine.core.domain.review import BatchPlanner, ResultAggregator
from mr_review_engine.infrastructure.configuration.logging_settings import LoggingSettings
from mr_review_engine.infrastructure.configuration.review_settings import ReviewSettings
from mr_review_engine.infrastructure.observability import configure_logging, get_logger


def build_review_workflow(
    reviewer: ReviewerPort,
    settings: ReviewSettings | None = None,
    logging_settings: LoggingSettings | None = None,
) -> BatchedReviewWorkflow:
    """Wire the review pipeline; settings omitted here are loaded from the environment.

    Logging is configured on the first call in the process.
    """
    configure_logging(logging_settings)
    settings = settings or ReviewSettings()
    get_logger("review_container").info("Building review workflow", **settings.summary())

    document_builder = ReviewDocumentBuilder(
        max_diff_lines_per_file=settings.max_diff_lines_per_file,
        header_label=settings.header_label,
    )
    return BatchedReviewWorkflow(
        file_annotator=FileDiffAnnotator(header_label=settings.header_label),
        planner=BatchPlanner(settings.max_files_per_review),
        review_batch=ReviewBatchSkill(reviewer=reviewer, document_builder=document_builder),
        aggregator=ResultAggregator(),
    )
