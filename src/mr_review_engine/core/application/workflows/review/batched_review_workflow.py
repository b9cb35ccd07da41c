"""Deterministic review pipeline: Annotate -> Plan -> Review batches (sequentially) -> Merge."""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog
from structlog.contextvars import bound_contextvars

from mr_review_engine.core.application.skills.review.review_batch_skill import (
    ReviewBatchInput,
    ReviewBatchSkill,
)
from mr_review_engine.core.domain.diff import AnnotatedFileDiff, Changeset, FileDiffAnnotator
from mr_review_engine.core.domain.quality import MergedResult, PartialResult
from mr_review_engine.core.domain.review import (
    BatchPlanner,
    BatchRunOutcome,
    ResultAggregator,
    ReviewBatch,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class ReviewPlan:
    """Everything derived from the changeset before any reviewer call."""

    title: str | None
    annotated_files: tuple[AnnotatedFileDiff, ...]
    document: str
    batches: tuple[ReviewBatch[AnnotatedFileDiff], ...]

    @property
    def is_batched(self) -> bool:
        return len(self.batches) > 1


class BatchedReviewWorkflow:
    """Reviews a changeset in bounded batches, one reviewer call at a time.

    Batch N+1 is sent only after batch N finished. The first reviewer
    failure stops the run; results of earlier batches are dropped and the
    original exception is surfaced.
    """

    def __init__(
        self,
        file_annotator: FileDiffAnnotator,
        planner: BatchPlanner,
        review_batch: ReviewBatchSkill,
        aggregator: ResultAggregator | None = None,
    ) -> None:
        self._file_annotator = file_annotator
        self._planner = planner
        self._review_batch = review_batch
        self._aggregator = aggregator or ResultAggregator()

    async def execute(self, changeset: Changeset) -> MergedResult:
        """Run the full pipeline; a reviewer failure is re-raised unchanged."""
        outcome = await self.run(changeset)
        return self._aggregator.merge_outcome(outcome)

    async def run(self, changeset: Changeset) -> BatchRunOutcome:
        with bound_contextvars(changeset_title=changeset.title, event_type="workflow.batched_review"):
            plan = self.prepare(changeset)
            return await self.run_batches(plan.title, plan.batches)

    def prepare(self, changeset: Changeset) -> ReviewPlan:
        """Annotate every file, build the extended document and split it into batches."""
        annotated = tuple(self._file_annotator.annotate_files(changeset.files))
        document = self._file_annotator.build_document(changeset.title, annotated)
        batches = tuple(self._planner.plan(annotated))
        logger.info(
            "Review plan prepared",
            files=len(annotated),
            unannotated_files=sum(1 for f in annotated if not f.is_annotated),
            batches=len(batches),
            max_files_per_batch=self._planner.max_files_per_batch,
            document_length=len(document),
        )
        return ReviewPlan(
            title=changeset.title,
            annotated_files=annotated,
            document=document,
            batches=batches,
        )

    async def run_batches(
        self, title: str | None, batches: Sequence[ReviewBatch[AnnotatedFileDiff]]
    ) -> BatchRunOutcome:
        results: list[PartialResult] = []
        for batch in batches:
            logger.info("Reviewing batch", batch=batch.label, files=len(batch))
            try:
                result = await self._review_batch.execute(ReviewBatchInput(title=title, batch=batch))
            except Exception as exc:
                logger.error(
                    "Batch review failed, aborting remaining batches",
                    batch=batch.label,
                    discarded_results=len(results),
                    processing_status="ERROR",
                    error_type=type(exc).__name__,
                    error_details=str(exc),
                )
                return BatchRunOutcome.failed(exc, failed_batch=batch.number)
            results.append(result)
            logger.info(
                "Batch reviewed",
                batch=batch.label,
                score=result.score,
                findings=len(result.file_findings),
            )
        return BatchRunOutcome.succeeded(tuple(results))
