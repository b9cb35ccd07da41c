from dataclasses import dataclass

import structlog

from mr_review_engine.core.application.exceptions import ReviewerResponseParseError
from mr_review_engine.core.application.ports import ReviewerPort
from mr_review_engine.core.application.skills.review.contracts.reviewer_response_schema import (
    NEUTRAL_SCORE,
)
from mr_review_engine.core.application.skills.review.review_document_builder import (
    ReviewDocumentBuilder,
)
from mr_review_engine.core.application.skills.review.reviewer_response_parser import (
    parse_reviewer_response,
)
from mr_review_engine.core.application.skills.skill import BaseSkill
from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedFileDiff
from mr_review_engine.core.domain.quality import FileFinding, FindingSeverity, PartialResult
from mr_review_engine.core.domain.review.review_batch import ReviewBatch

logger = structlog.get_logger()

MANUAL_REVIEW_COMMENT = "Reviewer output could not be parsed, manual review required"
FALLBACK_SUMMARY = "Review finished but the reviewer output could not be parsed"
SUMMARY_EXCERPT_LENGTH = 500


@dataclass(frozen=True)
class ReviewBatchInput:
    """One batch of annotated files plus the changeset header."""

    title: str | None
    batch: ReviewBatch[AnnotatedFileDiff]


class ReviewBatchSkill(BaseSkill[ReviewBatchInput, PartialResult]):
    """Sends one batch to the reviewer and reads its answer.

    Transport errors from the reviewer port propagate untouched. An answer
    that cannot be parsed degrades to a neutral score and a manual-review
    finding for every file of the batch.
    """

    def __init__(self, reviewer: ReviewerPort, document_builder: ReviewDocumentBuilder) -> None:
        self._reviewer = reviewer
        self._document_builder = document_builder

    async def execute(self, input_data: ReviewBatchInput) -> PartialResult:
        batch = input_data.batch
        document = self._document_builder.build(input_data.title, batch.files)
        logger.info(
            "Sending batch to reviewer",
            batch=batch.label,
            files=len(batch),
            document_length=len(document),
        )
        raw = await self._reviewer.review(document, batch)

        try:
            return parse_reviewer_response(raw)
        except ReviewerResponseParseError as exc:
            logger.warning(
                "Reviewer output unparsable, degrading batch",
                batch=batch.label,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return degraded_result(raw, batch)


def degraded_result(raw: str | None, batch: ReviewBatch[AnnotatedFileDiff]) -> PartialResult:
    excerpt = (raw or "")[:SUMMARY_EXCERPT_LENGTH].strip()
    findings = tuple(
        FileFinding(
            file_path=f.new_path or f.old_path,
            comments=(MANUAL_REVIEW_COMMENT,),
            severity=FindingSeverity.LOW,
        )
        for f in batch.files
    )
    return PartialResult(score=NEUTRAL_SCORE, summary=excerpt or FALLBACK_SUMMARY, file_findings=findings)
