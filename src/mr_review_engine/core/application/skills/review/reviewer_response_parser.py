"""Pure functions turning raw reviewer text into a ``ReviewResult``."""

import json
import re
from typing import Any

from pydantic import ValidationError

from mr_review_engine.core.application.exceptions import ReviewerResponseParseError
from mr_review_engine.core.application.skills.review.contracts.reviewer_response_schema import (
    FileReviewSchema,
    ReviewerResponseSchema,
)
from mr_review_engine.core.domain.quality import FileFinding, FindingSeverity, ReviewResult

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```")


def parse_reviewer_response(raw_content: str | None) -> ReviewResult:
    """Extract the JSON review (fenced or bare) and map it to the domain result."""
    if not raw_content or not raw_content.strip():
        raise ReviewerResponseParseError("Reviewer returned empty content")
    data = _safe_parse_json(extract_json_block(raw_content))
    schema = _validate_schema(data)
    return to_review_result(schema)


def extract_json_block(text: str) -> str:
    """Return the body of the first ```json fence, or the whole text stripped."""
    match = _JSON_FENCE.search(text)
    return (match.group(1) if match else text).strip()


def to_review_result(schema: ReviewerResponseSchema) -> ReviewResult:
    findings = tuple(_to_finding(r) for r in schema.file_reviews if r.file_path and r.comments)
    return ReviewResult(score=schema.score, summary=schema.summary, file_findings=findings)


def _to_finding(review: FileReviewSchema) -> FileFinding:
    severity = FindingSeverity(review.severity) if review.severity else None
    return FileFinding(file_path=review.file_path, comments=tuple(review.comments), severity=severity)


def _safe_parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReviewerResponseParseError(f"Reviewer returned invalid JSON: {exc}") from exc


def _validate_schema(data: Any) -> ReviewerResponseSchema:
    if not isinstance(data, dict):
        raise ReviewerResponseParseError(
            f"Reviewer JSON must be an object, got {type(data).__name__}"
        )
    try:
        return ReviewerResponseSchema.model_validate(data)
    except ValidationError as exc:
        raise ReviewerResponseParseError(f"Reviewer response failed schema validation: {exc}") from exc
