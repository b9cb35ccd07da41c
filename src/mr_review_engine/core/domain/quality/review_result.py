from dataclasses import dataclass, field

from mr_review_engine.core.domain.quality.value_objects.file_finding import FileFinding


@dataclass(frozen=True)
class ReviewResult:
    """Reviewer output: an overall score, a summary, and per-file findings.

    The same shape is used for the output of one batch and for the merged
    output of a whole changeset.
    """

    score: float
    summary: str
    file_findings: tuple[FileFinding, ...] = field(default_factory=tuple)


PartialResult = ReviewResult
MergedResult = ReviewResult
