from dataclasses import dataclass, field

from mr_review_engine.core.domain.quality.review_result import PartialResult


@dataclass(frozen=True)
class BatchRunOutcome:
    """Result of driving the reviewer over every batch of a plan.

    A failed run carries only the first error and the batch it happened in;
    partial results of earlier batches are not kept.
    """

    partial_results: tuple[PartialResult, ...] = field(default_factory=tuple)
    error: BaseException | None = None
    failed_batch: int | None = None

    @classmethod
    def succeeded(cls, partial_results: tuple[PartialResult, ...]) -> "BatchRunOutcome":
        return cls(partial_results=partial_results)

    @classmethod
    def failed(cls, error: BaseException, failed_batch: int) -> "BatchRunOutcome":
        return cls(error=error, failed_batch=failed_batch)

    @property
    def is_success(self) -> bool:
        return self.error is None
