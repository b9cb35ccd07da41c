"""Partition a changeset's files into bounded, order-preserving batches."""

from collections.abc import Sequence
from typing import TypeVar

from mr_review_engine.core.domain.review.review_batch import ReviewBatch

T = TypeVar("T")


class InvalidBatchSizeError(ValueError):
    """Raised when the configured batch size is not a positive integer."""

    def __init__(self, max_files_per_batch: object) -> None:
        super().__init__(f"max_files_per_batch must be a positive integer, got {max_files_per_batch!r}.")
        self.max_files_per_batch = max_files_per_batch


class BatchPlanner:
    """Splits an ordered file list into contiguous slices of at most ``max_files_per_batch``.

    A list that fits in one batch is returned whole. The plan always holds at
    least one batch, so an empty list gives one empty batch.
    """

    def __init__(self, max_files_per_batch: int) -> None:
        is_int = isinstance(max_files_per_batch, int) and not isinstance(max_files_per_batch, bool)
        if not is_int or max_files_per_batch <= 0:
            raise InvalidBatchSizeError(max_files_per_batch)
        self._max = max_files_per_batch

    @property
    def max_files_per_batch(self) -> int:
        return self._max

    def needs_splitting(self, items: Sequence[object]) -> bool:
        return len(items) > self._max

    def plan(self, items: Sequence[T]) -> list[ReviewBatch[T]]:
        if not self.needs_splitting(items):
            return [ReviewBatch(number=1, total=1, files=tuple(items))]

        slices = [tuple(items[i : i + self._max]) for i in range(0, len(items), self._max)]
        total = len(slices)
        return [ReviewBatch(number=n, total=total, files=s) for n, s in enumerate(slices, start=1)]
