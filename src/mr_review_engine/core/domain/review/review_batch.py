from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ReviewBatch(Generic[T]):
    """Contiguous slice of the changeset's files reviewed in one reviewer call.

    ``number`` is 1-based; ``total`` is the number of batches in the plan.
    """

    number: int
    total: int
    files: tuple[T, ...]

    @property
    def label(self) -> str:
        return f"{self.number}/{self.total}"

    def __len__(self) -> int:
        return len(self.files)
