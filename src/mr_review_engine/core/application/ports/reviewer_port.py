from abc import ABC, abstractmethod

from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedFileDiff
from mr_review_engine.core.domain.review.review_batch import ReviewBatch


class ReviewerPort(ABC):

    @abstractmethod
    async def review(self, document: str, batch: ReviewBatch[AnnotatedFileDiff]) -> str:
        """Send the batch document to the reviewer and return its raw answer.

        Transport failures (timeout, non-success status) must be raised; they
        abort the whole changeset.
        """
        pass
