"""Fold per-batch reviewer outputs into one changeset result."""

import math
from collections.abc import Sequence
from statistics import fmean

from mr_review_engine.core.domain.quality.review_result import MergedResult, PartialResult
from mr_review_engine.core.domain.review.batch_run_outcome import BatchRunOutcome

EMPTY_RESULT_SUMMARY = "No review results were produced."
MERGED_SUMMARY_HEADING = "Combined review result:"


class ResultAggregator:
    """Merges partial results in batch order.

    * no results: a zero-score sentinel
    * one result: returned as-is
    * several: mean score rounded half up to one decimal, labelled summaries,
      findings concatenated in batch order without de-duplication
    """

    def merge(self, results: Sequence[PartialResult]) -> MergedResult:
        if not results:
            return MergedResult(score=0, summary=EMPTY_RESULT_SUMMARY, file_findings=())
        if len(results) == 1:
            return results[0]

        return MergedResult(
            score=round_half_up(fmean(r.score for r in results)),
            summary=self._merge_summaries(results),
            file_findings=tuple(f for r in results for f in r.file_findings),
        )

    def merge_outcome(self, outcome: BatchRunOutcome) -> MergedResult:
        """Merge a successful run; a failed run re-raises its error and nothing is merged."""
        if outcome.error is not None:
            raise outcome.error
        return self.merge(outcome.partial_results)

    @staticmethod
    def _merge_summaries(results: Sequence[PartialResult]) -> str:
        total = len(results)
        sections = [f"Batch {n}/{total}:\n{r.summary}" for n, r in enumerate(results, start=1) if r.summary]
        return MERGED_SUMMARY_HEADING + "\n" + "\n\n".join(sections)


def round_half_up(value: float) -> float:
    """Round to one decimal with ties going up (``7.25`` -> ``7.3``)."""
    return math.floor(value * 10 + 0.5) / 10
