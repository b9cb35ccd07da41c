"""Unit tests for ResultAggregator: merging partial reviewer results."""

import pytest

from mr_review_engine.core.domain.quality import FileFinding, FindingSeverity, PartialResult
from mr_review_engine.core.domain.review import BatchRunOutcome, ResultAggregator
from mr_review_engine.core.domain.review.result_aggregator import EMPTY_RESULT_SUMMARY


def _finding(path: str) -> FileFinding:
    return FileFinding(file_path=path, comments=(f"look at {path}",), severity=FindingSeverity.LOW)


class TestMerge:
    def test_no_results_gives_sentinel(self):
        merged = ResultAggregator().merge([])

        assert merged.score == 0
        assert merged.summary == EMPTY_RESULT_SUMMARY
        assert merged.file_findings == ()

    def test_single_result_passes_through(self):
        partial = PartialResult(score=7, summary="ok", file_findings=(_finding("f1.py"),))
        merged = ResultAggregator().merge([partial])

        assert merged is partial
        assert merged == PartialResult(score=7, summary="ok", file_findings=(_finding("f1.py"),))

    def test_mean_score(self):
        merged = ResultAggregator().merge(
            [PartialResult(score=6, summary="a"), PartialResult(score=9, summary="b")]
        )
        assert merged.score == 7.5

    def test_mean_is_rounded_to_one_decimal(self):
        merged = ResultAggregator().merge(
            [PartialResult(score=s, summary="x") for s in (7, 8, 8)]
        )
        assert merged.score == 7.7

    @pytest.mark.parametrize("scores, expected", [((7, 7, 7, 8), 7.3), ((8, 8, 8, 9), 8.3), ((2, 2, 2, 3), 2.3)])
    def test_ties_round_up(self, scores, expected):
        merged = ResultAggregator().merge([PartialResult(score=s, summary="x") for s in scores])
        assert merged.score == expected

    def test_findings_kept_in_batch_order_without_dedup(self):
        first = PartialResult(score=5, summary="a", file_findings=(_finding("a.py"), _finding("b.py")))
        second = PartialResult(score=5, summary="b", file_findings=(_finding("a.py"),))

        merged = ResultAggregator().merge([first, second])

        assert [f.file_path for f in merged.file_findings] == ["a.py", "b.py", "a.py"]

    def test_summaries_are_labelled_per_batch(self):
        merged = ResultAggregator().merge(
            [PartialResult(score=8, summary="first half fine"), PartialResult(score=6, summary="second half risky")]
        )

        assert merged.summary == (
            "Combined review result:\n"
            "Batch 1/2:\nfirst half fine\n\n"
            "Batch 2/2:\nsecond half risky"
        )


class TestMergeOutcome:
    def test_successful_outcome_is_merged(self):
        outcome = BatchRunOutcome.succeeded(
            (PartialResult(score=6, summary="a"), PartialResult(score=9, summary="b"))
        )
        assert ResultAggregator().merge_outcome(outcome).score == 7.5

    def test_failed_outcome_reraises_original_error(self):
        error = TimeoutError("reviewer timed out")
        outcome = BatchRunOutcome.failed(error, failed_batch=2)

        with pytest.raises(TimeoutError) as exc_info:
            ResultAggregator().merge_outcome(outcome)

        assert exc_info.value is error
        assert outcome.partial_results == ()
