"""Unit tests: BatchedReviewWorkflow (reviewer port mocked)."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from review_fixtures import make_files, reviewer_json
from structlog.contextvars import get_contextvars

from mr_review_engine.core.application.ports import ReviewerPort
from mr_review_engine.core.application.skills.review.review_batch_skill import (
    MANUAL_REVIEW_COMMENT,
    ReviewBatchSkill,
)
from mr_review_engine.core.application.skills.review.review_document_builder import (
    ReviewDocumentBuilder,
)
from mr_review_engine.core.application.workflows.review.batched_review_workflow import (
    BatchedReviewWorkflow,
)
from mr_review_engine.core.domain.diff import Changeset, FileDiffAnnotator
from mr_review_engine.core.domain.review import BatchPlanner, ResultAggregator

# ── Fixtures ──────────────────────────────────────────────────────────


def _workflow(reviewer: ReviewerPort, max_files: int = 20) -> BatchedReviewWorkflow:
    return BatchedReviewWorkflow(
        file_annotator=FileDiffAnnotator(),
        planner=BatchPlanner(max_files),
        review_batch=ReviewBatchSkill(reviewer=reviewer, document_builder=ReviewDocumentBuilder()),
        aggregator=ResultAggregator(),
    )


def _answer_for_batch(score: int):
    """Reviewer side effect: one finding per file of the batch it receives."""

    async def _review(document, batch):
        return reviewer_json(score, f"batch {batch.number} reviewed", [f.new_path for f in batch.files])

    return _review


@pytest.fixture()
def reviewer() -> AsyncMock:
    return AsyncMock()


class RecordingReviewer(ReviewerPort):
    """Reviewer that yields control mid-call and records overlap between calls."""

    def __init__(self) -> None:
        self.in_flight = 0
        self.max_in_flight = 0
        self.batch_numbers: list[int] = []

    async def review(self, document, batch):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        self.batch_numbers.append(batch.number)
        self.in_flight -= 1
        return reviewer_json(8, "ok", [])


# ══════════════════════════════════════════════════════════════════════
# Planning
# ══════════════════════════════════════════════════════════════════════


class TestPrepare:
    def test_small_changeset_is_a_single_batch(self, reviewer):
        plan = _workflow(reviewer).prepare(Changeset(title="t", files=tuple(make_files(3))))

        assert plan.is_batched is False
        assert len(plan.batches) == 1
        assert len(plan.annotated_files) == 3
        assert plan.document.startswith("commit message: t\n\n")

    def test_twenty_five_files_split_twenty_and_five(self, reviewer):
        plan = _workflow(reviewer).prepare(Changeset(title="t", files=tuple(make_files(25))))

        assert [len(b) for b in plan.batches] == [20, 5]
        assert [f for b in plan.batches for f in b.files] == list(plan.annotated_files)


# ══════════════════════════════════════════════════════════════════════
# Full Pipeline
# ══════════════════════════════════════════════════════════════════════


class TestExecute:
    @pytest.mark.asyncio
    async def test_single_batch_result_passes_through(self, reviewer):
        reviewer.review.return_value = reviewer_json(7, "ok", ["src/module_0.py"])

        result = await _workflow(reviewer).execute(Changeset(title="t", files=tuple(make_files(2))))

        assert reviewer.review.await_count == 1
        assert result.score == 7
        assert result.summary == "ok"

    @pytest.mark.asyncio
    async def test_twenty_five_files_end_to_end(self, reviewer):
        reviewer.review.side_effect = [
            reviewer_json(6, "first", [f"src/module_{i}.py" for i in range(20)]),
            reviewer_json(9, "second", [f"src/module_{i}.py" for i in range(20, 25)]),
        ]

        result = await _workflow(reviewer).execute(Changeset(title="big", files=tuple(make_files(25))))

        assert reviewer.review.await_count == 2
        sent_sizes = [len(call.args[1]) for call in reviewer.review.call_args_list]
        assert sent_sizes == [20, 5]
        assert result.score == 7.5
        assert len(result.file_findings) == 25
        assert [f.file_path for f in result.file_findings] == [f"src/module_{i}.py" for i in range(25)]
        assert "Batch 1/2:\nfirst" in result.summary
        assert "Batch 2/2:\nsecond" in result.summary

    @pytest.mark.asyncio
    async def test_batches_are_reviewed_one_at_a_time(self):
        recorder = RecordingReviewer()

        await _workflow(recorder, max_files=2).execute(Changeset(title="t", files=tuple(make_files(7))))

        assert recorder.batch_numbers == [1, 2, 3, 4]
        assert recorder.max_in_flight == 1

    @pytest.mark.asyncio
    async def test_each_batch_document_only_holds_its_files(self, reviewer):
        reviewer.review.side_effect = _answer_for_batch(8)

        await _workflow(reviewer, max_files=2).execute(Changeset(title="t", files=tuple(make_files(3))))

        second_document = reviewer.review.call_args_list[1].args[0]
        assert "## new_path: src/module_2.py" in second_document
        assert "## new_path: src/module_0.py" not in second_document

    @pytest.mark.asyncio
    async def test_unparsable_batch_does_not_stop_the_run(self, reviewer):
        reviewer.review.side_effect = [
            "no json here",
            reviewer_json(9, "fine", ["src/module_2.py"]),
        ]

        result = await _workflow(reviewer, max_files=2).execute(
            Changeset(title="t", files=tuple(make_files(3)))
        )

        assert reviewer.review.await_count == 2
        assert result.score == 8.0
        assert [f.comments[0] for f in result.file_findings[:2]] == [MANUAL_REVIEW_COMMENT] * 2
        assert result.file_findings[2].file_path == "src/module_2.py"


# ══════════════════════════════════════════════════════════════════════
# Failure short-circuit
# ══════════════════════════════════════════════════════════════════════


class TestFailure:
    @pytest.mark.asyncio
    async def test_failure_aborts_remaining_batches(self, reviewer):
        error = TimeoutError("reviewer timed out")
        reviewer.review.side_effect = [reviewer_json(8, "ok", []), error, reviewer_json(8, "ok", [])]

        outcome = await _workflow(reviewer, max_files=1).run(Changeset(title="t", files=tuple(make_files(3))))

        assert reviewer.review.await_count == 2
        assert outcome.is_success is False
        assert outcome.failed_batch == 2
        assert outcome.error is error
        assert outcome.partial_results == ()

    @pytest.mark.asyncio
    async def test_execute_reraises_the_original_error(self, reviewer):
        error = ConnectionError("503 from reviewer")
        reviewer.review.side_effect = error

        with pytest.raises(ConnectionError) as exc_info:
            await _workflow(reviewer).execute(Changeset(title="t", files=tuple(make_files(2))))

        assert exc_info.value is error


# ══════════════════════════════════════════════════════════════════════
# Log context
# ══════════════════════════════════════════════════════════════════════


class TestLogContext:
    @pytest.mark.asyncio
    async def test_title_is_bound_only_while_running(self, reviewer):
        seen: list[dict] = []

        async def _review(document, batch):
            seen.append(get_contextvars())
            return reviewer_json(8, "ok", [])

        reviewer.review.side_effect = _review
        workflow = _workflow(reviewer)

        await workflow.run(Changeset(title="first", files=tuple(make_files(1))))
        await workflow.run(Changeset(title="second", files=tuple(make_files(1))))

        assert [c["changeset_title"] for c in seen] == ["first", "second"]
        assert "changeset_title" not in get_contextvars()

    @pytest.mark.asyncio
    async def test_context_is_cleared_after_failure(self, reviewer):
        reviewer.review.side_effect = TimeoutError("slow")

        with pytest.raises(TimeoutError):
            await _workflow(reviewer).execute(Changeset(title="t", files=tuple(make_files(1))))

        assert "changeset_title" not in get_contextvars()
