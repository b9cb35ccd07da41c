"""Number and render the body lines of a single hunk."""

from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedHunk
from mr_review_engine.core.domain.diff.value_objects.hunk import Hunk
from mr_review_engine.core.domain.diff.value_objects.line_kind import LineKind
from mr_review_engine.core.domain.diff.value_objects.line_record import LineRecord


class DiffAnnotator:
    """Assigns old/new line numbers to every body line of a hunk.

    The two counters live only inside ``number_lines``; nothing is kept on
    the instance, so annotating the same hunk twice gives the same result.
    """

    def annotate(self, hunk: Hunk) -> AnnotatedHunk:
        records, _, _ = number_lines(hunk)
        old_lines = {r.old_number: r.text for r in records if r.old_number is not None}
        new_lines = {r.new_number: r.text for r in records if r.new_number is not None}
        return AnnotatedHunk(
            rendered_lines=(hunk.header, *render_records(records)),
            old_lines=old_lines,
            new_lines=new_lines,
            records=records,
        )


def number_lines(hunk: Hunk) -> tuple[tuple[LineRecord, ...], int, int]:
    """Fold the body lines into records; also return the final old/new counters."""
    old, new = hunk.old_start, hunk.new_start
    records: list[LineRecord] = []
    for line in hunk.body_lines:
        record, old, new = _advance(line, old, new)
        records.append(record)
    return tuple(records), old, new


def render_records(records: tuple[LineRecord, ...]) -> list[str]:
    """Left-justify every label to the widest one in the group, then append the raw line."""
    if not records:
        return []
    width = max(len(r.label) for r in records)
    return [f"{r.label.ljust(width)} {r.text}" for r in records]


def _advance(line: str, old: int, new: int) -> tuple[LineRecord, int, int]:
    kind = LineKind.classify(line)
    record = LineRecord(
        kind=kind,
        text=line,
        old_number=old if kind.consumes_old else None,
        new_number=new if kind.consumes_new else None,
    )
    return (
        record,
        old + 1 if kind.consumes_old else old,
        new + 1 if kind.consumes_new else new,
    )
