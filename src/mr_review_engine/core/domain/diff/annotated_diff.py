"""Annotation results: per hunk and per file."""

from dataclasses import dataclass, field

from mr_review_engine.core.domain.diff.value_objects.line_record import LineRecord
from mr_review_engine.core.domain.diff.value_objects.raw_file_diff import RawFileDiff


@dataclass(frozen=True)
class AnnotatedHunk:
    """Rendered hunk (header first) and the line-number tables it produced."""

    rendered_lines: tuple[str, ...]
    old_lines: dict[int, str]
    new_lines: dict[int, str]
    records: tuple[LineRecord, ...] = ()


@dataclass(frozen=True)
class AnnotatedFileDiff:
    """A changed file whose hunks have been numbered and rendered.

    ``extended_diff`` is empty when the file had no hunks; consumers then
    fall back to the raw diff text through ``review_content``.
    """

    source: RawFileDiff
    extended_diff: str = ""
    old_lines_with_number: dict[int, str] = field(default_factory=dict)
    new_lines_with_number: dict[int, str] = field(default_factory=dict)
    has_unreliable_numbers: bool = False

    @property
    def old_path(self) -> str:
        return self.source.old_path

    @property
    def new_path(self) -> str:
        return self.source.new_path

    @property
    def is_annotated(self) -> bool:
        return bool(self.extended_diff)

    @property
    def review_content(self) -> str:
        return self.extended_diff or self.source.diff_text
