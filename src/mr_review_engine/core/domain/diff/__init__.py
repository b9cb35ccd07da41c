from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedFileDiff, AnnotatedHunk
from mr_review_engine.core.domain.diff.diff_annotator import DiffAnnotator
from mr_review_engine.core.domain.diff.file_diff_annotator import FileDiffAnnotator
from mr_review_engine.core.domain.diff.hunk_splitter import HunkSplitter
from mr_review_engine.core.domain.diff.value_objects.changeset import Changeset
from mr_review_engine.core.domain.diff.value_objects.hunk import Hunk
from mr_review_engine.core.domain.diff.value_objects.line_kind import LineKind
from mr_review_engine.core.domain.diff.value_objects.line_record import LineRecord
from mr_review_engine.core.domain.diff.value_objects.raw_file_diff import RawFileDiff

__all__ = [
    "AnnotatedFileDiff",
    "AnnotatedHunk",
    "Changeset",
    "DiffAnnotator",
    "FileDiffAnnotator",
    "Hunk",
    "HunkSplitter",
    "LineKind",
    "LineRecord",
    "RawFileDiff",
]
