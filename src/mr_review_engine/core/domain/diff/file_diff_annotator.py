"""Annotate every file of a changeset and assemble the extended review document."""

from collections.abc import Iterable

import structlog

from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedFileDiff
from mr_review_engine.core.domain.diff.diff_annotator import DiffAnnotator
from mr_review_engine.core.domain.diff.hunk_splitter import HunkSplitter
from mr_review_engine.core.domain.diff.value_objects.raw_file_diff import RawFileDiff

logger = structlog.get_logger()

DEFAULT_HEADER_LABEL = "commit message"


class FileDiffAnnotator:
    """Runs HunkSplitter + DiffAnnotator per file and merges the per-hunk tables."""

    def __init__(
        self,
        splitter: HunkSplitter | None = None,
        annotator: DiffAnnotator | None = None,
        header_label: str = DEFAULT_HEADER_LABEL,
    ) -> None:
        self._splitter = splitter or HunkSplitter()
        self._annotator = annotator or DiffAnnotator()
        self._header_label = header_label

    def annotate_file(self, file_diff: RawFileDiff) -> AnnotatedFileDiff:
        hunks = self._splitter.split(file_diff.diff_text)
        if not hunks:
            logger.debug("No hunks found, raw diff will be used", new_path=file_diff.new_path)
            return AnnotatedFileDiff(source=file_diff)

        parts: list[str] = []
        old_lines: dict[int, str] = {}
        new_lines: dict[int, str] = {}
        for hunk in hunks:
            annotated = self._annotator.annotate(hunk)
            parts.append("\n".join(annotated.rendered_lines))
            # Later hunks win on collision (only possible with malformed headers).
            old_lines.update(annotated.old_lines)
            new_lines.update(annotated.new_lines)

        return AnnotatedFileDiff(
            source=file_diff,
            extended_diff="\n".join(parts),
            old_lines_with_number=old_lines,
            new_lines_with_number=new_lines,
            has_unreliable_numbers=any(not h.header_valid for h in hunks),
        )

    def annotate_files(self, files: Iterable[RawFileDiff]) -> list[AnnotatedFileDiff]:
        return [self.annotate_file(f) for f in files]

    def build_document(self, title: str | None, files: Iterable[AnnotatedFileDiff]) -> str:
        """Header line followed by one ``## new_path/## old_path`` block per file, in order."""
        header = f"{self._header_label}: {title or ''}\n\n"
        return header + "".join(render_file_block(f) for f in files)


def render_file_block(file_diff: AnnotatedFileDiff, content: str | None = None) -> str:
    body = file_diff.review_content if content is None else content
    return f"## new_path: {file_diff.new_path}\n## old_path: {file_diff.old_path}\n{body}\n\n"
