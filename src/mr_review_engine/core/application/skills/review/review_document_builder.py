from collections.abc import Iterable

from mr_review_engine.core.domain.diff.annotated_diff import AnnotatedFileDiff
from mr_review_engine.core.domain.diff.file_diff_annotator import DEFAULT_HEADER_LABEL, render_file_block

DEFAULT_MAX_DIFF_LINES_PER_FILE = 500


class ReviewDocumentBuilder:
    """Builds the document handed to the reviewer for one batch.

    Same layout as the full extended document, but each file's content is
    cut to ``max_diff_lines_per_file`` lines with a placeholder counting the
    omitted lines.
    """

    def __init__(
        self,
        max_diff_lines_per_file: int = DEFAULT_MAX_DIFF_LINES_PER_FILE,
        header_label: str = DEFAULT_HEADER_LABEL,
    ) -> None:
        if max_diff_lines_per_file <= 0:
            raise ValueError("max_diff_lines_per_file must be positive.")
        self._max_lines = max_diff_lines_per_file
        self._header_label = header_label

    def build(self, title: str | None, files: Iterable[AnnotatedFileDiff]) -> str:
        header = f"{self._header_label}: {title or ''}\n\n"
        blocks = [render_file_block(f, self.truncate(f.review_content)) for f in files]
        return header + "".join(blocks)

    def truncate(self, content: str) -> str:
        lines = content.split("\n")
        if len(lines) <= self._max_lines:
            return content
        omitted = len(lines) - self._max_lines
        return "\n".join(lines[: self._max_lines]) + f"\n\n... ({omitted} lines omitted)"
