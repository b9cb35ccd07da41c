"""Split one file's unified diff into hunks."""

import re

import structlog

from mr_review_engine.core.domain.diff.value_objects.hunk import Hunk

logger = structlog.get_logger()

HUNK_MARKER = "@@"
HUNK_HEADER_PATTERN = re.compile(r"@@ -(\d+),?(\d+)? \+(\d+),?(\d+)? @@")


class HunkSplitter:
    """Cuts a diff body at every ``@@`` header line.

    Preamble lines (``---``/``+++``, ``diff --git``) are discarded. A header
    without parseable numbers yields a hunk starting at 0/0 flagged as
    ``header_valid=False``; the file is still annotated.
    """

    def split(self, diff_text: str) -> list[Hunk]:
        hunks: list[Hunk] = []
        header: str | None = None
        body: list[str] = []

        lines = diff_text.split("\n")
        # A terminating newline is not an extra context line.
        if lines and lines[-1] == "":
            lines.pop()

        for line in lines:
            if line.startswith(HUNK_MARKER):
                self._flush(hunks, header, body)
                header, body = line, []
            elif header is not None:
                body.append(line)

        self._flush(hunks, header, body)
        return hunks

    @staticmethod
    def _flush(hunks: list[Hunk], header: str | None, body: list[str]) -> None:
        if header is None or not body:
            return
        hunks.append(_build_hunk(header, body))


def parse_hunk_header(header: str) -> tuple[int, int] | None:
    """Return ``(old_start, new_start)`` declared by *header*, or None if malformed."""
    match = HUNK_HEADER_PATTERN.search(header)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(3))


def _build_hunk(header: str, body: list[str]) -> Hunk:
    starts = parse_hunk_header(header)
    if starts is None:
        logger.warning("Malformed hunk header, numbering from 0", header=header)
        return Hunk(old_start=0, new_start=0, header=header, body_lines=tuple(body), header_valid=False)
    old_start, new_start = starts
    return Hunk(old_start=old_start, new_start=new_start, header=header, body_lines=tuple(body))
