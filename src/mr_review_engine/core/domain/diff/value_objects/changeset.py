from dataclasses import dataclass, field

from mr_review_engine.core.domain.diff.value_objects.raw_file_diff import RawFileDiff


@dataclass(frozen=True, kw_only=True)
class Changeset:
    """Ordered set of changed files plus the free-text header (MR title or commit message)."""

    title: str | None = None
    files: tuple[RawFileDiff, ...] = field(default_factory=tuple)

    def with_files(self, files: tuple[RawFileDiff, ...]) -> "Changeset":
        return Changeset(title=self.title, files=files)
