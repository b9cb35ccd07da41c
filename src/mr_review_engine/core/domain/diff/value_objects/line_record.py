from dataclasses import dataclass

from mr_review_engine.core.domain.diff.value_objects.line_kind import LineKind


@dataclass(frozen=True)
class LineRecord:
    """A classified body line with the old/new numbers it was assigned."""

    kind: LineKind
    text: str
    old_number: int | None = None
    new_number: int | None = None

    @property
    def label(self) -> str:
        """Head label rendered in front of the line: ``(old, new)``, ``(old, )`` or ``( , new)``."""
        old = " " if self.old_number is None else str(self.old_number)
        new = "" if self.new_number is None else str(self.new_number)
        return f"({old}, {new})"
