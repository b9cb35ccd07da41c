from enum import StrEnum


class LineKind(StrEnum):
    REMOVED = "REMOVED"
    ADDED = "ADDED"
    CONTEXT = "CONTEXT"

    @classmethod
    def classify(cls, line: str) -> "LineKind":
        """Decide the kind from the leading diff marker; anything unmarked is context."""
        if line.startswith("-"):
            return cls.REMOVED
        if line.startswith("+"):
            return cls.ADDED
        return cls.CONTEXT

    @property
    def consumes_old(self) -> bool:
        return self is not LineKind.ADDED

    @property
    def consumes_new(self) -> bool:
        return self is not LineKind.REMOVED
