from dataclasses import dataclass

from mr_review_engine.core.domain.quality.value_objects.finding_severity import FindingSeverity


@dataclass(frozen=True)
class FileFinding:
    """Guardrail: a finding always points at a file and says something about it."""

    file_path: str
    comments: tuple[str, ...]
    severity: FindingSeverity | None = None

    def __post_init__(self) -> None:
        if not self.file_path.strip():
            raise ValueError("A finding must reference a file path.")
        if not self.comments:
            raise ValueError("A finding must carry at least one comment.")
