from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Hunk:
    """One ``@@ ... @@`` block of a unified diff.

    ``header_valid`` is False when the header did not carry parseable line
    numbers; both starts are then 0 and the numbering is unreliable.
    """

    old_start: int
    new_start: int
    header: str
    body_lines: tuple[str, ...]
    header_valid: bool = True

    def __post_init__(self) -> None:
        if not self.body_lines:
            raise ValueError("A hunk must contain at least one body line.")
