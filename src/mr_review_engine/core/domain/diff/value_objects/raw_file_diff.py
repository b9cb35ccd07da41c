"""Structured representation of a single changed file as delivered by the repository host."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RawFileDiff:
    """Unified diff body for one changed file, plus its change flags.

    ``diff_text`` may hold zero or more hunks; a file without hunks
    (binary, mode-only change) is still a valid input.
    """

    old_path: str
    new_path: str
    diff_text: str = ""
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False
