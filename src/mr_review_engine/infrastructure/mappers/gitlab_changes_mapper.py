from typing import Any

from mr_review_engine.core.domain.diff import Changeset, RawFileDiff


class GitLabChangesMapper:
    """Maps an already-fetched ``/merge_requests/:iid/changes`` payload to a Changeset."""

    @staticmethod
    def to_changeset(payload: dict[str, Any]) -> Changeset:
        changes = payload.get("changes") or []
        return Changeset(
            title=payload.get("title"),
            files=tuple(GitLabChangesMapper.to_raw_file_diff(c) for c in changes if isinstance(c, dict)),
        )

    @staticmethod
    def to_raw_file_diff(change: dict[str, Any]) -> RawFileDiff:
        old_path = change.get("old_path") or ""
        return RawFileDiff(
            old_path=old_path,
            new_path=change.get("new_path") or old_path,
            diff_text=change.get("diff") or "",
            is_new=bool(change.get("new_file", False)),
            is_deleted=bool(change.get("deleted_file", False)),
            is_renamed=bool(change.get("renamed_file", False)),
        )
