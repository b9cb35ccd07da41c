import structlog

from mr_review_engine.core.application.ports.file_classifier_port import FileClassifierPort
from mr_review_engine.core.domain.diff import Changeset

logger = structlog.get_logger()


def filter_code_files(changeset: Changeset, classifier: FileClassifierPort) -> Changeset:
    """Keep files whose new or old path is code, preserving order."""
    kept = tuple(
        f
        for f in changeset.files
        if classifier.is_code_file(f.new_path) or classifier.is_code_file(f.old_path)
    )
    logger.info("Code files selected", code_files=len(kept), total_files=len(changeset.files))
    return changeset.with_files(kept)
