from mr_review_engine.infrastructure.adapters.classification.code_file_filter import filter_code_files
from mr_review_engine.infrastructure.adapters.classification.extension_file_classifier import (
    ExtensionFileClassifier,
)

__all__ = ["ExtensionFileClassifier", "filter_code_files"]
