from mr_review_engine.core.application.ports.file_classifier_port import FileClassifierPort
from mr_review_engine.core.application.ports.reviewer_port import ReviewerPort

__all__ = ["FileClassifierPort", "ReviewerPort"]
