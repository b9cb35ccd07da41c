from mr_review_engine.core.domain.quality.review_result import MergedResult, PartialResult, ReviewResult
from mr_review_engine.core.domain.quality.value_objects.file_finding import FileFinding
from mr_review_engine.core.domain.quality.value_objects.finding_severity import FindingSeverity

__all__ = ["FileFinding", "FindingSeverity", "MergedResult", "PartialResult", "ReviewResult"]
