import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

NEUTRAL_SCORE = 7
MIN_SCORE = 1
MAX_SCORE = 10
DEFAULT_SUMMARY = "Code review completed"


class FileReviewSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_path: str = Field(default="", alias="filePath", description="Reviewed file path")
    comments: list[str] = Field(default_factory=list, description="Actionable review comments")
    severity: Literal["low", "medium", "high"] | None = Field(
        default=None, description="low = suggestion, medium = should fix, high = must fix"
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def coerce_path(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("comments", mode="before")
    @classmethod
    def coerce_comments(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [str(c) for c in v if c not in (None, "")]

    @field_validator("severity", mode="before")
    @classmethod
    def drop_unknown_severity(cls, v: Any) -> str | None:
        return v if v in ("low", "medium", "high") else None


class ReviewerResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: int = Field(default=NEUTRAL_SCORE, description="Overall score from 1 to 10")
    summary: str = Field(default=DEFAULT_SUMMARY, description="Overall review summary")
    file_reviews: list[FileReviewSchema] = Field(default_factory=list, alias="fileReviews")

    @field_validator("score", mode="before")
    @classmethod
    def normalize_score(cls, v: Any) -> int:
        # null, blank text and false read as 0 and clamp to the minimum.
        if v is None or (isinstance(v, str) and not v.strip()):
            v = 0
        try:
            value = float(v)
        except (TypeError, ValueError):
            return NEUTRAL_SCORE
        if not math.isfinite(value):
            return NEUTRAL_SCORE
        return max(MIN_SCORE, min(MAX_SCORE, math.floor(value + 0.5)))

    @field_validator("summary", mode="before")
    @classmethod
    def default_summary(cls, v: Any) -> str:
        return str(v) if v else DEFAULT_SUMMARY

    @field_validator("file_reviews", mode="before")
    @classmethod
    def keep_objects_only(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, dict)]
