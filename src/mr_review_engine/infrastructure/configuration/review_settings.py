from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReviewSettings(BaseSettings):
    """
    Batching and truncation limits for the review engine.
    Non-positive limits are rejected here, before any batching happens.
    """
    max_files_per_review: int = Field(default=20, gt=0, description="Maximum files per reviewer call", alias="MAX_FILES_PER_REVIEW")
    max_diff_lines_per_file: int = Field(default=500, gt=0, description="Diff lines kept per file before truncation", alias="MAX_DIFF_LINES_PER_FILE")
    header_label: str = Field(default="commit message", min_length=1, description="Label of the document header line", alias="REVIEW_HEADER_LABEL")

    @field_validator("header_label", mode="before")
    @classmethod
    def strip_label(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    def summary(self) -> dict[str, Any]:
        """Effective values, safe to log."""
        return {
            "max_files_per_review": self.max_files_per_review,
            "max_diff_lines_per_file": self.max_diff_lines_per_file,
            "header_label": self.header_label,
        }

    model_config = SettingsConfigDict(env_file=None, populate_by_name=True, extra="ignore")
