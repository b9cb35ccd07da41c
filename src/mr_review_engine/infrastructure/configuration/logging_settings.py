import logging
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})


class LoggingSettings(BaseSettings):
    """
    Log output selection for the review engine.
    An explicit LOG_FORMAT wins; otherwise deployed environments log JSON.
    """
    log_format: Literal["json", "console"] | None = Field(default=None, description="Forced renderer", alias="LOG_FORMAT")
    app_env: str = Field(default="local", description="Deployment environment name", alias="APP_ENV")
    log_level: str = Field(default="INFO", description="Root log level name", alias="LOG_LEVEL")
    service_name: str = Field(default="mr-review-engine", description="Service name stamped on JSON logs", alias="SERVICE_NAME")

    @field_validator("log_format", mode="before")
    @classmethod
    def blank_format_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("app_env", mode="before")
    @classmethod
    def lower_env(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def known_level(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        name = v.strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return name

    @property
    def renders_json(self) -> bool:
        if self.log_format is not None:
            return self.log_format == "json"
        return self.app_env in JSON_ENVIRONMENTS

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    model_config = SettingsConfigDict(env_file=None, populate_by_name=True, extra="ignore")
