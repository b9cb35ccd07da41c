"""Structlog processor that nests flat review events into a stable JSON schema.

All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from typing import Any

REVIEW_KEYS = ("changeset_title", "event_type", "batch")


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": event_dict.pop("processing_duration_ms", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_review(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Changeset and batch identification."""
    if not any(k in event_dict for k in REVIEW_KEYS):
        return None
    return {k: event_dict.pop(k, None) for k in REVIEW_KEYS}


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {"component": component}


BLOCK_BUILDERS = (
    ("processing", _build_processing),
    ("error", _build_error),
    ("review", _build_review),
    ("context", _build_context),
)


class ReviewLogProcessor:
    """Stamps service/environment and groups known keys; leftovers go under ``extra``."""

    def __init__(self, service: str, environment: str) -> None:
        self._service = service
        self._environment = environment

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        result: dict[str, Any] = {
            "timestamp": event_dict.pop("timestamp", None),
            "level": event_dict.pop("level", "info"),
            "service": self._service,
            "environment": self._environment,
            "message": event_dict.pop("event", ""),
        }
        for name, builder in BLOCK_BUILDERS:
            block = builder(event_dict)
            if block is not None:
                result[name] = block

        if event_dict:
            result["extra"] = dict(event_dict)
        return result
