"""Review engine logging: structlog pipeline plus a stdlib bridge.

``configure_logging`` is applied once per process by the composition root;
``get_logger`` hands out loggers tagged with the calling component.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from mr_review_engine.infrastructure.configuration.logging_settings import LoggingSettings
from mr_review_engine.infrastructure.observability.logging.review_log_processor import (
    ReviewLogProcessor,
)

_CONFIGURED = False


def configure_logging(settings: LoggingSettings | None = None) -> bool:
    """Apply the logging setup; returns False when it was already applied."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return False
    _CONFIGURED = True

    settings = settings or LoggingSettings()
    pre_chain = build_pre_chain(settings)
    renderer = build_renderer(settings)

    structlog.configure(
        processors=[*pre_chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(settings.level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(pre_chain, renderer, settings.level)
    get_logger("logging").debug(
        "Logging configured",
        renders_json=settings.renders_json,
        log_level=settings.log_level,
    )
    return True


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger().bind(context_component=component)


def build_pre_chain(settings: LoggingSettings) -> list[Any]:
    """Processors shared by structlog and stdlib records, renderer excluded.

    The review schema processor only runs for JSON output; the console keeps
    flat key/value pairs.
    """
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.renders_json:
        chain.append(ReviewLogProcessor(service=settings.service_name, environment=settings.app_env))
    return chain


def build_renderer(settings: LoggingSettings) -> Any:
    if settings.renders_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _bridge_stdlib(pre_chain: list[Any], renderer: Any, level: int) -> None:
    # logging.getLogger() records go through the same chain as structlog events
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *pre_chain,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
