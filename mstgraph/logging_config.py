from __future__ import annotations

"""Centralised logging configuration for mstgraph."""

import logging
import os
import sys
from typing import Final, Iterable, Optional

import structlog

_CONFIGURED: bool = False
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_FORMAT: Final[str] = "keyvalue"
LOG_FORMATS: Final[tuple] = ("json", "keyvalue", "console")


def _resolve_level(level: Optional[str]) -> int:
    candidate = level or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    value = logging.getLevelName(candidate.upper())
    if isinstance(value, int):
        return value
    return logging.INFO


def _resolve_format(fmt: Optional[str]) -> str:
    candidate = fmt or os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT
    candidate = candidate.strip().lower()
    if candidate in LOG_FORMATS:
        return candidate
    return DEFAULT_LOG_FORMAT


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        return record.levelno <= self.max_level


def _renderer_for_format(resolved_format: str) -> structlog.types.Processor:
    if resolved_format == "json":
        return structlog.processors.JSONRenderer()
    if resolved_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "event", "logger"]
    )


def _build_std_handlers(resolved_level: int) -> Iterable[logging.Handler]:
    message_formatter = logging.Formatter(fmt="%(message)s")

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.setFormatter(message_formatter)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING - 1))

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(message_formatter)

    if resolved_level >= logging.WARNING:
        # If the resolved level filters out info logs, keep stderr only
        return [stderr_handler]
    return [stdout_handler, stderr_handler]


def configure_logging(*, level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog + stdlib logging once for the process."""

    global _CONFIGURED

    if _CONFIGURED:
        return

    resolved_level = _resolve_level(level)
    resolved_format = _resolve_format(fmt)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(resolved_level)

    for handler in _build_std_handlers(resolved_level):
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer_for_format(resolved_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def reset_logging() -> None:
    """Forget the previous configuration so that ``configure_logging`` runs again."""

    global _CONFIGURED

    logging.getLogger().handlers = []
    structlog.reset_defaults()
    _CONFIGURED = False
