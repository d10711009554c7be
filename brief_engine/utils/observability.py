"""
Structured Logging & Observability
Human-readable logs in development, JSON logs for ingestion in production.
"""
import sys
from loguru import logger
from typing import Any
from brief_engine.config import get_settings


def _console_format(record) -> str:
    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    )
    if "draft_id" in record["extra"]:
        fmt += "<magenta>{extra[draft_id]}</magenta> | "
    return fmt + "{message}\n{exception}"


def configure_logging():
    """
    Configure loguru sinks.

    In development: colorized console output, tagged with the draft id when bound
    With structured logging enabled: one JSON object per line
    """
    settings = get_settings()

    logger.remove()

    if not settings.enable_structured_logging:
        logger.add(
            sys.stderr,
            format=_console_format,
            level=settings.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,
        )

    logger.info(f"Logging configured: level={settings.log_level}, structured={settings.enable_structured_logging}")


def log_inference_event(
    draft_id: str,
    action: str,
    duration_ms: float | None = None,
    **context: Any
):
    """
    Structured log line for one processed turn.

    Args:
        draft_id: Draft whose brief was updated
        action: What happened (e.g., "process_message", "infer")
        duration_ms: Wall time for the turn
        **context: Extra fields (platform, task_type, question, ...)

    Example:
        >>> log_inference_event(
        ...     draft_id="draft-42",
        ...     action="process_message",
        ...     duration_ms=3.2,
        ...     platform="instagram",
        ...     question="intent"
        ... )
    """
    log_data = {
        "draft_id": draft_id,
        "action": action,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    log_data.update(context)

    logger.bind(**log_data).info(f"Inference | {action} | {draft_id}")


def log_brief_event(
    event_type: str,
    draft_id: str,
    **details: Any
):
    """
    Log brief lifecycle events: creation, user overrides, confirmations, discards.
    """
    log_data = {
        "event_type": event_type,
        "draft_id": draft_id,
        **details
    }

    logger.bind(**log_data).success(f"Brief Event: {event_type}")
