"""Structured logging configuration using structlog.

Modules log through ``logging.getLogger(__name__)``; structlog only formats
those records, adding the request context bound by the trace-id middleware
and any ``extra=`` fields.
"""

import logging
import sys

import structlog


def build_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib records as JSON lines or colored console text."""
    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        render = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        render = [structlog.dev.ConsoleRenderer(colors=True)]

    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
        foreign_pre_chain=pre_chain,
    )


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route every stdlib logger through one structlog-formatted stdout handler.

    Args:
        log_level: Logging level string (debug/info/warning/error).
        json_output: If True, output JSON (production). If False, colored console (dev).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_output))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Per-request access lines duplicate the trace-id log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_request_context(trace_id: str, path: str | None = None) -> None:
    """Bind contextual variables to the current request context."""
    ctx = {"trace_id": trace_id}
    if path:
        ctx["path"] = path
    structlog.contextvars.bind_contextvars(**ctx)


def clear_request_context() -> None:
    """Clear bound context variables after a request."""
    structlog.contextvars.clear_contextvars()
