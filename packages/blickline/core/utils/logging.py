"""Root logger setup for blickline.

Library modules only create ``logging.getLogger(__name__)`` loggers; the CLI
(or an embedding application) decides where records go by calling
configure_logging(). Output is either a plain text line or one JSON object
per record.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LogRecord attributes that are not caller-supplied context
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    context: dict[str, Any] = {
        "logger_name": record.name,
        "module": record.module,
        "function": record.funcName,
        "line": record.lineno,
    }
    context.update(
        (key, value)
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    )
    return context


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Keys: ``level``, ``message``, ``timestamp`` (UTC, ISO 8601) and
    ``context``. The context holds the logger name, module, function and
    line, anything passed through ``extra=`` or a LoggerAdapter, and for
    exceptions ``error_type``, ``error_message`` and ``stack_trace``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context = _record_context(record)

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc) if exc else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Route all records through one handler on the root logger.

    Replaces any handlers installed earlier, so it is safe to call again
    after the config changes.

    Args:
        level: Level name, any case.
        format_string: Text format; DEFAULT_FORMAT when None. Unused when
            structured is True.
        filename: Append to this file instead of writing to stdout.
        structured: Emit JSON lines via StructuredJSONFormatter.

    Example:
        >>> configure_logging(level="debug", structured=True, filename="blickline.jsonl")
    """
    handler: logging.Handler = (
        logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stdout)
    )
    handler.setFormatter(
        StructuredJSONFormatter()
        if structured
        else logging.Formatter(format_string or DEFAULT_FORMAT)
    )
    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, bound to context when any is given.

    Example:
        >>> log = get_logger(__name__, command="simplify")
        >>> isinstance(log, logging.LoggerAdapter)
        True
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, context) if context else logger
