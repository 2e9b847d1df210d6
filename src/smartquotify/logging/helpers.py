from __future__ import annotations

"""Small logging helpers to standardize smartquotify logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'smartquotify' logger.
    - get_logger: Namespaced logger factory ('smartquotify.*').
    - trace_rules utilities gated by SMARTQUOTIFY_TRACE_RULES.

Design notes:
    - The version is resolved lazily to avoid circular imports.
    - Fallback to 'unknown' if the version cannot be imported.
"""

import logging
import os
import sys
from typing import Optional, TextIO

BASE_LOGGER_NAME = "smartquotify"
TRACE_ENV = "SMARTQUOTIFY_TRACE_RULES"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'smartquotify.cli').
        - msg: Formatted message string.
        - version: smartquotify.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from smartquotify import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("SMARTQUOTIFY_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the base 'smartquotify' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).
        force: Replace existing handlers instead of only updating the level.

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers and not force:
        base.setLevel(level)
        return base

    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'smartquotify'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(f"{BASE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_enabled() -> bool:
    """Check if per-rule tracing is enabled via env flag."""
    return os.getenv(TRACE_ENV) == "1"


def trace_rules(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity rule traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Structured context attached to the record and appended to the text.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
