from __future__ import annotations

import logging
from typing import Optional, TextIO

from smartquotify.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory:
    """Factory that configures the base logger lazily and hands out child loggers.

    Base configuration is delegated to `setup_base_logger`; the factory only
    remembers whether it already ran.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
        force: bool = False,
    ) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._force = bool(force)
        self._configured = False

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream, force=self._force)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
