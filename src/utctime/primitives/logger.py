"""
Logger Primitive

Structured debug logging with context, used as the utctime debug channel.

Interface:
- debug(message: str, context: dict = {}) → None
- close() → None
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

import structlog


class Logger:
    """Structured logger with ISO 8601 UTC timestamps, writing to stderr by default."""

    def __init__(self, output_file: Optional[str] = None, stream: Optional[TextIO] = None):
        """
        Initialize logger.

        Args:
            output_file: Path to log file. If None, logs to ``stream``.
            stream: Text stream used when no file is given. Defaults to the
                current ``sys.stderr``.
        """
        self.output_file = output_file
        self._file_handle = None
        self._stream = stream
        self._configure_structlog()

    def _configure_structlog(self):
        """Build a bound logger private to this instance."""
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ]

        if self.output_file:
            log_path = Path(self.output_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            self._file_handle = open(self.output_file, "a", encoding="utf-8")
            target = self._file_handle
        else:
            target = self._stream if self._stream is not None else sys.stderr

        # wrap_logger keeps the host application's structlog configuration untouched
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=target),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(0),
            context_class=dict,
        ).bind(logger="utctime")

    def _normalize_context(self, context: Optional[dict]) -> dict:
        """Normalize context parameter, returning empty dict if None."""
        return context if context is not None else {}

    def debug(self, message: str, context: Optional[dict] = None) -> None:
        """
        Log DEBUG level message.

        Args:
            message: Log message
            context: Optional context dictionary
        """
        self._logger.debug(message, **self._normalize_context(context))

    def close(self) -> None:
        """Close file handle if open."""
        if self._file_handle is not None:
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensures file handle is closed."""
        self.close()
        return False
