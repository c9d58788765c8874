#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging system for postkit operations.

Every validator and builder accepts an optional PostkitLogger; when none
is given they log through ``safe_logger`` into a NullLogger instead.

Log layout under ``log_dir``:
    <component>.log   operations, debug details and warnings
    errors.log        errors with context and traceback

Warnings are also echoed to the console so a CLI user sees them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class PostkitLogger:
    """
    Rotating-file logger shared by the validators and the listing builder.

    Attributes:
        log_dir: Directory for log files
        component_name: Prefix of the log file and the logger names
        main_logger: Operations, debug and warning messages
        error_logger: Errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "postkit",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: e.g. 'validators' or 'listing'
            max_bytes: Size at which a log file rotates
            backup_count: Rotated files to keep
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._make_logger(
            "operations", logging.DEBUG, f"{component_name}.log"
        )
        self.error_logger = self._make_logger("errors", logging.ERROR, "errors.log")

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _make_logger(self, suffix: str, level: int, file_name: str) -> logging.Logger:
        """Fresh named logger with one rotating file handler."""
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # Only this logger's handlers are reset; global logging state is untouched
        logger.handlers = []

        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and detach all handlers owned by this logger."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _emit(
        self, level: int, tag: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, f"{tag} - {message}")

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a finished operation such as 'validate_file' or 'write_listing'."""
        self._emit(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error to errors.log with its context and traceback.

        Args:
            error: Exception that occurred
            context: Where it happened, e.g. {"file": "posts/a.md"}
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised inside a CLI command and format it for display.

        Examples:
            >>> logger.log_cli_error(ListingError("Posts directory not found"))
            '❌ ListingError: Posts directory not found'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            message += f"\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a CLI failure through the context's logger, echo it, and exit.

    The click context object may carry ``logger`` and ``verbose``; with
    ``verbose`` set the traceback is echoed as well. Never returns.
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """PostkitLogger stand-in that discards everything."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[PostkitLogger]) -> PostkitLogger:
    """
    Return the provided logger, or a shared NullLogger when it is None.

        safe_logger(self.logger).log_debug("Skipping draft", {"file": name})
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
