"""Logging for GitHub Manager, built on loguru.

Provides:
- ``setup_logging`` driven by Settings, with --verbose/--quiet overrides
- routing of stdlib logging (httpx/httpcore under githubkit) into loguru
- masking of GitHub tokens in every emitted message
- ``get_logger`` / ``bind_repo`` / ``bind_org`` / ``LogContext`` context helpers
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from types import FrameType
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger, Record

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Classic and fine-grained personal access tokens, OAuth, app and refresh tokens
TOKEN_PATTERN = re.compile(r"\b(gh[pousr]_|github_pat_)[A-Za-z0-9_]{8,}")

_STDLIB_LOGGERS = ("httpx", "httpcore")

_configured = False


def redact_tokens(text: str) -> str:
    """Replace anything shaped like a GitHub token with its prefix and ``***``."""
    return TOKEN_PATTERN.sub(lambda match: f"{match.group(1)}***", text)


def _patch_record(record: Record) -> None:
    record["message"] = redact_tokens(record["message"])


def _console_format(record: Record) -> str:
    source = "{extra[name]}" if "name" in record["extra"] else "{name}"
    return (
        "<dim>{time:HH:mm:ss}</dim> | "
        "<level>{level: <8}</level> | "
        f"<cyan>{source}</cyan> - "
        "<level>{message}</level>\n{exception}"
    )


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: LogLevel = "INFO",
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    serialize: bool = False,
) -> Logger:
    """Configure logging for the library and CLI.

    Args:
        level: Base log level from config
        verbose: If True, use DEBUG level (wins over ``quiet``)
        quiet: If True, use WARNING level
        log_file: Optional path for a rotated DEBUG-level file log
        rotation: When to rotate log file (e.g., "10 MB", "1 day")
        retention: How long to keep rotated logs
        serialize: If True, write the file log as JSON lines

    Returns:
        Configured logger instance
    """
    global _configured

    if verbose:
        effective_level: LogLevel = "DEBUG"
    elif quiet:
        effective_level = "WARNING"
    else:
        effective_level = level

    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(
        sys.stderr,
        level=effective_level,
        format=_console_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {extra} | {message}",
            rotation=rotation,
            retention=retention,
            compression="gz",
            serialize=serialize,
        )

    _route_stdlib_logging(effective_level)

    _configured = True
    return logger


def _route_stdlib_logging(level: LogLevel) -> None:
    """Send stdlib logging through loguru.

    httpx logs every request line at INFO; keep it at WARNING unless
    debugging.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    library_level = logging.DEBUG if level in ("TRACE", "DEBUG") else logging.WARNING
    for name in _STDLIB_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> Logger:
    """Get a logger with ``name`` (typically ``__name__``) bound as context."""
    return logger.bind(name=name)


def bind_repo(owner: str, repo: str) -> Logger:
    """Logger carrying ``repo="owner/name"`` context."""
    return logger.bind(name="github_manager", repo=f"{owner}/{repo}")


def bind_org(org: str) -> Logger:
    """Logger carrying ``org`` context."""
    return logger.bind(name="github_manager", org=org)


class LogContext:
    """Temporarily attach context to every log call in a block.

    Usage:
        with LogContext(command="actions runners", target="octocat"):
            logger.info("Listing")  # carries command and target
    """

    def __init__(self, **context: Any) -> None:
        self._context = context
        self._manager: Any = None

    def __enter__(self) -> Logger:
        self._manager = logger.contextualize(**self._context)
        self._manager.__enter__()
        return logger

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if self._manager is not None:
            self._manager.__exit__(exc_type, exc_val, exc_tb)
            self._manager = None


def is_configured() -> bool:
    """Whether ``setup_logging`` has run since the last reset."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget configuration (used by tests)."""
    global _configured
    logger.remove()
    logger.configure(patcher=None)
    _configured = False
