from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "INSTALLER_OPTIONS_LOG_DIR",
        Path.home() / ".local" / "state" / "installer-options" / "logs",
    )
)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
) -> Logger:
    """
    Setup logging sinks for the option model.

    Logging Tiers:
    - ERROR: unexpected failures in the surrounding installer
    - INFO: defaults derived, configuration finalized
    - DEBUG: validation failures, derived sizes
    - TRACE: every parsed value

    Log Files:
    - options.log: INFO+ events (7 day retention)
    - debug.log: DEBUG+ events when debug or trace is enabled (3 day retention)

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Custom log directory (defaults to ~/.local/state/installer-options/logs)
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})

    if trace:
        console_level = "TRACE"
    elif debug:
        console_level = "DEBUG"
    else:
        console_level = "INFO"

    # SINK 1: Console (stderr)
    logger.add(
        sys.stderr,
        level=console_level,
        enqueue=True,
        backtrace=False,
        diagnose=False,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "{message}"
        ),
    )

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # SINK 2: Options log - important events only (INFO+)
    logger.add(
        log_dir / "options.log",
        level="INFO",
        rotation="5 MB",
        retention="7 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{message}"
        ),
    )

    # SINK 3: Debug log (DEBUG+ when debug or trace is on)
    if debug or trace:
        logger.add(
            log_dir / "debug.log",
            level="TRACE" if trace else "DEBUG",
            rotation="10 MB",
            retention="3 days",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <10} | "
                "{extra[tags]} | "
                "{message}"
            ),
        )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["disk", "lvm"])
        source: Source component (e.g., "disk", "network")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.

    Each factory method returns a logger pre-configured with appropriate
    source and tags for the option group it serves.
    """

    @staticmethod
    def for_disk() -> Logger:
        """Logger for boot disk layout and sizing."""
        return logger.bind(source="disk", tags=["disk", "lvm"])

    @staticmethod
    def for_network() -> Logger:
        """Logger for network address parsing and validation."""
        return logger.bind(source="network", tags=["network", "cidr"])

    @staticmethod
    def for_summary() -> Logger:
        """Logger for the confirmation summary."""
        return logger.bind(source="summary", tags=["summary", "ui"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for settings and validation of the whole configuration."""
        return logger.bind(source="system", tags=["system"])
