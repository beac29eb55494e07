"""
Logging configuration for rd-utils.

Uses loguru for structured logging with optional file rotation and retention.
Library records stay disabled until setup_logging() is called.
"""

import sys
import time
from typing import Optional

from loguru import logger

from rd_utils.config.settings import get_settings

PACKAGE_NAME = "rd_utils"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging based on settings.

    Sets up:
    - Console output with color and formatting
    - File output with rotation and retention (when enabled)
    - Log level from configuration, or the explicit ``level`` override

    Should be called once at application startup.
    """
    settings = get_settings()
    level = level or settings.log_level

    # Remove default handler
    logger.remove()

    # Console handler - colorized, formatted
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        colorize=True,
    )

    if settings.log_to_file:
        log_dir = settings.logs_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "rd-utils_{time:YYYY-MM-DD}.log",
            level="DEBUG",  # Always log everything to file
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="gz",
        )

    logger.enable(PACKAGE_NAME)
    logger.debug("Logging initialized (level={})", level)


def get_logger(name: str):
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        >>> from rd_utils.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Formatting {} with {}", value, template)
    """
    return logger.bind(module=name)


class log_operation:
    """Context manager for logging operations with timing.

    Example:
        >>> with log_operation("Formatting value", template="000-00000-0"):
        ...     tax_id("130800035")
        # Logs: "Formatting value [template=000-00000-0] completed in 0.00s"
    """

    def __init__(self, operation: str, **context):
        self.operation = operation
        self.context = context
        self.start_time = None

    def _context_str(self) -> str:
        return " ".join(f"{k}={v}" for k, v in self.context.items())

    def __enter__(self):
        self.start_time = time.perf_counter()
        logger.debug("{} [{}] starting...", self.operation, self._context_str())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.start_time

        if exc_type is None:
            logger.debug(
                "{} [{}] completed in {:.2f}s",
                self.operation,
                self._context_str(),
                duration,
            )
        else:
            logger.error(
                "{} [{}] failed after {:.2f}s: {}",
                self.operation,
                self._context_str(),
                duration,
                exc_val,
            )

        return False  # Don't suppress exceptions
