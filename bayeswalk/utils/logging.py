"""Logging setup for scripts using the bayeswalk package.

Library modules log through logging.getLogger(__name__) and stay silent by
default. Call BayeswalkLogger.get_logger() to attach a formatted handler to the
"bayeswalk" logger, or to any other named logger.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


class BayeswalkLogger:
    """Factory class for configured bayeswalk loggers."""

    _formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    @classmethod
    def get_logger(
        cls,
        name: str = "bayeswalk",
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        propagate: bool = False,
    ) -> logging.Logger:
        """Return a logger with consistent bayeswalk formatting/handlers."""
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate

        # The package logger carries a NullHandler until a caller opts in
        if not [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(cls._formatter)
            logger.addHandler(stream_handler)

        if log_file is not None:
            log_path = Path(log_file)
            has_file_handler = any(
                isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path.absolute()
                for handler in logger.handlers
            )
            if not has_file_handler:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_path)
                file_handler.setFormatter(cls._formatter)
                logger.addHandler(file_handler)

        return logger
