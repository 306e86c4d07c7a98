"""
System Reporter - Console and file logging for Trousseau.

Thin wrapper over the standard logging module with a verbosity filter and
``[context]`` message prefixes.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SystemReporter:
    """
    Logger with verbose filtering.

    Verbose Levels:
        0 = Critical only (always visible)
        1 = Important messages (default)
        2 = Detailed information
        3 = Debug/verbose
    """

    def __init__(
        self,
        name: str = "trousseau",
        log_dir: Optional[str] = None,
        level: int = logging.INFO,
        verbose: int = 1,
        stream=None,
    ) -> None:
        """
        Initialize SystemReporter.

        Args:
            name: Logger name (used for filename if log_dir provided)
            log_dir: Directory for log files. If None, logs to console only.
            level: Python logging level
            verbose: Verbosity filter (0-3)
            stream: Console stream (default: stderr, keeps stdout for results)
        """
        self.name = name
        self.verbose = max(0, min(3, verbose))
        self._init_logger(name, log_dir, level, stream or sys.stderr)

    @classmethod
    def from_level_name(
        cls,
        name: str,
        level_name: str,
        log_dir: Optional[str] = None,
        verbose: int = 1,
    ) -> "SystemReporter":
        """Build reporter from a level name such as ``"info"``."""
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            level = logging.INFO
        return cls(name=name, log_dir=log_dir, level=level, verbose=verbose)

    def _init_logger(self, name: str, log_dir: Optional[str], level: int, stream) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.close()
        self.logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_dir:
            log_dir = os.path.expanduser(log_dir)
            os.makedirs(log_dir, exist_ok=True)
            log_file = os.path.join(log_dir, f"{name}.log")

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def close(self) -> None:
        """Close and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def set_verbose(self, level: int) -> None:
        """Update verbosity level."""
        self.verbose = max(0, min(3, level))

    def _should_log(self, verbose_level: int) -> bool:
        return self.verbose >= verbose_level

    # Core logging methods
    def debug(self, msg: str, context: str = "system", verbose_level: int = 3) -> None:
        if self._should_log(verbose_level):
            self.logger.debug(f"[{context}] {msg}")

    def info(self, msg: str, context: str = "system", verbose_level: int = 1) -> None:
        if self._should_log(verbose_level):
            self.logger.info(f"[{context}] {msg}")

    def warning(self, msg: str, context: str = "system", verbose_level: int = 1) -> None:
        if self._should_log(verbose_level):
            self.logger.warning(f"[{context}] {msg}")

    def error(self, msg: str, context: str = "system", verbose_level: int = 0) -> None:
        if self._should_log(verbose_level):
            self.logger.error(f"[{context}] {msg}")

    def critical(self, msg: str, context: str = "system", verbose_level: int = 0) -> None:
        if self._should_log(verbose_level):
            self.logger.critical(f"[{context}] {msg}")
