"""
Logging System for Expression Search

Centralized logging with verbosity levels so library callers get quiet output
by default while the command line can ask for progress and summaries.
"""

import logging
import sys
from typing import Optional, Dict, Any, TextIO
from enum import Enum
import time
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for expression search"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only warnings and critical info
    MODERATE = 2    # Query start and result summaries
    DETAILED = 3    # Per-range enumeration progress
    VERBOSE = 4     # All information including debug details


class SearchLogger:
    """
    Centralized logger for expression search with context-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()
        self.last_progress_time = time.time()

        # Create logger
        self.logger = logging.getLogger('expression_target')
        self.logger.setLevel(logging.DEBUG)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler; stdout is reserved for command line results
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_search_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def progress(self, message: str, force: bool = False):
        """Progress updates - throttled to avoid spam"""
        if not self._should_log(LogLevel.DETAILED):
            return

        current_time = time.time()
        # Throttle progress messages to every 2 seconds unless forced
        if force or (current_time - self.last_progress_time) >= 2.0:
            self.logger.info(f"PROGRESS: {message}")
            self.last_progress_time = current_time

    def milestone(self, message: str):
        """Important milestones"""
        if self._should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log final results summary"""
        if not self._should_log(LogLevel.MODERATE):
            return

        self.logger.info("=" * 60)
        self.logger.info("EXPRESSION SEARCH RESULTS:")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[SearchLogger] = None


def get_logger() -> SearchLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> SearchLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SearchLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger

