"""
Logging System for the Expression Solver

Centralized logger with verbosity levels. Console output goes to stderr so
that the single result line printed on stdout is never mixed with log
messages.
"""

import logging
import sys
import time
from enum import Enum
from typing import Optional, Dict, Any, TextIO


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time"""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class LogLevel(Enum):
    """Enumeration of logging levels for the solver"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Errors and warnings only
    MODERATE = 2    # Key milestones (parse finished, solve finished)
    DETAILED = 3    # Every Newton iteration
    VERBOSE = 4     # All information including parser debug details


class SolverLogger:
    """
    Centralized logger for parsing and root finding
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()

        self.logger = logging.getLogger('expression_solver')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):  # Remove any existing handlers
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = "expression_solver.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged unless silent - unrecoverable errors"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def iteration(self, step: int, x: float, y: float, dy: float):
        """Log one Newton step"""
        if not self._should_log(LogLevel.DETAILED):
            return
        self.logger.info(f"Iter {step:4d}: x={x:.12g} f(x)={y:.6g} f'(x)={dy:.6g}")

    def result_summary(self, results: Dict[str, Any]):
        """Log a summary of a finished solve"""
        if not self._should_log(LogLevel.MODERATE):
            return

        elapsed = time.time() - self.start_time
        self.logger.info("=" * 40)
        self.logger.info(f"SOLVER RESULTS ({elapsed:.3f}s):")
        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<24} {value:.12g}")
            else:
                self.logger.info(f"{key:.<24} {value}")


# Global logger instance
_global_logger: Optional[SolverLogger] = None


def get_logger() -> SolverLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> SolverLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SolverLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_critical(message: str):
    """Log critical message"""
    get_logger().critical(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)


def debug_enabled() -> bool:
    """True when debug messages would be emitted"""
    return get_logger()._should_log(LogLevel.VERBOSE)


def log_iteration(step: int, x: float, y: float, dy: float):
    """Log a Newton iteration"""
    get_logger().iteration(step, x, y, dy)
