"""
Logging for Complexity CLI.

Everything logs through the ``complexity_cli`` logger. Console output goes
to stderr through rich so it never mixes with JSON written to stdout. Records
carry the source unit and function being analyzed as context, which the file
formatter prints in front of each message.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

LOGGER_NAME = "complexity_cli"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Context keys, in the order the file formatter prints them
CONTEXT_FIELDS = ("source", "function")

_logger: Optional[logging.Logger] = None
_context_filter: Optional["ContextFilter"] = None


class ContextFilter(logging.Filter):
    """Stamps the current analysis context onto every record."""

    def __init__(self):
        super().__init__()
        self.context: Dict[str, Any] = {}

    def filter(self, record):
        for key in CONTEXT_FIELDS:
            setattr(record, key, self.context.get(key))
        return True


class AnalysisLogFormatter(logging.Formatter):
    """File formatter prefixing messages with ``[source=..., function=...]``."""

    def format(self, record):
        message = super().format(record)
        parts = [
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_FIELDS
            if getattr(record, key, None)
        ]
        if not parts:
            return message
        return f"[{', '.join(parts)}] {message}"


def _console_level(debug: bool, verbose: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logger(
    debug: bool = False, log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Configure the package logger once per process.

    Args:
        debug: Log everything, with source paths and traceback locals
        log_file: Also write every record, context included, to this file
        verbose: Show info messages on the console

    Returns:
        The configured logger; later calls return it unchanged until
        ``reset_logger`` is called
    """
    global _logger, _context_filter

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug or log_file else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    _context_filter = ContextFilter()
    logger.addFilter(_context_filter)

    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
    )
    console_handler.setLevel(_console_level(debug, verbose))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(AnalysisLogFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def reset_logger() -> None:
    """Close handlers and forget the logger so the next setup reconfigures it."""
    global _logger, _context_filter
    if _logger is not None:
        for handler in list(_logger.handlers):
            handler.close()
            _logger.removeHandler(handler)
        if _context_filter is not None:
            _logger.removeFilter(_context_filter)
    _logger = None
    _context_filter = None


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logger()
    return _logger


@contextmanager
def log_context(**kwargs):
    """
    Attach analysis context to records logged inside the block.

    Example:
        with log_context(source="sort.js", function="mergeSort"):
            log_debug("Classifying")

    Keys that are None are ignored, and the previous context is restored on exit.
    """
    get_logger()
    updates = {key: value for key, value in kwargs.items() if value is not None}
    if _context_filter is None or not updates:
        yield
        return

    saved = dict(_context_filter.context)
    _context_filter.context.update(updates)
    try:
        yield
    finally:
        _context_filter.context = saved


def _log(level: int, message: str, **context) -> None:
    logger = get_logger()
    with log_context(**context):
        logger.log(level, message)


def log_debug(message: str, **context):
    _log(logging.DEBUG, message, **context)


def log_info(message: str, **context):
    _log(logging.INFO, message, **context)


def log_warning(message: str, **context):
    _log(logging.WARNING, message, **context)


def log_error(message: str, exc_info=None, **context):
    logger = get_logger()
    with log_context(**context):
        logger.error(message, exc_info=exc_info)


def log_performance(operation: str, duration: float, **context):
    _log(logging.INFO, f"Performance: {operation} took {duration:.3f}s", **context)


def log_file_operation(operation: str, path: Path, **context):
    _log(logging.DEBUG, f"File {operation}: {path}", **context)


def log_classification(function: str, label: str, rule: str, **context):
    """Record which decision rule produced a function's complexity."""
    _log(logging.DEBUG, f"{function}: {label} via {rule}", function=function, **context)


def logged_operation(operation_name: str):
    """
    Decorator logging start, completion and failure of an operation.
    Failures are logged at error level and re-raised.

    Example:
        @logged_operation("analyze_command")
        def handle_analyze(options, path):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            logger.debug(f"Starting {operation_name}")
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log_error(
                    f"Failed {operation_name} after "
                    f"{time.time() - start_time:.3f}s: {e}"
                )
                raise
            logger.debug(
                f"Completed {operation_name} in {time.time() - start_time:.3f}s"
            )
            return result

        return wrapper

    return decorator


def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
):
    """Set up logging from CLI flags."""
    setup_logger(
        debug=debug, log_file=Path(log_file) if log_file else None, verbose=verbose
    )
