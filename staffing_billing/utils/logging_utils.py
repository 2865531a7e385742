"""Run-scoped log fields for billing calculations.

``LogContext`` attaches fields such as the job number and a per-run
correlation id to every record emitted while it is active. Handlers set up
by ``configure_logging`` copy the fields onto records through
``ContextFilter``.
"""

import functools
import logging
import threading
import time
import uuid
from typing import Any, Callable, Dict

_local = threading.local()


def _active_fields() -> Dict[str, Any]:
    return getattr(_local, "fields", {})


def generate_correlation_id() -> str:
    """Short random id tying together the log lines of one billing run."""
    return uuid.uuid4().hex[:12]


class LogContext:
    """Add fields to every log record emitted inside the block.

    Nested contexts see the outer fields; an inner value wins on conflict and
    the outer fields are restored on exit, also when the block raises.

    Example:
        with LogContext(job_number="J-1042", correlation_id=generate_correlation_id()):
            logger.info("Billing job")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._outer: Dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._outer = _active_fields()
        _local.fields = {**self._outer, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _local.fields = self._outer


class ContextFilter(logging.Filter):
    """Copy the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _active_fields().items():
            setattr(record, key, value)
        return True


def log_function_call(func: Callable) -> Callable:
    """Log entry and exit of a call at DEBUG, with the elapsed time.

    Exceptions are logged with traceback and re-raised.

    Example:
        @log_function_call
        def calculate_job_billing(job, facility, interpreter, settings):
            ...
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"Entering {func.__name__}")
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Exception in {func.__name__}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Exiting {func.__name__} after {elapsed_ms:.1f} ms")
        return result

    return wrapper
