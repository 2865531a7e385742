"""Root logger setup for the billing engine.

Handlers are built from ``BillingSettings``: a console handler on stderr,
plus a rotating file when ``LOG_FILE`` is set. Each handler carries the
``ContextFilter`` so job numbers and correlation ids reach every record.
"""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from staffing_billing.config.settings import BillingSettings
from staffing_billing.utils.logging_utils import ContextFilter

STANDARD_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Attributes every LogRecord carries; the rest came from extra= or LogContext
_BUILTIN_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# Handlers added by configure_logging, replaced on the next call
_installed: List[logging.Handler] = []


def structured_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields added to a record through ``extra=`` or ``LogContext``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _BUILTIN_RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line. Decimal amounts are written as strings."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(structured_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class LoggingConfig(BaseModel):
    """
    Resolved logging setup.

    Attributes:
        level: Root level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "standard" text lines or "json" lines
        log_file: Rotating log file, or None for console only
        console: Whether to log to stderr
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep
    """

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_format: Literal["standard", "json"] = "standard"
    log_file: Optional[Path] = None
    console: bool = True
    max_bytes: int = MAX_LOG_BYTES
    backup_count: int = LOG_BACKUP_COUNT

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @classmethod
    def from_settings(cls, settings: BillingSettings) -> "LoggingConfig":
        """Build the logging setup from LOG_LEVEL, DEBUG, LOG_FORMAT and LOG_FILE."""
        return cls(
            level=settings.effective_log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
        )

    def build_formatter(self) -> logging.Formatter:
        if self.log_format == "json":
            return JSONFormatter()
        return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    def build_handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = []
        if self.console:
            handlers.append(logging.StreamHandler())
        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.max_bytes,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                )
            )
        return handlers


def configure_logging(config: LoggingConfig) -> None:
    """
    Install the configured handlers on the root logger.

    Handlers from an earlier call are closed and replaced; handlers that
    other code attached to the root logger are left alone.

    Args:
        config: LoggingConfig instance
    """
    root_logger = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root_logger.removeHandler(handler)
        handler.close()

    level = logging.getLevelName(config.level)
    root_logger.setLevel(level)

    formatter = config.build_formatter()
    context_filter = ContextFilter()
    for handler in config.build_handlers():
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)
        _installed.append(handler)

    logging.getLogger(__name__).debug(
        f"Logging at {config.level} ({config.log_format}), "
        f"file: {config.log_file or 'none'}"
    )
