"""Logging configuration for fastaf.

Log records go to stderr (and optionally a file) so the console output of
the workflow stays readable. Records can be rendered as JSON lines for
machine consumption.
"""

import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


# Identifies every record emitted during one process run
RUN_ID = str(uuid.uuid4())

# Standard LogRecord attributes that are not copied into JSON output
_SKIP_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON with consistent fields including:
    - timestamp: ISO 8601 formatted timestamp
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - run_id: Identifier shared by all records of one run
    - Additional fields from extra parameter
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": RUN_ID,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _SKIP_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def setup_logging(
    log_level: str = "ERROR",
    use_json: bool = False,
    log_file: Optional[str] = None
) -> None:
    """Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_json: If True, use JSON formatter; otherwise use standard format
        log_file: Optional file path for logging output
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if use_json:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific component.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


git_logger = get_logger("fastaf.git_operations")


def log_git_operation(
    operation: str,
    repository: str,
    success: bool,
    duration: float,
    details: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None
) -> None:
    """Log a git operation with structured data.

    Args:
        operation: Type of operation (add, commit, push, ...)
        repository: Repository working directory
        success: Whether operation succeeded
        duration: Operation duration in seconds
        details: Additional operation details
        error: Error message if operation failed
    """
    log_data = {
        "operation": operation,
        "repository": repository,
        "success": success,
        "duration_seconds": round(duration, 3),
    }

    if details:
        log_data.update(details)

    if error:
        log_data["error"] = error

    if success:
        git_logger.info(
            f"Git operation completed: {operation}",
            extra=log_data
        )
    else:
        git_logger.warning(
            f"Git operation failed: {operation}",
            extra=log_data
        )
