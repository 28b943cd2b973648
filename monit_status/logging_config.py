"""
Centralized logging configuration for monit_status.

Implements file-based logging with rotation, a dedicated render log,
and structured logging for better observability.
"""
# mypy: ignore-errors

import logging
import logging.handlers
import sys
from pathlib import Path
import json
from datetime import datetime, timezone

RENDER_LOGGER = "monit_status.render"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON for better parsing."""
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        for extra in ("format_version", "service_count", "duration_ms", "client_ip"):
            if hasattr(record, extra):
                log_obj[extra] = getattr(record, extra)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


class HumanReadableFormatter(logging.Formatter):
    """Human-readable formatter for console and file logs."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False):
        """Initialize formatter with optional color support."""
        self.use_colors = use_colors
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format with optional colors for console output."""
        if self.use_colors and record.levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    log_dir: str = "/var/log/monit-status",
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    use_json: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 10,
) -> None:
    """
    Configure logging for monit_status.

    Args:
        log_dir: Directory for log files
        console_level: Console logging level
        file_level: File logging level
        use_json: Use JSON formatting for files
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    # Console goes to stderr; stdout carries rendered documents
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level))
    console_handler.setFormatter(HumanReadableFormatter(use_colors=sys.stderr.isatty()))
    root_logger.addHandler(console_handler)

    file_formatter = StructuredFormatter() if use_json else HumanReadableFormatter()

    main_handler = logging.handlers.RotatingFileHandler(
        log_path / "monit-status.log", maxBytes=max_bytes, backupCount=backup_count
    )
    main_handler.setLevel(getattr(logging, file_level))
    main_handler.setFormatter(file_formatter)
    root_logger.addHandler(main_handler)

    # Error-only log for monitoring
    error_handler = logging.handlers.RotatingFileHandler(
        log_path / "error.log", maxBytes=max_bytes, backupCount=backup_count
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_formatter)
    root_logger.addHandler(error_handler)

    # One line per rendered document
    render_logger = logging.getLogger(RENDER_LOGGER)
    render_handler = logging.handlers.RotatingFileHandler(
        log_path / "render.log", maxBytes=max_bytes, backupCount=backup_count
    )
    render_handler.setFormatter(file_formatter)
    render_logger.addHandler(render_handler)
    render_logger.setLevel(logging.DEBUG)
    render_logger.propagate = False

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info(
        f"Logging initialized - Console: {console_level}, File: {file_level}, "
        f"Directory: {log_dir}, JSON: {use_json}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (e.g., "monit_status.render")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_render_operation(
    version: int,
    services: int,
    groups: int,
    event: bool,
    size: int,
    duration_ms: float,
) -> None:
    """
    Log one rendered status document.

    Args:
        version: Format version rendered
        services: Number of services written
        groups: Number of service groups written
        event: Whether an event block was appended
        size: Document length in characters
        duration_ms: Render time
    """
    logger = logging.getLogger(RENDER_LOGGER)

    message = (
        f"Rendered status v{version}: {services} services, {groups} groups, "
        f"event={'yes' if event else 'no'}, {size} chars in {duration_ms:.2f}ms"
    )

    logger.debug(
        message,
        extra={"format_version": version, "service_count": services, "duration_ms": duration_ms},
    )
