"""Centralized logging configuration.

Provides structured logging with console and optional file output.
Call setup_logging() once at application startup (API lifespan, build
scripts). Library code only ever calls logging.getLogger(__name__).

Usage:
    # At startup
    from vanillatemplates.utilities.logging import setup_logging
    setup_logging()

    # In any module (standard Python pattern)
    import logging
    logger = logging.getLogger(__name__)
    logger.info("[MODULE] Something happened: %s", value)

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    LOG_DIR: Directory for log files (default: none - console only)
    LOG_FORMAT: "text" or "json" (default: text)
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Track if logging has been configured
_configured = False


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Useful for log aggregation systems (ELK, Loki, etc.)
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_log_level() -> int:
    """Get log level from environment."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _get_formatter(use_json: bool = False) -> logging.Formatter:
    """Get the appropriate formatter."""
    if use_json:
        return JSONFormatter()

    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    use_json: bool | None = None,
) -> None:
    """Initialize the logging system.

    Safe to call multiple times (subsequent calls are no-ops).

    Args:
        log_level: Override LOG_LEVEL env var
        log_dir: Override LOG_DIR env var; file logging is off when neither is set
        use_json: Override LOG_FORMAT env var (True for JSON output)
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, (log_level or "").upper(), None) or _get_log_level()
    log_dir = log_dir or os.getenv("LOG_DIR")

    if use_json is None:
        use_json = os.getenv("LOG_FORMAT", "text").lower() == "json"

    formatter = _get_formatter(use_json)

    # === Console Handler ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers filter from here
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # === Rotating Log File (optional) ===
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / "vanillatemplates.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # === Quiet Noisy Loggers ===
    for name in ("uvicorn", "uvicorn.access", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    _configured = True

    from vanillatemplates.config import VERSION

    logger = logging.getLogger("vanillatemplates")
    logger.info("[STARTUP] Vanilla Templates %s", VERSION)
    logger.info("[STARTUP] Log level: %s", logging.getLevelName(level))
    logger.info("[STARTUP] Log file: %s", Path(log_dir) if log_dir else "disabled")
    logger.info("[STARTUP] Log format: %s", "JSON" if use_json else "text")
