# ABOUTME: Loguru sink setup with structlog call sites rendered into those sinks
# ABOUTME: Interactive runs log to files under logs/, production runs log JSON lines to stdout

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

ENV_LOG_MODE = "MCC_MNC_HARVEST_LOG_MODE"
LOG_DIR = Path("logs")
LOG_FILES = {
    "main": LOG_DIR / "mcc-mnc-harvest.log",
    "json": LOG_DIR / "mcc-mnc-harvest.json",
    "errors": LOG_DIR / "errors.log",
}

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
JSON_FORMAT = "{time} | {level} | {message}"

# Held at WARNING so request chatter stays out of the CLI
QUIET_LOGGERS = ["httpx", "httpcore", "urllib3", "asyncio", "charset_normalizer"]


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Mode from MCC_MNC_HARVEST_LOG_MODE, else interactive only when stdout is a terminal."""
    requested = (os.getenv(ENV_LOG_MODE) or "").lower()
    if requested in (LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION):
        return requested

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def quiet_third_party_loggers() -> None:
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def _loguru_factory(*args: Any) -> Any:
    # structlog passes the rendered line to logger.<level>(), which loguru takes as the message
    return logger


def setup_structlog(numeric_level: int) -> None:
    """Render structlog events as key=value lines and hand them to loguru."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_loguru_factory,
        cache_logger_on_first_use=False,
    )


def _add_file_sinks(log_level: str, log_file: str | None) -> None:
    logger.add(log_file or LOG_FILES["main"], level=log_level, format=TEXT_FORMAT, rotation="10 MB", retention="7 days")
    logger.add(
        LOG_FILES["json"], level=log_level, format=JSON_FORMAT, serialize=True, rotation="10 MB", retention="7 days"
    )
    logger.add(LOG_FILES["errors"], level="ERROR", format=TEXT_FORMAT, backtrace=True, diagnose=True)


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Replace all loguru sinks according to the logging mode.

    Args:
        mode: LoggingMode value, detected when None
        log_level: DEBUG, INFO, WARNING or ERROR
        log_file: Path for the human-readable log instead of logs/mcc-mnc-harvest.log
    """
    mode = mode or detect_logging_mode()
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    quiet_third_party_loggers()
    setup_structlog(numeric_level)
    logging.getLogger().setLevel(numeric_level)
    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        try:
            LOG_DIR.mkdir(exist_ok=True)
        except OSError:
            # Read-only working directory
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stdout, level=log_level, format=JSON_FORMAT, serialize=True)
    else:
        _add_file_sinks(log_level, log_file)


def get_logging_status() -> dict[str, Any]:
    """Describe where logs would go for the detected mode."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {key: str(path) if interactive else None for key, path in LOG_FILES.items()},
        "third_party_suppressed": list(QUIET_LOGGERS),
    }
