# ABOUTME: Logging configuration, context binding and progress display
# ABOUTME: Provides structured logging for the harvest pipeline and the CLI

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .progress import create_document_progress
from .utils import get_logger, log_document_step, with_document_context, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Progress
    "create_document_progress",
    # Utilities
    "get_logger",
    "log_document_step",
    "with_document_context",
    "with_pipeline_context",
]
