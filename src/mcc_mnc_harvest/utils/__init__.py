# ABOUTME: Infrastructure shared by the harvest layers
# ABOUTME: Structured logging, progress bars and rich tables for the CLI

"""
Utils Layer: logging and terminal output

- logging: loguru sinks, structlog loggers, per-document context, progress bars
- rich_tables: outcome, summary and logging-status tables

Used by every other layer; depends on none of them at import time.
"""

from . import logging

__all__ = [
    "logging",
]
