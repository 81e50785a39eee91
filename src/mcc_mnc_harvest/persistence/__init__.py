# ABOUTME: Output layer for harvested datasets
# ABOUTME: Pipeline Stage 3: records + status codes → JSON files

from .writer import dumps, write_outputs

__all__ = [
    "dumps",
    "write_outputs",
]
