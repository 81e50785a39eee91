# ABOUTME: Simple progress tracking using Rich's built-in capabilities
# ABOUTME: One spinner task that advances once per processed document

from typing import Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn


def create_document_progress(
    console: Console, total: int, initial_description: str = "📡 Fetching MCC/MNC pages..."
) -> tuple[Progress, Any]:
    """Create a progress display for a harvest run.

    Args:
        console: Rich console instance
        total: Number of documents the run will process
        initial_description: Initial progress description

    Returns:
        Tuple of (progress, task_id)
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )

    task_id = progress.add_task(initial_description, total=total)

    return progress, task_id
