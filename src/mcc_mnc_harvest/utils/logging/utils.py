# ABOUTME: Logger lookup, per-document context binding and step timing
# ABOUTME: Context is bound through structlog contextvars so nested module loggers inherit it

import functools
import inspect
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import structlog
from structlog.typing import FilteringBoundLogger

P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_LOGGER_NAME = "mcc_mnc_harvest"


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Return a structlog logger named after the calling module unless a name is given."""
    if name is None:
        caller = inspect.currentframe()
        if caller is not None and caller.f_back is not None:
            name = caller.f_back.f_globals.get("__name__")

    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


def generate_operation_id() -> str:
    """Short random id tying together the log lines of one harvest run."""
    return uuid.uuid4().hex[:8]


def _document_url(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str | None:
    if "url" in kwargs:
        return kwargs["url"]
    return next((arg for arg in args if isinstance(arg, str) and arg.startswith(("http://", "https://"))), None)


def log_document_step(step_name: str) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Time an async per-document step and log its completion or failure.

    The document URL is taken from a ``url`` keyword or the first positional
    argument that looks like an http(s) URL. Exceptions are logged and re-raised.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        step_logger = get_logger(func.__module__)

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = step_logger.bind(step=step_name, url=_document_url(args, kwargs))
            bound.debug("Step started")
            started = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                bound.warning(
                    "Step failed",
                    duration_seconds=round(time.perf_counter() - started, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            bound.info("Step completed", duration_seconds=round(time.perf_counter() - started, 3))
            return result

        return wrapper

    return decorator


class LogContext:
    """Bind key/value context for the duration of a ``with`` block.

    The values are pushed into structlog's contextvars, so every logger used
    inside the block carries them until the block exits.
    """

    def __init__(self, logger: FilteringBoundLogger, **context: Any):
        self.logger = logger
        self.context = context
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> FilteringBoundLogger:
        self._tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)
        structlog.contextvars.reset_contextvars(**self._tokens)


def with_document_context(url: str, globals_only: bool = False) -> LogContext:
    """Context for everything logged while one page is fetched and walked."""
    return LogContext(get_logger(), url=url, globals_only=globals_only)


def with_pipeline_context(pipeline_name: str, **context: Any) -> LogContext:
    """Context for a whole harvest run, tagged with a fresh operation id.

    Args:
        pipeline_name: Name recorded under the ``pipeline`` key
        **context: Extra key/value pairs to bind

    Returns:
        LogContext manager
    """
    return LogContext(get_logger(), pipeline=pipeline_name, operation_id=generate_operation_id(), **context)
