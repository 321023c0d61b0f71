"""Logging taps for Results.

These observe a Result and hand it back untouched, so they can sit in the
middle of a chain without changing its outcome.
"""

from collections.abc import Callable
from typing import Any

import structlog

from fallible.logging_config import get_logger
from fallible.result import Err, Ok, Result

log = get_logger(__name__)


def log_result[T, E](
    result: Result[T, E],
    event: str,
    *,
    logger: structlog.stdlib.BoundLogger | None = None,
    **context: Any,
) -> Result[T, E]:
    """Log the outcome of a Result and return it unchanged.

    Ok is logged at debug level, Err at warning level.

    Args:
        result: Result to observe
        event: structlog event name (e.g. "config_parsed")
        logger: Logger to use (default: this module's logger)
        **context: Extra key/values bound onto the event

    Returns:
        The same Result instance
    """
    logger = logger or log
    match result:
        case Ok(value):
            logger.debug(event, outcome="ok", value=value, **context)
        case Err(error):
            logger.warning(event, outcome="err", error=error, **context)
    return result


def logged[T, E](
    event: str, **context: Any
) -> Callable[[Result[T, E]], Result[T, E]]:
    """Build a one-argument tap around log_result.

    Useful when a pipeline of Result-returning steps is built as a list of
    callables, e.g. ``[parse, logged("parsed"), validate]``.
    """

    def tap(result: Result[T, E]) -> Result[T, E]:
        return log_result(result, event, **context)

    return tap
