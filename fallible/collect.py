"""Helpers for working with many Results at once."""

from collections.abc import Iterable

from fallible.result import Err, Ok, Result


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Turn an iterable of Results into a single Result.

    Stops at the first Err and returns it as-is; the rest of the iterable
    is not consumed.

    Args:
        results: Results to combine

    Returns:
        Ok with every value in order, or the first Err
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
    return Ok(values)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into (values, errors), both in input order."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)
    return values, errors


def from_optional[T, E](value: T | None, error: E) -> Result[T, E]:
    """Ok(value) unless value is None."""
    if value is None:
        return Err(error)
    return Ok(value)
