import logging
from typing import Callable, Iterable, List, Tuple, Type

from twotrack.defines import EXCEPTIONS, Outcome
from twotrack.result import ContractViolationError, E, Result, T

logger = logging.getLogger(__name__)


def format_exception(exception: Exception) -> str:
    return repr(exception)


def attempt(
    fn: Callable[..., T],
    *args,
    exceptions: Tuple[Type[Exception], ...] = EXCEPTIONS,
    **kwargs,
) -> Outcome:
    """
    Call fn and capture any of exceptions as a Failure of the formatted exception.
    Other exceptions propagate, as do contract violations raised inside fn.
    fn returning None is itself a contract violation.
    """
    try:
        value = fn(*args, **kwargs)
    except ContractViolationError:
        raise
    except exceptions as e:
        logger.debug("%s failed: %r", getattr(fn, "__name__", fn), e)
        return Outcome.Error(format_exception(e))
    return Outcome.Ok(value)


def sequence(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """All of the success values in order, or the first error"""
    values = []
    for result in results:
        if result.is_error():
            return result.coerce()
        values.append(result.unwrap())
    return Result.Ok(values)


def partition(results: Iterable[Result[T, E]]) -> Tuple[List[T], List[E]]:
    values, errors = [], []
    for result in results:
        if result.is_error():
            errors.append(result.error())
        else:
            values.append(result.unwrap())
    return values, errors
