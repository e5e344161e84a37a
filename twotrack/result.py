"""
Python implementation of rust's "Result" type.

A Result is either a Success holding a value or a Failure holding an error,
and is returned by functions that may not always succeed instead of raising.
One model for this type is an Optional that is "present" or "error" rather than
"present" or "empty", where the error explains why there is no value.

It's common to use a descriptive error type, like a dataclass with a line and
column for a parsing error, but a str works fine too.

Example:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Result.Error(f"{raw!r} is not a port")
        return Result.Ok(int(raw))

    port = parse_port("8080").map_result(lambda p: p + 1).or_else_raise(ValueError)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")  # success type variable
E = TypeVar("E")  # error type variable
U = TypeVar("U")  # transformed success type variable
F = TypeVar("F")  # transformed error type variable

COERCE_SUCCESS_MESSAGE = "Cannot coerce a success-state result"


class ContractViolationError(Exception):
    """Raise when a Result is built or used in a way its caller promised it wouldn't be"""

    pass


class AbsentPayloadError(ContractViolationError, ValueError):
    """Raise when a Result is constructed with None"""

    pass


class IllegalStateError(ContractViolationError, RuntimeError):
    """Raise when an operation is called on the wrong variant of a Result"""

    pass


class ResultError(Exception):
    """
    Raised by Result.or_else_raise when no exception constructor is given.
    The message is the str of the error, which is also kept on .error.
    """

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


class Result(ABC, Generic[T, E]):
    """
    A success value or an error value, never both and never neither.
    Build one with Result.Ok or Result.Error, which also work on aliases:

    ParsedPort = Result[int, str]
    ParsedPort.Error("no port")
    """

    @classmethod
    def Ok(cls, value: T) -> "Result[T, E]":
        return Success(value)

    @classmethod
    def Error(cls, error: E) -> "Result[T, E]":
        return Failure(error)

    @abstractmethod
    def is_error(self) -> bool:
        """Whether this is a Failure"""
        pass

    @abstractmethod
    def result(self) -> Optional[T]:
        """The success value, or None for a Failure"""
        pass

    @abstractmethod
    def error(self) -> Optional[E]:
        """The error value, or None for a Success"""
        pass

    @abstractmethod
    def map_result(self, fn: Callable[[T], U]) -> "Result[U, E]":
        """
        Transform the success value with fn, or pass the error through untouched.
        fn is only called for a Success.
        """
        pass

    @abstractmethod
    def map_error(self, fn: Callable[[E], F]) -> "Result[T, F]":
        """
        Transform the error value with fn, or pass the success value through untouched.
        fn is only called for a Failure.
        """
        pass

    @abstractmethod
    def flat_map_result(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """
        For a Success, return the Result fn produces from the success value.
        fn may turn a Success into a Failure. A Failure passes its error through.
        """
        pass

    @abstractmethod
    def flat_map_error(self, fn: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        """
        For a Failure, return the Result fn produces from the error value.
        fn may recover a Failure into a Success. A Success passes its value through.
        """
        pass

    def map(
        self,
        result_fn: Callable[[T], U],
        error_fn: Callable[[E], F],
    ) -> "Result[U, F]":
        """Transform a Success with result_fn or a Failure with error_fn"""
        return self.map_result(result_fn).map_error(error_fn)

    @abstractmethod
    def flat_map(
        self,
        result_fn: Callable[[T], "Result[U, F]"],
        error_fn: Callable[[E], "Result[U, F]"],
    ) -> "Result[U, F]":
        """
        Return result_fn(value) for a Success or error_fn(error) for a Failure.
        Either function may switch tracks.
        """
        pass

    @abstractmethod
    def or_else_raise(
        self, exception_fn: Callable[[E], BaseException] = None
    ) -> T:
        """
        Return the success value, or raise the exception exception_fn builds from the error.

        Without exception_fn a ResultError with the str of the error is raised.
        That is handy in tests, but the message is all a caller gets,
        so prefer passing an exception constructor.
        """
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """
        Return the success value, or raise an IllegalStateError.

        Only call this once the caller knows the Result is a Success, e.g.

        maybe_port = parse_port(raw)
        if maybe_port.is_error():
            return maybe_port.coerce()
        port = maybe_port.unwrap()

        When the state isn't known, use or_else_raise instead.
        """
        pass

    @abstractmethod
    def coerce(self) -> "Result[U, E]":
        """
        Return a Failure with the same error for use where a different success type is expected.
        Raises an IllegalStateError on a Success.

        Useful for returning an inner function's error from an outer function:

        def parse_config(raw: str) -> Result[Config, str]:
            maybe_port = parse_port(raw)
            if maybe_port.is_error():
                return maybe_port.coerce()
            ...
        """
        pass


@dataclass(frozen=True)
class Success(Result[T, E]):
    value: T

    def __post_init__(self):
        if self.value is None:
            raise AbsentPayloadError("A Success cannot hold None.")

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def is_error(self) -> bool:
        return False

    def result(self) -> Optional[T]:
        return self.value

    def error(self) -> Optional[E]:
        return None

    def map_result(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Success(self.value)

    def flat_map_result(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def flat_map_error(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return Success(self.value)

    def flat_map(
        self,
        result_fn: Callable[[T], Result[U, F]],
        error_fn: Callable[[E], Result[U, F]],
    ) -> Result[U, F]:
        return result_fn(self.value)

    def or_else_raise(self, exception_fn: Callable[[E], BaseException] = None) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def coerce(self) -> Result[U, E]:
        raise IllegalStateError(COERCE_SUCCESS_MESSAGE)


@dataclass(frozen=True)
class Failure(Result[T, E]):
    err: E

    def __post_init__(self):
        if self.err is None:
            raise AbsentPayloadError("A Failure cannot hold None.")

    def __repr__(self) -> str:
        return f"Failure({self.err!r})"

    def is_error(self) -> bool:
        return True

    def result(self) -> Optional[T]:
        return None

    def error(self) -> Optional[E]:
        return self.err

    def map_result(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Failure(self.err)

    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Failure(fn(self.err))

    def flat_map_result(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Failure(self.err)

    def flat_map_error(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.err)

    def flat_map(
        self,
        result_fn: Callable[[T], Result[U, F]],
        error_fn: Callable[[E], Result[U, F]],
    ) -> Result[U, F]:
        return error_fn(self.err)

    def or_else_raise(self, exception_fn: Callable[[E], BaseException] = None) -> T:
        exception_fn = exception_fn or ResultError
        raise exception_fn(self.err)

    def unwrap(self) -> T:
        raise IllegalStateError(str(self.err))

    def coerce(self) -> Result[U, E]:
        return Failure(self.err)


def ok(value: T) -> Result[T, E]:
    return Result.Ok(value)


def error(err: E) -> Result[T, E]:
    return Result.Error(err)
