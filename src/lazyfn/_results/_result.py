from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome of a fallible operation, such as `Iter.try_clone()`."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with **msg** and the error if the result is Err.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def numbers():
        ...     yield 1
        >>> lf.Iter.from_generator(numbers()).try_clone().expect("need a replayable source")
        Traceback (most recent call last):
            ...
        lazyfn._results._result.ResultUnwrapError: need a replayable source: cannot clone generator iterator; try .to_array() and iterate over it

        ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default."""
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained Ok value or computes it from the error with **f**.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def letters():
        ...     yield from "ab"
        >>> it = lf.Iter.from_generator(letters())
        >>> it.try_clone().unwrap_or_else(lambda _: lf.Iter.over(it.to_array())).to_array()
        ['a', 'b']

        ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a Result[T, E] to Result[U, E] by applying **f** to a contained Ok value, leaving Err untouched."""
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def ok(self) -> Option[T]:
        """Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE."""
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
