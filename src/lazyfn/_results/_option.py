from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The result of a single pull on an `Iter`: `Some(value)` or `NONE` once the sequence is exhausted.

    Unlike a bare `None`, `NONE` can never be confused with a stored value, so `Some(None)` is a legitimate item.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> it = lf.Iter.over([None])
        >>> it.next().is_some()
        True
        >>> it.next().is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([]).next().is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Some("car").unwrap()
        'car'
        >>> lf.NONE.unwrap()
        Traceback (most recent call last):
            ...
        lazyfn._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with **msg** if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.NONE.expect("iterator is empty")
        Traceback (most recent call last):
            ...
        lazyfn._results._option.OptionUnwrapError: iterator is empty (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([]).last().unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **f**."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Some("Hello, World!").map(len)
        Some(13)
        >>> lf.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls **f** with the contained value if `Some`, otherwise returns `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise the result of **f**.

        This is how `concat` falls through to its second operand.
        """
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant holding one pulled value."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant signalling exhaustion."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the end of a sequence."""
