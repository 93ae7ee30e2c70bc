from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .._errors import assert_callable, assert_integer, assert_positive_integer
from .._fn import negate
from ._base import BaseIter

if TYPE_CHECKING:
    from ._main import Iter


class BaseFilter[T](BaseIter[T]):
    """Combinators selecting which upstream values are passed through."""

    __slots__ = ()

    def filter(self, predicate: Callable[..., object]) -> Iter[T]:
        """Creates an `Iter` which uses a closure to determine if an element should be yielded.

        The values of each pull are passed to **predicate** as positional arguments.

        Args:
            predicate (Callable[..., object]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterator of the items that satisfy the predicate, in their original order.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def is_odd(x: int) -> bool:
        ...     return x % 2 == 1
        >>> lf.Iter.over([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]).filter(is_odd).to_array()
        [1, 3, 5, 7, 9]
        >>> lf.Iter.over("ab").enumerate().filter(lambda idx, letter: letter == "b").to_array()
        [(2, 'b')]

        ```
        """
        from ._adapters import Filter

        assert_callable(predicate, "predicate")
        return Filter(self, predicate)

    def take(self, n: int) -> Iter[T]:
        """Creates an iterator that yields the first **n** elements, or fewer if the underlying iterator ends sooner.

        The upstream is never pulled more than **n** times. A negative **n** behaves like zero.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator of the first **n** items.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.counter().take(5).to_array()
        [1, 2, 3, 4, 5]
        >>> lf.Iter.over([1, 2, 3]).take(5).to_array()
        [1, 2, 3]

        ```
        """
        from ._adapters import Take

        assert_integer(n, "n")
        return Take(self, n)

    def take_while(self, predicate: Callable[..., object]) -> Iter[T]:
        """Take items while **predicate** holds.

        The first item failing the predicate is still yielded: the iterator can only notice that the predicate
        stopped holding once it has pulled that item, and completes on the following pull.

        Args:
            predicate (Callable[..., object]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterator of the items taken while the predicate is true, plus the first failing one.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2, 0, 3]).take_while(lambda x: x > 0).to_array()
        [1, 2, 0]

        ```
        """
        from ._adapters import TakeWhile

        assert_callable(predicate, "predicate")
        return TakeWhile(self, predicate)

    def take_until(self, predicate: Callable[..., object]) -> Iter[T]:
        """Take items until **predicate** holds, that item included.

        Equivalent to `take_while(negate(predicate))`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.counter().take_until(lambda x: x * x > 10).to_array()
        [1, 2, 3, 4]

        ```
        """
        assert_callable(predicate, "predicate")
        return self.take_while(negate(predicate))

    def take_last(self, n: int) -> Iter[T]:
        """Yield the last **n** items of the iterator.

        On first demand the whole upstream is drained, keeping a sliding window of the last **n** items, which is
        then replayed in order. The upstream must therefore be finite.

        Args:
            n (int): Size of the window. Zero or negative gives an empty iterator.

        Returns:
            Iter[T]: An iterator over the last **n** items.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2, 3]).take_last(2).to_array()
        [2, 3]
        >>> lf.Iter.over([1]).take_last(5).to_array()
        [1]

        ```
        """
        from ._adapters import TakeLast

        assert_integer(n, "n")
        return TakeLast(self, n)

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip. A negative **n** skips nothing.

        Returns:
            Iter[T]: An iterator of the items after the first **n**.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over((1, 2, 3)).skip(1).to_array()
        [2, 3]

        ```
        """
        from ._adapters import Skip

        assert_integer(n, "n")
        return Skip(self, n)

    def skip_while(self, predicate: Callable[..., object]) -> Iter[T]:
        """Drop items while **predicate** holds.

        Once an item fails the predicate, it and every following item are passed through without further tests.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over((1, 2, 0, 4)).skip_while(lambda x: x > 0).to_array()
        [0, 4]

        ```
        """
        from ._adapters import SkipWhile

        assert_callable(predicate, "predicate")
        return SkipWhile(self, predicate)

    def skip_until(self, predicate: Callable[..., object]) -> Iter[T]:
        """Drop items until **predicate** holds.

        Equivalent to `skip_while(negate(predicate))`.
        """
        assert_callable(predicate, "predicate")
        return self.skip_while(negate(predicate))

    def every(self, n: int) -> Iter[T]:
        """Yield the first item, then every **n**-th item after it.

        Args:
            n (int): Step between yielded items, strictly positive.

        Returns:
            Iter[T]: An iterator over every **n**-th item.

        Raises:
            TypeError: If **n** is not an integer.
            ValueError: If **n** is not positive.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over("abcde").every(2).to_array()
        ['a', 'c', 'e']
        >>> lf.Iter.over("abcde").every(0)
        Traceback (most recent call last):
            ...
        ValueError: param n expected a positive integer, got: 0

        ```
        """
        from ._adapters import Every

        assert_positive_integer(n, "n")
        return Every(self, n)
