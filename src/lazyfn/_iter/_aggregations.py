from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from typing import Any, Final

import more_itertools as mit

from .._core import deprecated
from .._errors import EmptyIterError, assert_callable
from .._fn import truthy
from .._results import NONE, Option, Some
from ._base import BaseIter, Values, collapse

_MISSING: Final = object()


class BaseAgg[T](BaseIter[T]):
    """Terminal operations, driving the iterator until it is exhausted or a result is known."""

    __slots__ = ()

    def _drain(self) -> Iterator[Values]:
        while True:
            values = self.next_values()
            if values.is_none():
                return
            yield values.unwrap()

    def foreach(self, func: Callable[..., object]) -> None:
        """Call **func** with the values of every pull, discarding its results.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over("ab").enumerate().foreach(lambda idx, letter: print(idx, letter))
        1 a
        2 b

        ```
        """
        assert_callable(func, "func")
        for values in self._drain():
            func(*values)

    def reduce[U](self, func: Callable[..., U], initial: Any = _MISSING) -> U:  # noqa: ANN401
        """Fold the iterator from the left: `acc = func(acc, *values)` for each pull.

        Without **initial**, the first item seeds the accumulator.

        Args:
            func (Callable[..., U]): Function combining the accumulator with the values of a pull.
            initial (Any): Starting accumulator, returned as is for an empty iterator.

        Returns:
            U: The final accumulator.

        Raises:
            EmptyIterError: If the iterator is empty and no **initial** was given.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.range(4).reduce(lambda acc, x: acc + x)
        10
        >>> lf.Iter.over([]).reduce(lambda acc, x: acc + x, 0)
        0
        >>> lf.Iter.over("abc").enumerate().reduce(lambda acc, idx, letter: acc + letter * idx, "")
        'abbccc'
        >>> lf.Iter.over([]).reduce(lambda acc, x: acc + x)
        Traceback (most recent call last):
            ...
        lazyfn._errors.EmptyIterError: reduce() of empty iterator with no initial value

        ```
        """
        assert_callable(func, "func")
        if initial is _MISSING:
            first = self.next()
            if first.is_none():
                msg = "reduce() of empty iterator with no initial value"
                raise EmptyIterError(msg)
            acc = first.unwrap()
        else:
            acc = initial
        for values in self._drain():
            acc = func(acc, *values)
        return acc

    def any(self, predicate: Callable[..., object] | None = None) -> bool:
        """Tell whether at least one item satisfies **predicate**, stopping at the first one that does.

        Without a predicate, every item except `False` and `None` counts, so `0` and `""` do too.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([None, 0]).any()
        True
        >>> lf.Iter.over([None, False]).any()
        False
        >>> lf.Iter.over([1, 3]).any(lambda x: x % 2 == 0)
        False
        >>> lf.Iter.over([]).any()
        False

        ```
        """
        if predicate is None:
            predicate = truthy
        assert_callable(predicate, "predicate")
        return any(predicate(*values) for values in self._drain())

    def all(self, predicate: Callable[..., object] | None = None) -> bool:
        """Tell whether every item satisfies **predicate**, stopping at the first one that does not.

        Without a predicate, every item except `False` and `None` counts.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([0, ""]).all()
        True
        >>> lf.Iter.counter().all(lambda x: x < 10)
        False
        >>> lf.Iter.over([]).all()
        True

        ```
        """
        if predicate is None:
            predicate = truthy
        assert_callable(predicate, "predicate")
        return all(predicate(*values) for values in self._drain())

    def count(self, predicate: Callable[..., object] | None = None) -> int:
        """Count the items, or only those satisfying **predicate**.

        The iterator is fully consumed.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over("hello").count()
        5
        >>> lf.Iter.range(10).count(lambda x: x % 3 == 0)
        3

        ```
        """
        if predicate is None:
            return mit.ilen(self._drain())
        assert_callable(predicate, "predicate")
        return mit.quantify(self._drain(), lambda values: bool(predicate(*values)))

    def last(self) -> Option[T]:
        """Consume the iterator and return its last item.

        Returns:
            Option[T]: `Some` of the last item, `NONE` if there was none.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2, 3]).last()
        Some(3)
        >>> lf.Iter.over([]).last()
        NONE

        ```
        """
        last: Option[Values] = NONE
        for values in self._drain():
            last = Some(values)
        return last.map(collapse)

    def to_array(self) -> list[T]:
        """Collect the remaining items into a new list.

        Multi-value pulls are collected as tuples.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.range(1, 3).zip("xyz").to_array()
        [(1, 'x'), (2, 'y'), (3, 'z')]

        ```
        """
        return list(self)

    def to_generator(self) -> Generator[T, None, None]:
        """Return a Python generator pulling from this iterator on demand.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> gen = lf.Iter.counter(10, 10).to_generator()
        >>> next(gen), next(gen)
        (10, 20)

        ```
        """
        yield from self

    @deprecated("Iter.to_coroutine is deprecated, use Iter.to_generator instead")
    def to_coroutine(self) -> Generator[T, None, None]:
        return self.to_generator()
