from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Final

import cytoolz as cz

from .._core import deprecated
from .._errors import (
    ERR_ITERABLE_EXPECTED,
    ERR_ITERATOR_EXPECTED,
    ERR_ZERO_STEP,
    assert_callable,
    assert_not_none,
    assert_number,
)
from .._fn import pack
from ._aggregations import BaseAgg
from ._filters import BaseFilter
from ._maps import BaseMap

_MISSING: Final = object()


def _check_step(step: float) -> None:
    assert_number(step, "step")
    if step == 0:
        raise ValueError(ERR_ZERO_STEP)


class Iter[T](BaseFilter[T], BaseMap[T], BaseAgg[T]):
    """A lazy iterator, pulled one step at a time.

    `Iter` is abstract: each source and combinator is a concrete subclass, built through the static constructors
    below or the combinator methods.

    Nothing is computed until a value is pulled, with `next()`, a `for` loop or a terminal method like
    `to_array()`.

    Every `Iter` is also a regular Python iterator.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> pipeline = lf.Iter.counter().filter(lambda x: x % 3 == 0).map(lambda x: x * x).take(3)
    >>> pipeline
    Take(Map(Filter(Counter(1, 1))))
    >>> pipeline.to_array()
    [9, 36, 81]
    >>> for x in lf.Iter.over("ab"):
    ...     print(x)
    a
    b

    ```
    """

    __slots__ = ()

    @staticmethod
    def over[U](iterable: Iterable[U]) -> Iter[U]:
        """Create an `Iter` over any Python iterable.

        - An `Iter` is returned unchanged.
        - A Python iterator (generator, file, `map` object...) is driven lazily, like `Iter.from_generator()`.
        - Any other iterable is copied into a tuple when the `Iter` is created, so later changes to it are not seen.

        Args:
            iterable (Iterable[U]): The data to iterate over.

        Returns:
            Iter[U]: An iterator over the data.

        Raises:
            TypeError: If **iterable** is not iterable.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> data = [1, 2]
        >>> it = lf.Iter.over(data)
        >>> data.append(3)
        >>> it.to_array()
        [1, 2]
        >>> lf.Iter.over(x * 2 for x in (1, 2))
        FromGenerator()
        >>> lf.Iter.over(5)
        Traceback (most recent call last):
            ...
        TypeError: param iterable expected iterable, got: 5

        ```
        """
        from ._sources import FromGenerator, Over

        if isinstance(iterable, Iter):
            return iterable
        if isinstance(iterable, Iterator):
            return FromGenerator(iterable)
        if not cz.itertoolz.isiterable(iterable):
            raise TypeError(ERR_ITERABLE_EXPECTED.format("iterable", iterable))
        return Over(tuple(iterable))

    @staticmethod
    def counter(start: float = 1, step: float = 1) -> Iter[float]:
        """Create an unbounded iterator yielding `start`, `start + step`, `start + 2 * step`...

        Args:
            start (float): First value. Defaults to 1.
            step (float): Increment, which must not be zero. Defaults to 1.

        Returns:
            Iter[float]: The infinite counter.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.counter().take(5).to_array()
        [1, 2, 3, 4, 5]
        >>> lf.Iter.counter(0, -0.5).take(3).to_array()
        [0, -0.5, -1.0]

        ```
        """
        from ._sources import Counter

        assert_number(start, "start")
        _check_step(step)
        return Counter(start, step)

    @staticmethod
    def range(start: float, stop: Any = _MISSING, step: float = 1) -> Iter[float]:  # noqa: ANN401
        """Create an iterator over an inclusive numeric range.

        Called with a single bound, it is the stop and the range starts at 1.

        The range ascends while the current value is not greater than **stop** for a positive **step**, and
        descends while it is not lower than **stop** for a negative one.

        Args:
            start (float): First value, or the stop if it is the only argument.
            stop (float): Last value, included if the steps land on it.
            step (float): Increment, which must not be zero. Defaults to 1.

        Returns:
            Iter[float]: The range.

        Raises:
            TypeError: If a bound is `None` or not a number.
            ValueError: If **step** is zero.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.range(3).to_array()
        [1, 2, 3]
        >>> lf.Iter.range(2, 10, 3).to_array()
        [2, 5, 8]
        >>> lf.Iter.range(3, 1, -1).to_array()
        [3, 2, 1]
        >>> lf.Iter.range(1, 3, -1).to_array()
        []
        >>> lf.Iter.range(1, 3, 0)
        Traceback (most recent call last):
            ...
        ValueError: param step must not be zero

        ```
        """
        from ._sources import Range

        if stop is _MISSING:
            start, stop = 1, start
        assert_number(start, "start")
        assert_number(stop, "stop")
        _check_step(step)
        return Range(start, stop, step)

    @staticmethod
    def from_generator[U](gen: Iterator[U]) -> Iter[U]:
        """Drive an external Python iterator or generator, one `next()` call per pull.

        Exceptions raised by the generator propagate unchanged.

        The resulting `Iter` cannot be cloned, since a generator's traversal cannot be replayed.

        Args:
            gen (Iterator[U]): The iterator to drive.

        Returns:
            Iter[U]: An iterator over the generated values.

        Raises:
            TypeError: If **gen** is not an iterator.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def squares():
        ...     n = 1
        ...     while True:
        ...         yield n * n
        ...         n += 1
        >>> lf.Iter.from_generator(squares()).take(4).to_array()
        [1, 4, 9, 16]
        >>> lf.Iter.from_generator(squares()).clone()
        Traceback (most recent call last):
            ...
        lazyfn._errors.NotClonableError: cannot clone generator iterator; try .to_array() and iterate over it

        ```
        """
        from ._sources import FromGenerator

        assert_not_none(gen, "gen")
        if not isinstance(gen, Iterator):
            raise TypeError(ERR_ITERATOR_EXPECTED.format("gen", gen))
        return FromGenerator(gen)

    @staticmethod
    @deprecated("Iter.from_coroutine is deprecated, use Iter.from_generator instead")
    def from_coroutine[U](gen: Iterator[U]) -> Iter[U]:
        return Iter.from_generator(gen)

    @staticmethod
    def from_fn(func: Callable[[Any, Any], Any], state: Any = None, var: Any = None) -> Iter[Any]:  # noqa: ANN401
        """Create an iterator from a stateless step function.

        Each pull calls `func(state, var)`:

        - `None` or an empty tuple ends the iteration.
        - A tuple is a pull of several values.
        - Any other object is a pull of one value.

        The first value of each pull becomes the **var** of the next call.

        Args:
            func (Callable[[Any, Any], Any]): The step function.
            state (Any): Invariant state, passed unchanged to every call.
            var (Any): Control variable of the first call.

        Returns:
            Iter[Any]: An iterator over the produced values.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def doubling(limit, var):
        ...     return None if var >= limit else var * 2
        >>> lf.Iter.from_fn(doubling, 20, 1).to_array()
        [2, 4, 8, 16, 32]
        >>> def indexed(seq, idx):
        ...     return () if idx >= len(seq) else (idx + 1, seq[idx])
        >>> lf.Iter.from_fn(indexed, "ab", 0).to_array()
        [(1, 'a'), (2, 'b')]

        ```
        """
        from ._sources import FromFunc

        assert_callable(func, "func")
        return FromFunc(func, state, var)

    @staticmethod
    def packed_from(func: Callable[[Any, Any], Any], state: Any = None, var: Any = None) -> Iter[tuple[Any, ...]]:  # noqa: ANN401
        """Like `Iter.from_fn()`, but the values of each pull are packed into one tuple.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> def pairs(limit, var):
        ...     return None if var >= limit else (var + 1, -var)
        >>> lf.Iter.packed_from(pairs, 2, 0).map(lambda pair: pair[0] + pair[1]).to_array()
        [1, 1]

        ```
        """
        return Iter.from_fn(func, state, var).map(pack)
