"""Iterators producing values from outside data: collections, counters, generators and step functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .._core import get_config
from .._errors import ERR_FUNCTION_CLONE, ERR_GENERATOR_CLONE, NotClonableError
from .._results import NONE, Option, Some
from ._base import Values
from ._main import Iter


class Over[T](Iter[T]):
    """Iterate over an immutable snapshot of a collection."""

    __slots__ = ("_cursor", "_data")

    def __init__(self, data: tuple[T, ...], cursor: int = 0) -> None:
        super().__init__()
        self._data = data
        self._cursor = cursor

    def _repr_args(self) -> tuple[str, ...]:
        if not self._data:
            return ()
        return (get_config().iter_repr(self._data),)

    def _pull(self) -> Option[Values]:
        if self._cursor >= len(self._data):
            return NONE
        value = self._data[self._cursor]
        self._cursor += 1
        return Some((value,))

    def _duplicate(self) -> Over[T]:
        return Over(self._data, self._cursor)


class Counter(Iter[float]):
    __slots__ = ("_current", "_step")

    def __init__(self, start: float, step: float) -> None:
        super().__init__()
        self._current = start
        self._step = step

    def _repr_args(self) -> tuple[str, ...]:
        return (repr(self._current), repr(self._step))

    def _pull(self) -> Option[Values]:
        value = self._current
        self._current += self._step
        return Some((value,))

    def _duplicate(self) -> Counter:
        return Counter(self._current, self._step)


class Range(Iter[float]):
    __slots__ = ("_current", "_step", "_stop")

    def __init__(self, current: float, stop: float, step: float) -> None:
        super().__init__()
        self._current = current
        self._stop = stop
        self._step = step

    def _repr_args(self) -> tuple[str, ...]:
        return (repr(self._current), repr(self._stop), repr(self._step))

    def _pull(self) -> Option[Values]:
        value = self._current
        if (self._step > 0 and value > self._stop) or (self._step < 0 and value < self._stop):
            return NONE
        self._current += self._step
        return Some((value,))

    def _duplicate(self) -> Range:
        return Range(self._current, self._stop, self._step)


class FromGenerator[T](Iter[T]):
    """Drive an external Python iterator. Its traversal cannot be replayed, so it cannot be cloned."""

    __slots__ = ("_gen",)

    def __init__(self, gen: Iterator[T]) -> None:
        super().__init__()
        self._gen = gen

    def _pull(self) -> Option[Values]:
        try:
            return Some((next(self._gen),))
        except StopIteration:
            return NONE

    def _duplicate(self) -> Iter[T]:
        raise NotClonableError(ERR_GENERATOR_CLONE)


class FromFunc(Iter[Any]):
    """Call a step function `func(state, var)` on each pull.

    A returned `None` or `()` ends the iteration, a tuple is a pull of several values, anything else a pull of one
    value. The first value is fed back as the next **var**.
    """

    __slots__ = ("_func", "_state", "_var")

    def __init__(self, func: Callable[[Any, Any], Any], state: Any, var: Any) -> None:  # noqa: ANN401
        super().__init__()
        self._func = func
        self._state = state
        self._var = var

    def _pull(self) -> Option[Values]:
        match self._func(self._state, self._var):
            case None:
                return NONE
            case tuple() as values if not values:
                return NONE
            case tuple() as values:
                pass
            case value:
                values = (value,)
        self._var = values[0]
        return Some(values)

    def _duplicate(self) -> Iter[Any]:
        raise NotClonableError(ERR_FUNCTION_CLONE)
