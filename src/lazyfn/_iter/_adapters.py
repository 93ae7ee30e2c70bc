"""Iterators pulling from one or two upstream iterators.

Each `_duplicate()` clones the upstream(s) and copies the adapter's own traversal state, so a clone fails as a whole
as soon as one of its sources cannot be cloned.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

from .._results import NONE, Option, Some
from ._base import Values
from ._main import Iter


class _Adapter[T](Iter[T]):
    __slots__ = ("_upstream",)

    def __init__(self, upstream: Iter[Any]) -> None:
        super().__init__()
        self._upstream = upstream

    def _repr_args(self) -> tuple[str, ...]:
        return (repr(self._upstream),)


class Filter[T](_Adapter[T]):
    __slots__ = ("_predicate",)

    def __init__(self, upstream: Iter[T], predicate: Callable[..., object]) -> None:
        super().__init__(upstream)
        self._predicate = predicate

    def _pull(self) -> Option[Values]:
        while True:
            values = self._upstream.next_values()
            if values.is_none() or self._predicate(*values.unwrap()):
                return values

    def _duplicate(self) -> Filter[T]:
        return Filter(self._upstream.clone(), self._predicate)


class Map[T](_Adapter[T]):
    __slots__ = ("_func",)

    def __init__(self, upstream: Iter[Any], func: Callable[..., T]) -> None:
        super().__init__(upstream)
        self._func = func

    def _pull(self) -> Option[Values]:
        return self._upstream.next_values().map(lambda values: (self._func(*values),))

    def _duplicate(self) -> Map[T]:
        return Map(self._upstream.clone(), self._func)


class Take[T](_Adapter[T]):
    __slots__ = ("_remaining",)

    def __init__(self, upstream: Iter[T], remaining: int) -> None:
        super().__init__(upstream)
        self._remaining = remaining

    def _pull(self) -> Option[Values]:
        if self._remaining <= 0:
            return NONE
        self._remaining -= 1
        return self._upstream.next_values()

    def _duplicate(self) -> Take[T]:
        return Take(self._upstream.clone(), self._remaining)


class TakeWhile[T](_Adapter[T]):
    __slots__ = ("_done", "_predicate")

    def __init__(self, upstream: Iter[T], predicate: Callable[..., object], *, done: bool = False) -> None:
        super().__init__(upstream)
        self._predicate = predicate
        self._done = done

    def _pull(self) -> Option[Values]:
        if self._done:
            return NONE
        values = self._upstream.next_values()
        if values.is_some() and not self._predicate(*values.unwrap()):
            self._done = True
        return values

    def _duplicate(self) -> TakeWhile[T]:
        return TakeWhile(self._upstream.clone(), self._predicate, done=self._done)


class TakeLast[T](_Adapter[T]):
    """Replay the last values of the upstream, buffered in a bounded window on first demand."""

    __slots__ = ("_n", "_window")

    def __init__(self, upstream: Iter[T], n: int, window: deque[Values] | None = None) -> None:
        super().__init__(upstream)
        self._n = n
        self._window = window

    def _fill(self) -> deque[Values]:
        window: deque[Values] = deque(maxlen=max(self._n, 0))
        if self._n > 0:
            while (values := self._upstream.next_values()).is_some():
                window.append(values.unwrap())
        return window

    def _pull(self) -> Option[Values]:
        if self._window is None:
            self._window = self._fill()
        if not self._window:
            return NONE
        return Some(self._window.popleft())

    def _duplicate(self) -> TakeLast[T]:
        if self._window is not None:
            # The upstream is exhausted and latched, so it can be shared.
            return TakeLast(self._upstream, self._n, deque(self._window, maxlen=self._window.maxlen))
        return TakeLast(self._upstream.clone(), self._n)


class Skip[T](_Adapter[T]):
    __slots__ = ("_remaining",)

    def __init__(self, upstream: Iter[T], remaining: int) -> None:
        super().__init__(upstream)
        self._remaining = remaining

    def _pull(self) -> Option[Values]:
        while self._remaining > 0:
            self._remaining -= 1
            if self._upstream.next_values().is_none():
                return NONE
        return self._upstream.next_values()

    def _duplicate(self) -> Skip[T]:
        return Skip(self._upstream.clone(), self._remaining)


class SkipWhile[T](_Adapter[T]):
    __slots__ = ("_done", "_predicate")

    def __init__(self, upstream: Iter[T], predicate: Callable[..., object], *, done: bool = False) -> None:
        super().__init__(upstream)
        self._predicate = predicate
        self._done = done

    def _pull(self) -> Option[Values]:
        if self._done:
            return self._upstream.next_values()
        while True:
            values = self._upstream.next_values()
            if values.is_none() or not self._predicate(*values.unwrap()):
                self._done = True
                return values

    def _duplicate(self) -> SkipWhile[T]:
        return SkipWhile(self._upstream.clone(), self._predicate, done=self._done)


class Every[T](_Adapter[T]):
    __slots__ = ("_n", "_started")

    def __init__(self, upstream: Iter[T], n: int, *, started: bool = False) -> None:
        super().__init__(upstream)
        self._n = n
        self._started = started

    def _pull(self) -> Option[Values]:
        if self._started:
            for _ in range(self._n - 1):
                if self._upstream.next_values().is_none():
                    return NONE
        self._started = True
        return self._upstream.next_values()

    def _duplicate(self) -> Every[T]:
        return Every(self._upstream.clone(), self._n, started=self._started)


class Enumerate[T](_Adapter[tuple[int, T]]):
    __slots__ = ("_index",)

    def __init__(self, upstream: Iter[T], index: int = 0) -> None:
        super().__init__(upstream)
        self._index = index

    def _pull(self) -> Option[Values]:
        values = self._upstream.next_values()
        if values.is_none():
            return NONE
        self._index += 1
        return Some((self._index, *values.unwrap()))

    def _duplicate(self) -> Enumerate[T]:
        return Enumerate(self._upstream.clone(), self._index)


class Zip[T](_Adapter[T]):
    """Pair each pull of the upstream with a pull of **other**, driven by the upstream.

    Once **other** runs out, its slots are padded with `None` to the width of its last pull.
    """

    __slots__ = ("_other", "_width")

    def __init__(self, upstream: Iter[Any], other: Iter[Any], width: int = 1) -> None:
        super().__init__(upstream)
        self._other = other
        self._width = width

    def _repr_args(self) -> tuple[str, ...]:
        return (repr(self._upstream), repr(self._other))

    def _pull(self) -> Option[Values]:
        values = self._upstream.next_values()
        if values.is_none():
            return NONE
        match self._other.next_values():
            case Some(other):
                self._width = len(other)
            case _:
                other = (None,) * self._width
        return Some((*values.unwrap(), *other))

    def _duplicate(self) -> Zip[T]:
        return Zip(self._upstream.clone(), self._other.clone(), self._width)


class Concat[T](_Adapter[T]):
    __slots__ = ("_other",)

    def __init__(self, upstream: Iter[T], other: Iter[T]) -> None:
        super().__init__(upstream)
        self._other = other

    def _repr_args(self) -> tuple[str, ...]:
        return (repr(self._upstream), repr(self._other))

    def _pull(self) -> Option[Values]:
        return self._upstream.next_values().or_else(self._other.next_values)

    def _duplicate(self) -> Concat[T]:
        return Concat(self._upstream.clone(), self._other.clone())
