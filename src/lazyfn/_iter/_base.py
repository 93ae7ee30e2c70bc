from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .._core import Pipeable
from .._errors import NotClonableError
from .._results import NONE, Err, Ok, Option, Result

if TYPE_CHECKING:
    from ._main import Iter

type Values = tuple[Any, ...]
"""The values produced by one pull: a primary value plus optional auxiliary ones."""


def collapse(values: Values) -> Any:  # noqa: ANN401
    """Present a pull to Python code: a lone value as itself, several values as a tuple."""
    return values[0] if len(values) == 1 else values


class BaseIter[T](Pipeable, Iterator[T], ABC):
    """Pull protocol shared by every `Iter` variant.

    Subclasses implement `_pull()`, producing the next values or `NONE`, and `_duplicate()`, rebuilding an
    identically positioned copy.

    `next_values()` wraps `_pull()` in a completion latch: once a pull returned `NONE`, every later pull
    returns `NONE` without touching the variant's state again.
    """

    _completed: bool

    __slots__ = ("_completed",)

    def __init__(self) -> None:
        self._completed = False

    @abstractmethod
    def _pull(self) -> Option[Values]: ...

    @abstractmethod
    def _duplicate(self) -> Iter[T]: ...

    def _repr_args(self) -> tuple[str, ...]:
        return ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(self._repr_args())})"

    def __next__(self) -> T:
        values = self.next_values()
        if values.is_none():
            raise StopIteration
        return collapse(values.unwrap())

    def next_values(self) -> Option[Values]:
        """Pull the next values tuple, or `NONE` once the sequence is exhausted.

        This is the primitive every combinator is built on.

        Multi-value pulls (zip, enumerate, callback sources) keep their values separate here, where `next()` and
        plain iteration present them as a single tuple.

        Returns:
            Option[Values]: `Some(values)` or `NONE`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> it = lf.Iter.over(["a"]).enumerate()
        >>> it.next_values()
        Some((1, 'a'))
        >>> it.next_values()
        NONE
        >>> it.next_values()
        NONE

        ```
        """
        if self._completed:
            return NONE
        values = self._pull()
        if values.is_none():
            self._completed = True
        return values

    def next(self) -> Option[T]:
        """Return the next element of the iterator.

        Note:
            Iterating over an `Iter` with a `for` loop calls `__next__`, which raises `StopIteration` where this
            method returns `NONE`.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> it = lf.Iter.over([1, 2])
        >>> it.next()
        Some(1)
        >>> it.next().unwrap()
        2
        >>> it.next()
        NONE

        ```
        """
        return self.next_values().map(collapse)

    def is_complete(self) -> bool:
        """Tell whether the iterator is known to be exhausted.

        Completion can only be observed after the pull that returned `NONE`, never ahead of it.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> it = lf.Iter.over([1])
        >>> it.next(), it.is_complete()
        (Some(1), False)
        >>> it.next(), it.is_complete()
        (NONE, True)

        ```
        """
        return self._completed

    def clone(self) -> Iter[T]:
        """Create an independent copy of the iterator, positioned where this one is.

        Both iterators then produce the same remaining values, and consuming one has no effect on the other.

        Combinators clone their upstreams recursively, so cloning is a property of the whole pipeline.

        Returns:
            Iter[T]: The copy.

        Raises:
            NotClonableError: If the pipeline contains a generator or callback source, whose traversal cannot be
                replayed. Materialize it with `to_array()` and iterate over the result instead.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> it = lf.Iter.over([0, 1, 2, 3, 4, 5, 6, 7, 8]).filter(lambda x: x % 2 == 0)
        >>> it.next()
        Some(0)
        >>> copy = it.clone()
        >>> it.to_array()
        [2, 4, 6, 8]
        >>> copy.to_array()
        [2, 4, 6, 8]

        ```
        """
        new = self._duplicate()
        new._completed = self._completed
        return new

    def try_clone(self) -> Result[Iter[T], NotClonableError]:
        """Like `clone()`, but report a non-clonable pipeline as an `Err` instead of raising.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.counter().take(3).try_clone().is_ok()
        True
        >>> lf.Iter.from_generator(iter([1, 2])).map(str).try_clone().is_err()
        True

        ```
        """
        try:
            return Ok(self.clone())
        except NotClonableError as e:
            return Err(e)
