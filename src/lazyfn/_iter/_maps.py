from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from .._errors import assert_callable, nil_guard
from .._fn import compose, pack
from ._base import BaseIter

if TYPE_CHECKING:
    from ._main import Iter


class BaseMap[T](BaseIter[T]):
    """Combinators transforming or combining the values of upstream pulls."""

    __slots__ = ()

    def map[R](self, func: Callable[..., R]) -> Iter[R]:
        """Apply a function to each element of the iterator.

        The values of each pull are passed to **func** as positional arguments, and its result becomes the single
        value of the new pull.

        Args:
            func (Callable[..., R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Raises:
            IterProtocolError: When pulled, if **func** returns `None`.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2]).map(lambda x: x + 1).to_array()
        [2, 3]
        >>> lf.Iter.over("ab").enumerate().map(lambda idx, letter: letter * idx).to_array()
        ['a', 'bb']
        >>> lf.Iter.over([1]).map(lambda x: None).to_array()
        Traceback (most recent call last):
            ...
        lazyfn._errors.IterProtocolError: iterated function cannot return None as the first value

        ```
        """
        from ._adapters import Map

        assert_callable(func, "func")
        return Map(self, compose(nil_guard, func))

    def enumerate(self) -> Iter[tuple[int, T]]:
        """Prefix the values of each pull with a 1-based index.

        Returns:
            Iter[tuple[int, T]]: An iterator of `(index, *values)` pulls.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over(["a", "b"]).enumerate().to_array()
        [(1, 'a'), (2, 'b')]

        ```
        """
        from ._adapters import Enumerate

        return Enumerate(self)

    def zip[U](self, other: Iterable[U]) -> Iter[tuple[T, U]]:
        """Yield the values of this iterator followed by the values of **other**, pull by pull.

        The pairing is driven by this iterator: it completes as soon as this one does, and **other** is only pulled
        after this one produced values.

        If **other** runs out first, its slots are filled with `None`, as many as its last pull had values.

        Args:
            other (Iterable[U]): Any iterable, converted with `Iter.over`.

        Returns:
            Iter[tuple[T, U]]: An iterator of combined pulls.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2, 3]).zip("ab").to_array()
        [(1, 'a'), (2, 'b'), (3, None)]
        >>> lf.Iter.over([1]).zip(lf.Iter.counter()).to_array()
        [(1, 1)]
        >>> lf.Iter.over([1, 2]).zip(lf.Iter.over("a").enumerate()).to_array()
        [(1, 1, 'a'), (2, None, None)]

        ```
        """
        from ._adapters import Zip
        from ._main import Iter

        return Zip(self, Iter.over(other))

    def packed_zip[U](self, other: Iterable[U]) -> Iter[tuple[Any, ...]]:
        """Like `zip()`, but each pull is packed into one tuple value.

        Callbacks downstream then receive a single tuple instead of spread values.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2]).packed_zip("ab").map(len).to_array()
        [2, 2]

        ```
        """
        return self.zip(other).map(pack)

    def concat(self, other: Iterable[T]) -> Iter[T]:
        """Yield every item of this iterator, then every item of **other**.

        Args:
            other (Iterable[T]): Any iterable, converted with `Iter.over`.

        Returns:
            Iter[T]: The concatenation of both iterators.

        Example:
        ```python
        >>> import lazyfn as lf
        >>> lf.Iter.over([1, 2]).concat((3, 4)).to_array()
        [1, 2, 3, 4]

        ```
        """
        from ._adapters import Concat
        from ._main import Iter

        return Concat(self, Iter.over(other))
