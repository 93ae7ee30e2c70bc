"""Free-function forms of the `Iter` API: `lf.filter(data, pred)` is `lf.iterate(data).filter(pred)`.

These names shadow builtins (`map`, `filter`, `range`...) when star-imported. Prefer `import lazyfn as lf`.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterable
from typing import Any

from ._iter import Iter
from ._results import Option


def iterate[T](iterable: Iterable[T]) -> Iter[T]:
    """Create an `Iter` over **iterable**. Equivalent to `Iter.over(iterable)`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.iterate((1, 2, 3)).to_array()
    [1, 2, 3]

    ```
    """
    return Iter.over(iterable)


def counter(start: float = 1, step: float = 1) -> Iter[float]:
    """Equivalent to `Iter.counter(start, step)`."""
    return Iter.counter(start, step)


def range(*bounds: float) -> Iter[float]:  # noqa: A001
    """Equivalent to `Iter.range(*bounds)`: `range(stop)`, `range(start, stop)` or `range(start, stop, step)`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.range(5, 1, -2).to_array()
    [5, 3, 1]

    ```
    """
    return Iter.range(*bounds)


def filter[T](iterable: Iterable[T], predicate: Callable[..., object]) -> Iter[T]:  # noqa: A001
    """Equivalent to `iterate(iterable).filter(predicate)`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.filter([1, 2, 3, 4], lambda x: x % 2 == 0).to_array()
    [2, 4]

    ```
    """
    return iterate(iterable).filter(predicate)


def map[R](iterable: Iterable[Any], func: Callable[..., R]) -> Iter[R]:  # noqa: A001
    """Equivalent to `iterate(iterable).map(func)`.

    **func** may never return `None`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.map("abc", str.upper).to_array()
    ['A', 'B', 'C']

    ```
    """
    return iterate(iterable).map(func)


def reduce[U](iterable: Iterable[Any], func: Callable[..., U], *initial: Any) -> U:  # noqa: ANN401
    """Equivalent to `iterate(iterable).reduce(func, *initial)`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.reduce(["a", "b"], lambda acc, x: acc + x, ">")
    '>ab'

    ```
    """
    return iterate(iterable).reduce(func, *initial)


def foreach(iterable: Iterable[Any], func: Callable[..., object]) -> None:
    """Equivalent to `iterate(iterable).foreach(func)`.

    Unlike `map`, this runs immediately and ignores what **func** returns.
    """
    iterate(iterable).foreach(func)


def take[T](iterable: Iterable[T], n: int) -> Iter[T]:
    """Equivalent to `iterate(iterable).take(n)`."""
    return iterate(iterable).take(n)


def take_while[T](iterable: Iterable[T], predicate: Callable[..., object]) -> Iter[T]:
    """Equivalent to `iterate(iterable).take_while(predicate)`."""
    return iterate(iterable).take_while(predicate)


def take_last[T](iterable: Iterable[T], n: int) -> Iter[T]:
    """Equivalent to `iterate(iterable).take_last(n)`."""
    return iterate(iterable).take_last(n)


def skip[T](iterable: Iterable[T], n: int) -> Iter[T]:
    """Equivalent to `iterate(iterable).skip(n)`."""
    return iterate(iterable).skip(n)


def skip_while[T](iterable: Iterable[T], predicate: Callable[..., object]) -> Iter[T]:
    """Equivalent to `iterate(iterable).skip_while(predicate)`."""
    return iterate(iterable).skip_while(predicate)


def every[T](iterable: Iterable[T], n: int) -> Iter[T]:
    """Equivalent to `iterate(iterable).every(n)`."""
    return iterate(iterable).every(n)


def any(iterable: Iterable[Any], predicate: Callable[..., object] | None = None) -> bool:  # noqa: A001
    """Equivalent to `iterate(iterable).any(predicate)`."""
    return iterate(iterable).any(predicate)


def all(iterable: Iterable[Any], predicate: Callable[..., object] | None = None) -> bool:  # noqa: A001
    """Equivalent to `iterate(iterable).all(predicate)`."""
    return iterate(iterable).all(predicate)


def count(iterable: Iterable[Any], predicate: Callable[..., object] | None = None) -> int:
    """Equivalent to `iterate(iterable).count(predicate)`."""
    return iterate(iterable).count(predicate)


def zip[T, U](iterable: Iterable[T], other: Iterable[U]) -> Iter[tuple[T, U]]:  # noqa: A001
    """Equivalent to `iterate(iterable).zip(other)`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.zip("ab", lf.counter()).to_array()
    [('a', 1), ('b', 2)]

    ```
    """
    return iterate(iterable).zip(other)


def packed_zip[T, U](iterable: Iterable[T], other: Iterable[U]) -> Iter[tuple[Any, ...]]:
    """Equivalent to `iterate(iterable).packed_zip(other)`."""
    return iterate(iterable).packed_zip(other)


def enumerate[T](iterable: Iterable[T]) -> Iter[tuple[int, T]]:  # noqa: A001
    """Equivalent to `iterate(iterable).enumerate()`."""
    return iterate(iterable).enumerate()


def concat[T](iterable: Iterable[T], other: Iterable[T]) -> Iter[T]:
    """Equivalent to `iterate(iterable).concat(other)`."""
    return iterate(iterable).concat(other)


def last[T](iterable: Iterable[T]) -> Option[T]:
    """Equivalent to `iterate(iterable).last()`."""
    return iterate(iterable).last()


def to_array[T](iterable: Iterable[T]) -> list[T]:
    """Equivalent to `iterate(iterable).to_array()`."""
    return iterate(iterable).to_array()


def to_generator[T](iterable: Iterable[T]) -> Generator[T, None, None]:
    """Equivalent to `iterate(iterable).to_generator()`."""
    return iterate(iterable).to_generator()


def clone[T](iterable: T) -> T:
    """Clone **iterable** if it is an `Iter`, return it unchanged otherwise.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> data = [1, 2]
    >>> lf.clone(data) is data
    True
    >>> it = lf.iterate(data)
    >>> lf.clone(it) is it
    False

    ```
    """
    if isinstance(iterable, Iter):
        return iterable.clone()
    return iterable
