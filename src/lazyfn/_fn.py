"""Small function combinators used to build predicates and mappings for `Iter` pipelines."""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

import cytoolz as cz

from ._errors import (
    ERR_POSITIVE_INTEGER_EXPECTED,
    assert_callable,
    assert_integer,
    assert_mapping,
    assert_not_none,
)


def compose(
    f1: Callable[..., Any], f2: Callable[..., Any], *more: Callable[..., Any]
) -> Callable[..., Any]:
    """Compose functions right to left: `compose(f, g)(*args) == f(g(*args))`.

    Args:
        f1 (Callable[..., Any]): Outermost function.
        f2 (Callable[..., Any]): Next function, called before **f1**.
        *more (Callable[..., Any]): Further functions; the last one receives the call arguments.

    Returns:
        Callable[..., Any]: The composed function.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> inc_then_double = lf.compose(lambda x: x * 2, lambda x: x + 1)
    >>> inc_then_double(3)
    8
    >>> lf.compose(str, abs, lambda a, b: a - b)(1, 5)
    '4'

    ```
    """
    assert_callable(f1, "f1")
    assert_callable(f2, "f2")
    for i, f in enumerate(more, start=3):
        assert_callable(f, f"f{i}")
    return cz.functoolz.compose(f1, f2, *more)


def bind[R](func: Callable[..., R], *args: Any) -> Callable[..., R]:  # noqa: ANN401
    """Bind leading positional arguments of **func**.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> ten_minus = lf.bind(lambda x, y: x - y, 10)
    >>> lf.range(3).map(ten_minus).to_array()
    [9, 8, 7]

    ```
    """
    assert_callable(func, "func")
    return partial(func, *args)


def bind_self(obj: object, name: str, *args: Any) -> Callable[..., Any]:  # noqa: ANN401
    """Bind the method **name** of **obj**, plus leading arguments.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> greet = lf.bind_self("Hello, {}!", "format")
    >>> greet("world")
    'Hello, world!'

    ```
    """
    assert_not_none(obj, "obj")
    return bind(getattr(obj, name), *args)


class CurriedFunction[R]:
    """A function taking its first arguments one call at a time.

    See `curry()`.
    """

    __slots__ = ("_args", "_func", "_levels")

    def __init__(self, func: Callable[..., R], levels: int, args: tuple[Any, ...] = ()) -> None:
        self._func = func
        self._levels = levels
        self._args = args

    def __repr__(self) -> str:
        return f"CurriedFunction({self._func!r}, levels={self._levels}, args={self._args!r})"

    def __call__(self, arg: Any, /, *rest: Any) -> R | CurriedFunction[R]:  # noqa: ANN401
        if self._levels == 1:
            return self._func(*self._args, arg, *rest)
        return CurriedFunction(self._func, self._levels - 1, (*self._args, arg))


def curry[R](func: Callable[..., R], levels: int) -> CurriedFunction[R]:
    """Curry the first **levels** arguments of **func**.

    Each call before the last one binds its first argument, drops any other, and returns a new curried function.

    The last call takes one or more arguments and calls **func** with everything collected so far.

    Args:
        func (Callable[..., R]): The function to curry.
        levels (int): How many single-argument calls come before the final one, counting it.

    Returns:
        CurriedFunction[R]: The curried function.

    Raises:
        ValueError: If **levels** is lower than 1.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> def volume(w, h, d):
    ...     return w * h * d
    >>> partial_volume = lf.curry(volume, 3)(2)(3)
    >>> partial_volume(4), partial_volume(5)
    (24, 30)
    >>> def hypervolume(a, b, c, d):
    ...     return a * b * c * d
    >>> lf.curry(hypervolume, 3)(2)(3)(4, 5)
    120

    ```
    """
    assert_callable(func, "func")
    assert_integer(levels, "levels")
    if levels < 1:
        raise ValueError(ERR_POSITIVE_INTEGER_EXPECTED.format("levels", levels))
    return CurriedFunction(func, levels)


def constant[T](value: T) -> Callable[..., T]:
    """Return a function ignoring its arguments and always returning **value**.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.iterate("abc").map(lf.constant(0)).to_array()
    [0, 0, 0]

    ```
    """

    def _constant(*_args: Any, **_kwargs: Any) -> T:  # noqa: ANN401
        return value

    return _constant


def identity(*args: Any) -> Any:  # noqa: ANN401
    """Return the arguments unchanged: one argument as itself, several as a tuple, none as `None`."""
    match len(args):
        case 0:
            return None
        case 1:
            return args[0]
        case _:
            return args


def nop(*_args: Any, **_kwargs: Any) -> None:  # noqa: ANN401
    """Do nothing."""


def pack(*values: Any) -> tuple[Any, ...]:  # noqa: ANN401
    """Pack the values of a multi-value pull into a single tuple."""
    return values


def negate(predicate: Callable[..., object]) -> Callable[..., bool]:
    """Return the logical complement of **predicate**.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> is_odd = lf.negate(lambda x: x % 2 == 0)
    >>> is_odd(3), is_odd(4)
    (True, False)

    ```
    """
    assert_callable(predicate, "predicate")
    return cz.functoolz.complement(predicate)


def lookup[K, V](mapping: Mapping[K, V]) -> Callable[[K], V | None]:
    """Turn **mapping** into a function from key to value, `None` for absent keys.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> names = lf.lookup({1: "one", 2: "two"})
    >>> lf.iterate([2, 1, 3]).map(names).to_array()
    Traceback (most recent call last):
        ...
    lazyfn._errors.IterProtocolError: iterated function cannot return None as the first value
    >>> lf.iterate([2, 1]).map(names).to_array()
    ['two', 'one']

    ```
    """
    assert_mapping(mapping, "mapping")
    return mapping.get


def indexer(key: Any) -> Callable[[Any], Any]:  # noqa: ANN401
    """Return a function fetching `obj[key]`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.iterate([{"id": 1}, {"id": 2}]).map(lf.indexer("id")).to_array()
    [1, 2]

    ```
    """
    return operator.itemgetter(key)


def truthy(value: object, *_more: object) -> bool:
    """Default predicate of `any`/`all`: everything except `False` and `None` counts as present."""
    return value is not None and value is not False
