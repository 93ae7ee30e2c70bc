"""Exceptions raised by lazyfn, and the argument checks shared by every constructor.

Argument checks run at construction time, so a malformed pipeline fails before any value is pulled.
"""

from collections.abc import Mapping
from typing import Final

ERR_GENERATOR_CLONE: Final = (
    "cannot clone generator iterator; try .to_array() and iterate over it"
)
ERR_FUNCTION_CLONE: Final = (
    "cannot clone callback iterator; try .to_array() and iterate over it"
)
ERR_NONE_MAPPED: Final = "iterated function cannot return None as the first value"
ERR_INTEGER_EXPECTED: Final = "param {} expected integer, got: {!r}"
ERR_POSITIVE_INTEGER_EXPECTED: Final = "param {} expected a positive integer, got: {!r}"
ERR_NUMBER_EXPECTED: Final = "param {} expected number, got: {!r}"
ERR_ITERABLE_EXPECTED: Final = "param {} expected iterable, got: {!r}"
ERR_ITERATOR_EXPECTED: Final = "param {} expected iterator or generator, got: {!r}"
ERR_CALLABLE_EXPECTED: Final = "param {} expected callable, got: {!r}"
ERR_MAPPING_EXPECTED: Final = "param {} expected mapping, got: {!r}"
ERR_NONE_VALUE: Final = "param {} is None"
ERR_ZERO_STEP: Final = "param step must not be zero"


class IterProtocolError(RuntimeError):
    """A mapping function produced `None`, which would be indistinguishable from exhaustion."""


class NotClonableError(TypeError):
    """The pipeline contains a source whose traversal cannot be replayed."""


class EmptyIterError(TypeError):
    """A reduction without an initial value was run over an empty iterator."""


class LambdaError(ValueError):
    """A `lambda_` expression or environment was rejected."""


def assert_not_none(value: object, param: str) -> None:
    if value is None:
        raise TypeError(ERR_NONE_VALUE.format(param))


def assert_callable(value: object, param: str) -> None:
    assert_not_none(value, param)
    if not callable(value):
        raise TypeError(ERR_CALLABLE_EXPECTED.format(param, value))


def assert_integer(value: object, param: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(ERR_INTEGER_EXPECTED.format(param, value))


def assert_positive_integer(value: object, param: str) -> None:
    assert_integer(value, param)
    if value <= 0:  # type: ignore[operator]
        raise ValueError(ERR_POSITIVE_INTEGER_EXPECTED.format(param, value))


def assert_number(value: object, param: str) -> None:
    assert_not_none(value, param)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(ERR_NUMBER_EXPECTED.format(param, value))


def assert_mapping(value: object, param: str) -> None:
    if not isinstance(value, Mapping):
        raise TypeError(ERR_MAPPING_EXPECTED.format(param, value))


def nil_guard[T](value: T | None) -> T:
    """Pass **value** through, refusing `None`.

    Composed after every `map` function: a mapped value can never be `None`.
    """
    if value is None:
        raise IterProtocolError(ERR_NONE_MAPPED)
    return value
