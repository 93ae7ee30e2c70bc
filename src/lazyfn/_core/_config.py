from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from ._format import values_repr

_SAFE_BUILTINS: frozenset[str] = frozenset(
    {
        "abs",
        "all",
        "any",
        "bool",
        "dict",
        "divmod",
        "enumerate",
        "float",
        "frozenset",
        "int",
        "isinstance",
        "len",
        "list",
        "max",
        "min",
        "pow",
        "range",
        "repr",
        "reversed",
        "round",
        "set",
        "sorted",
        "str",
        "sum",
        "tuple",
        "zip",
    }
)


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for lazyfn.

    Obtain the active instance with `get_config()` and change it with `set_config()`.
    """

    repr_max_items: int = 10
    """How many items of a captured collection `repr` shows before eliding the rest."""
    lambda_max_depth: int = 10
    """Maximum number of nested `=>` arrows accepted by `lambda_`."""
    lambda_builtins: frozenset[str] = field(default=_SAFE_BUILTINS)
    """Names of the builtins visible inside `lambda_` bodies."""

    def iter_repr(self, values: tuple[Any, ...]) -> str:
        return values_repr(values, self.repr_max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.get_config().repr_max_items
    10

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace the active `Config` with a copy carrying **changes**.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The previous configuration, so it can be restored later.

    Raises:
        TypeError: If a key is not a `Config` field.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> previous = lf.set_config(repr_max_items=2)
    >>> lf.Iter.over([1, 2, 3])
    Over(1, 2, ...)
    >>> _ = lf.set_config(**{"repr_max_items": previous.repr_max_items})

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous
