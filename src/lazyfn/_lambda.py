"""Compile short expression strings into sandboxed functions.

```python
>>> import lazyfn as lf
>>> lf.iterate([1, 2, 3]).map(lf.lambda_("x * 10")).to_array()
[10, 20, 30]

```
"""

from __future__ import annotations

import ast
import builtins
import io
import keyword
import re
import sys
import tokenize
import warnings
from collections.abc import Callable, Mapping
from typing import Any, Final

from ._core import get_config
from ._errors import LambdaError, assert_mapping

_PARAMS: Final = tuple(f"_{i}" for i in range(1, 10))
_ALIASES: Final = {
    "_": "_1",
    "x": "_1",
    "a": "_1",
    "v": "_1",
    "y": "_2",
    "b": "_2",
    "z": "_3",
    "c": "_3",
    "d": "_4",
    "e": "_5",
    "f": "_6",
    "g": "_7",
    "h": "_8",
    "i": "_9",
}
_ARROW: Final = re.compile(r"\(([^()]*)\)\s*=>\s*")
_RESERVED_ENV_KEY: Final = re.compile(r"_\d?|__.*")
_LEADING_RETURN: Final = re.compile(r"return\b")


class LambdaFunction:
    """A function compiled by `lambda_()`.

    Calling it calls the compiled function; `expr` holds the expression it was compiled from.
    """

    __slots__ = ("_func", "expr")

    def __init__(self, func: Callable[..., Any], expr: str) -> None:
        self._func = func
        self.expr = expr

    def __call__(self, *args: Any) -> Any:  # noqa: ANN401
        return self._func(*args)

    def __str__(self) -> str:
        return f"lambda[[{self.expr}]]"

    def __repr__(self) -> str:
        return f"LambdaFunction({self.expr!r})"


def _sanitize_env(env: Mapping[Any, Any]) -> dict[str, Any]:
    dropped = [key for key in env if not isinstance(key, str)]
    if dropped:
        warnings.warn(
            f"lambda environment keys must be strings, dropping: {dropped!r}", UserWarning, stacklevel=3
        )
    proper: dict[str, Any] = {}
    for key, value in env.items():
        if not isinstance(key, str):
            continue
        if _RESERVED_ENV_KEY.fullmatch(key):
            msg = f'Illegal key in lambda environment: "{key}"'
            raise LambdaError(msg)
        if key in _ALIASES and not value:
            msg = f'Lambda environment has special key "{key}" set to a falsy value; it will get overwritten inside the lambda'
            raise LambdaError(msg)
        proper[key] = value
    return proper


def _check_tokens(expr: str) -> None:
    depth = 0
    try:
        for token in tokenize.generate_tokens(io.StringIO(expr).readline):
            if token.type == tokenize.COMMENT:
                msg = "Lambda function bodies cannot contain comments"
                raise LambdaError(msg)
            if token.type == tokenize.OP and token.string in "()":
                depth += 1 if token.string == "(" else -1
                if depth < 0:
                    break
    except (tokenize.TokenError, SyntaxError) as e:
        msg = f"Load failed for lambda body: {expr}"
        raise LambdaError(msg) from e
    if depth != 0:
        msg = f"Expression has unbalanced parenthesis: {expr}"
        raise LambdaError(msg)


def _split_arrows(expr: str) -> tuple[list[list[str]], str]:
    arrows: list[list[str]] = []
    while match := _ARROW.match(expr):
        names = [name.strip() for name in match.group(1).split(",")] if match.group(1).strip() else []
        for name in names:
            if not name.isidentifier() or keyword.iskeyword(name) or name.startswith("__"):
                msg = f"Invalid lambda parameter list: ({match.group(1)})"
                raise LambdaError(msg)
        arrows.append(names)
        expr = expr[match.end() :]
    max_depth = get_config().lambda_max_depth
    if len(arrows) > max_depth:
        msg = f"Lambda nests {len(arrows)} arrows, more than the maximum of {max_depth}"
        raise LambdaError(msg)
    return arrows, expr


def _parse_body(body: str, expr: str) -> None:
    try:
        tree = ast.parse(body, mode="eval")
    except SyntaxError as e:
        msg = f"Load failed for lambda body: {expr}"
        raise LambdaError(msg) from e
    for node in ast.walk(tree):
        match node:
            case ast.Name(id=name) | ast.Attribute(attr=name) if name.startswith("__"):
                msg = f"Lambda bodies cannot access dunder names: {name}"
                raise LambdaError(msg)
            case ast.Yield() | ast.YieldFrom() | ast.Await():
                msg = f"Load failed for lambda body: {expr}"
                raise LambdaError(msg)
            case _:
                pass


def _implicit_source(body: str, env: Mapping[str, Any]) -> str:
    lines = [f"def _lambda({', '.join(f'{p}=None' for p in _PARAMS)}):"]
    lines.extend(f"    {alias} = {param}" for alias, param in _ALIASES.items() if alias not in env)
    lines.append(f"    return ({body})")
    return "\n".join(lines)


def _arrow_source(arrows: list[list[str]], body: str) -> str:
    heads = "".join(f"lambda {', '.join(names)}: " for names in arrows)
    return f"{heads}({body})"


def lambda_(expr: str, env: Mapping[str, Any] | None = None) -> LambdaFunction:
    """Compile the expression **expr** into a function.

    Two forms are accepted:

    - Implicit parameters: `"x + y"`. The arguments are named `_1` to `_9`, with the aliases `x`, `a`, `v` and `_`
      for `_1`, `y` and `b` for `_2`, `z` and `c` for `_3`, and `d` to `i` for `_4` to `_9`.
    - Arrows: `"(x, y) => x + y"`, nestable as in `"(x) => (y) => x + y"` up to `Config.lambda_max_depth`.

    The function runs in a sandbox: it only sees **env** and the builtins listed in `Config.lambda_builtins`.

    An **env** entry named like an alias replaces that alias inside the function.

    Args:
        expr (str): A single Python expression, without newlines, comments or a leading `return`.
        env (Mapping[str, Any] | None): Names visible to the expression.

    Returns:
        LambdaFunction: The compiled function.

    Raises:
        TypeError: If **expr** is not a string or **env** not a mapping.
        LambdaError: If the expression or the environment is rejected.

    Example:
    ```python
    >>> import lazyfn as lf
    >>> lf.lambda_("x - y")(10, 3)
    7
    >>> add = lf.lambda_("(x) => (y) => x + y")
    >>> add(1)(2)
    3
    >>> lf.lambda_("_ + inc(_)", {"inc": lambda n: n + 1})(1)
    3
    >>> str(lf.lambda_("a * 2"))
    'lambda[[a * 2]]'
    >>> lf.lambda_("x # double it")
    Traceback (most recent call last):
        ...
    lazyfn._errors.LambdaError: Lambda function bodies cannot contain comments

    ```
    """
    if not isinstance(expr, str):
        msg = f"param expr expected str, got: {expr!r}"
        raise TypeError(msg)
    if env is None:
        env = {}
    assert_mapping(env, "env")
    proper_env = _sanitize_env(env)

    expr = expr.strip()
    if "\n" in expr or "\r" in expr:
        msg = "Lambda function bodies cannot contain newlines"
        raise LambdaError(msg)
    if _LEADING_RETURN.match(expr):
        msg = "`return` is implied in lambda expressions, please do not include it yourself"
        raise LambdaError(msg)
    _check_tokens(expr)

    arrows, body = _split_arrows(expr)
    _parse_body(body, expr)

    caller = sys._getframe(1)  # noqa: SLF001
    filename = f"<lambda {caller.f_code.co_filename}:{caller.f_lineno}>"
    sandbox: dict[str, Any] = {
        "__builtins__": {
            name: getattr(builtins, name) for name in get_config().lambda_builtins if hasattr(builtins, name)
        },
        **proper_env,
    }
    try:
        if arrows:
            func = eval(compile(_arrow_source(arrows, body), filename, "eval"), sandbox)  # noqa: S307
        else:
            scope: dict[str, Any] = {}
            exec(compile(_implicit_source(body, proper_env), filename, "exec"), sandbox, scope)  # noqa: S102
            func = scope["_lambda"]
    except SyntaxError as e:
        msg = f"Load failed for lambda body: {expr}"
        raise LambdaError(msg) from e
    return LambdaFunction(func, expr)
