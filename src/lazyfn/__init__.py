from ._core import Config, get_config, set_config
from ._errors import EmptyIterError, IterProtocolError, LambdaError, NotClonableError
from ._fn import (
    CurriedFunction,
    bind,
    bind_self,
    compose,
    constant,
    curry,
    identity,
    indexer,
    lookup,
    negate,
    nop,
    pack,
)
from ._functions import (
    all,
    any,
    clone,
    concat,
    count,
    counter,
    enumerate,
    every,
    filter,
    foreach,
    iterate,
    last,
    map,
    packed_zip,
    range,
    reduce,
    skip,
    skip_while,
    take,
    take_last,
    take_while,
    to_array,
    to_generator,
    zip,
)
from ._iter import Iter
from ._lambda import LambdaFunction, lambda_
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)

__all__ = [
    "NONE",
    "Config",
    "CurriedFunction",
    "EmptyIterError",
    "Err",
    "Iter",
    "IterProtocolError",
    "LambdaError",
    "LambdaFunction",
    "NoneOption",
    "NotClonableError",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "all",
    "any",
    "bind",
    "bind_self",
    "clone",
    "compose",
    "concat",
    "constant",
    "count",
    "counter",
    "curry",
    "enumerate",
    "every",
    "filter",
    "foreach",
    "get_config",
    "identity",
    "indexer",
    "iterate",
    "lambda_",
    "last",
    "lookup",
    "map",
    "negate",
    "nop",
    "pack",
    "packed_zip",
    "range",
    "reduce",
    "set_config",
    "skip",
    "skip_while",
    "take",
    "take_last",
    "take_while",
    "to_array",
    "to_generator",
    "zip",
]
