from collections.abc import Sequence
from typing import Any


def values_repr(values: Sequence[Any], max_items: int = 10) -> str:
    shown = ", ".join(repr(v) for v in values[:max_items])
    if len(values) > max_items:
        return f"{shown}, ..." if shown else "..."
    return shown
