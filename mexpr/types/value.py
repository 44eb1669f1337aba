"""Runtime values: every name in a symbol table is bound to a Number or a Function."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Union

import numpy as np


def format_number(value: float) -> str:
    """Positional display of a float: no exponent, integral values drop the `.0`."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class Number:
    value: float

    def __post_init__(self):
        # ints and numpy scalars would reach integer arithmetic otherwise
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self) -> str:
        return f"Number({format_number(self.value)})"


@dataclass(frozen=True, eq=False)
class Function:
    """A callable value.

    `fn` receives the evaluated argument list and returns a Value, or raises.
    Function values are shared freely between lifted closures; nothing ever
    mutates one after creation.
    """

    fn: Callable[[Sequence["Value"]], "Value"]

    def __call__(self, args: Sequence[Value]) -> Value:
        return self.fn(args)

    def __repr__(self) -> str:
        return "Function"


Value = Union[Number, Function]


def is_value(obj) -> bool:
    return isinstance(obj, (Number, Function))
