"""The six arithmetic operators, lifted over Numbers and Functions.

Each operator dispatches on the shape of its argument list:

- two Numbers: plain IEEE-754 arithmetic;
- any Function among two operands: a new Function that forwards its own
  arguments to the function operand(s) and combines the results with the
  same operator, keeping operand order (each function operand is handed
  its own copy of the argument list);
- one operand (only `+` and `-`): identity / negation, deferred the same
  way when the operand is a Function;
- anything else: InvalidArguments.

So `(sin + cos)(x)` is `sin(x) + cos(x)` and `(2 * sin)(x)` is `2 * sin(x)`.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

from mexpr.errors import InvalidArguments
from mexpr.types.symbol_table import SymbolTable
from mexpr.types.value import Function, Number, Value


Combine = Callable[..., float]


def _ieee(ufunc: np.ufunc) -> Combine:
    """Wrap a numpy ufunc so it yields inf/NaN instead of raising or warning."""

    def combine(*operands: float) -> float:
        with np.errstate(all="ignore"):
            return float(ufunc(*operands))

    combine.__name__ = ufunc.__name__
    return combine


def _identity(operand: float) -> float:
    return operand


# -------------------------------
# Arithmetic
# -------------------------------
add = _ieee(np.add)
subtract = _ieee(np.subtract)
multiply = _ieee(np.multiply)
divide = _ieee(np.true_divide)
remainder = _ieee(np.fmod)  # truncated: sign follows the dividend
power = _ieee(np.power)
negate = _ieee(np.negative)


def lift(combine: Combine, unary: Optional[Combine] = None) -> Callable[[Sequence[Value]], Value]:
    """Build the dispatching implementation of one operator."""

    def operator(args: Sequence[Value]) -> Value:
        match args:
            case [Number(left), Number(right)]:
                return Number(combine(left, right))
            case [Function() as f, Function() as g]:
                return Function(lambda inner: operator([f(list(inner)), g(list(inner))]))
            case [Number() as number, Function() as f]:
                return Function(lambda inner: operator([number, f(list(inner))]))
            case [Function() as f, Number() as number]:
                return Function(lambda inner: operator([f(list(inner)), number]))
            case [Number(operand)] if unary is not None:
                return Number(unary(operand))
            case [Function() as f] if unary is not None:
                return Function(lambda inner: operator([f(list(inner))]))
        raise InvalidArguments(args)

    return operator


OPERATORS: dict[str, Callable[[Sequence[Value]], Value]] = {
    "+": lift(add, _identity),
    "-": lift(subtract, negate),
    "*": lift(multiply),
    "/": lift(divide),
    "%": lift(remainder),
    "^": lift(power),
}


def register(table: SymbolTable) -> None:
    """Bind the six operators in the given table."""
    table.update({symbol: Function(fn) for symbol, fn in OPERATORS.items()})
