"""Named constants and single-argument math functions.

Registered by front ends after an Expression is built; none of these are
part of a fresh symbol table.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from mexpr.errors import InvalidArguments
from mexpr.types.symbol_table import SymbolTable
from mexpr.types.value import Function, Number, Value


CONSTANTS: dict[str, float] = {
    "π": math.pi,
    "τ": 2.0 * math.pi,
}

UNARY_FUNCTIONS: dict[str, np.ufunc] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
}


def unary_function(ufunc: np.ufunc) -> Function:
    """Wrap a numpy ufunc as a Function of exactly one Number."""

    def call(args: Sequence[Value]) -> Value:
        match args:
            case [Number(operand)]:
                # Out-of-domain input gives NaN, as native float math does
                with np.errstate(all="ignore"):
                    return Number(float(ufunc(operand)))
        raise InvalidArguments(args)

    return Function(call)


def register(table: SymbolTable) -> None:
    """Register the math constants and functions into the given table."""
    table.update({name: Number(value) for name, value in CONSTANTS.items()})
    table.update({name: unary_function(ufunc) for name, ufunc in UNARY_FUNCTIONS.items()})
