"""Tree-walking evaluator for mexpr.

Evaluation is a plain recursion over the syntax tree against a read-only
symbol table. Arguments are evaluated left to right and the first error
aborts the whole evaluation. Errors raised while invoking a function value
surface as FunctionCallFailure.
"""

from __future__ import annotations

from typing import Sequence

from mexpr.errors import FunctionCallFailure, InvalidFunction
from mexpr.reader.tree import Call, Identifier, NumberLiteral, SyntaxTree
from mexpr.types.symbol_table import SymbolTable
from mexpr.types.value import Function, Number, Value


def apply(callee: Value, args: Sequence[Value]) -> Value:
    """Invoke `callee` with already evaluated arguments."""
    if not isinstance(callee, Function):
        raise FunctionCallFailure(InvalidFunction(callee))
    try:
        return callee(args)
    except RecursionError:
        raise
    except Exception as err:
        raise FunctionCallFailure(err) from err


def evaluate(tree: SyntaxTree, table: SymbolTable) -> Value:
    match tree:
        case NumberLiteral(value):
            return Number(value)
        case Identifier(name):
            return table.lookup(name)
        case Call(callee, arguments):
            function = evaluate(callee, table)
            args = [evaluate(argument, table) for argument in arguments]
            return apply(function, args)
    raise TypeError(f"Cannot evaluate {tree!r}: not a syntax tree")
