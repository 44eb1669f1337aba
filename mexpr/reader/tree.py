"""Syntax tree produced by the parser.

Operator symbols are plain identifiers: `1 + 2` parses to
Call(Identifier("+"), (NumberLiteral(1.0), NumberLiteral(2.0))).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Call:
    callee: SyntaxTree
    arguments: tuple[SyntaxTree, ...] = ()


SyntaxTree = Union[NumberLiteral, Identifier, Call]


def binary(symbol: str, left: SyntaxTree, right: SyntaxTree) -> Call:
    return Call(Identifier(symbol), (left, right))


def unary(symbol: str, operand: SyntaxTree) -> Call:
    return Call(Identifier(symbol), (operand,))
