from __future__ import annotations

from mexpr.reader.parser import parse
from mexpr.reader.tree import SyntaxTree
from mexpr.types.symbol_table import SymbolTable
from mexpr.types.value import Value
from mexpr.evaluation.evaluator import evaluate


class Expression:
    """
    One parsed expression paired with its own symbol table.

    Construction parses `source` (raising ParseError) and binds the six
    operators in a fresh table. Callers may add or replace bindings before
    evaluating; evaluation never modifies the table, so it can be repeated.
    """

    __slots__ = ("source", "tree", "table")

    def __init__(self, source: str):
        self.source: str = source
        self.tree: SyntaxTree = parse(source)
        self.table: SymbolTable = SymbolTable.with_operators()

    def define(self, name: str, value: Value) -> None:
        self.table.define(name, value)

    def evaluate(self) -> Value:
        return evaluate(self.tree, self.table)

    def __repr__(self) -> str:
        return f"Expression({self.source!r})"
