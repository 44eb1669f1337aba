"""Symbol table for mexpr.

A flat, case-sensitive mapping from names to Values. Operators are ordinary
entries ("+", "-", ...), so callers may rebind them like any other name.
Evaluation only reads from the table.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping

from mexpr.errors import InvalidBinding, UndefinedIdentifier
from mexpr.types.value import Value, is_value


class SymbolTable:
    """Mapping from names to Numbers and Functions."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, Value] | None = None):
        self.vars: dict[str, Value] = {}
        if bindings:
            self.update(bindings)

    @classmethod
    def with_operators(cls) -> SymbolTable:
        """A fresh table holding the six lifted arithmetic operators."""
        from mexpr.builtin.operators import register

        table = cls()
        register(table)
        return table

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, replacing any existing binding.

        Raises InvalidBinding if `name` is not a non-empty string or `value`
        is not a Number or Function.
        """
        if not isinstance(name, str) or not name:
            raise InvalidBinding(f"Cannot bind {name!r}: names must be non-empty strings")
        if not is_value(value):
            raise InvalidBinding(f"Cannot bind {name} to {value!r}: not a Number or Function")
        self.vars[name] = value

    def lookup(self, name: str) -> Value:
        """Return the value bound to `name`; raises UndefinedIdentifier if unbound."""
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedIdentifier(name) from None

    def update(self, mapping: Mapping[str, Value]) -> None:
        for name, value in mapping.items():
            self.define(name, value)

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __getitem__(self, name: str) -> Value:
        return self.lookup(name)

    def __setitem__(self, name: str, value: Value) -> None:
        self.define(name, value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<SymbolTable {self}>"
