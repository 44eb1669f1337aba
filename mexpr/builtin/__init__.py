"""Builtin bindings: the lifted operators and optional named groups."""
from __future__ import annotations

from typing import Callable, Iterable

from mexpr.types.symbol_table import SymbolTable
from mexpr.builtin import math_builtin


# Named groups a front end may add to a table after construction
BUILTIN_GROUPS: dict[str, Callable[[SymbolTable], None]] = {
    "math": math_builtin.register,
}


def register_groups(table: SymbolTable, groups: Iterable[str]) -> list[str]:
    """Register each known group into `table`; unknown names are skipped.

    Returns the names of the groups actually registered.
    """
    registered = []
    for group in groups:
        register = BUILTIN_GROUPS.get(group)
        if register is None:
            continue
        register(table)
        registered.append(group)
    return registered
