import pytest

from mexpr.builtin import math_builtin
from mexpr.types.symbol_table import SymbolTable


@pytest.fixture
def table():
    """Fresh symbol table holding only the six operators."""
    return SymbolTable.with_operators()


@pytest.fixture
def math_table(table):
    """Operators plus the math constants and functions."""
    math_builtin.register(table)
    return table
