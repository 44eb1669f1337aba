import math

import pytest

from mexpr import Expression
from mexpr.builtin.operators import OPERATORS
from mexpr.errors import InvalidBinding, ParseError, UndefinedIdentifier
from mexpr.types.symbol_table import SymbolTable
from mexpr.types.value import Function, Number


# -----------------------------------------------------
# Expression
# -----------------------------------------------------

def test_construction_parses_and_loads_operators():
    expr = Expression("3 + 4")
    assert sorted(expr.table.names()) == sorted(OPERATORS)
    assert expr.evaluate() == Number(7)


def test_construction_fails_on_malformed_source():
    with pytest.raises(ParseError):
        Expression("1 + ")


def test_each_expression_gets_a_fresh_table():
    first = Expression("x")
    second = Expression("x")
    first.define("x", Number(1))
    assert first.evaluate() == Number(1)
    with pytest.raises(UndefinedIdentifier):
        second.evaluate()


def test_bindings_added_after_construction():
    expr = Expression("double(21)")
    expr.define("double", Function(lambda args: Number(args[0].value * 2)))
    assert expr.evaluate() == Number(42)


def test_operators_can_be_rebound():
    expr = Expression("1 + 2")
    expr.table["+"] = Function(lambda args: Number(42))
    assert expr.evaluate() == Number(42)


def test_repeated_evaluation_is_identical():
    expr = Expression("(2 * f + 1)(3)")
    expr.define("f", Function(lambda args: args[0]))
    assert expr.evaluate() == expr.evaluate() == Number(7)


def test_evaluation_does_not_touch_the_table():
    expr = Expression("(+ * 2)(1, 2)")
    before = dict(expr.table.vars)
    expr.evaluate()
    assert expr.table.vars == before


def test_repr():
    assert repr(Expression("1+1")) == "Expression('1+1')"


# -----------------------------------------------------
# SymbolTable
# -----------------------------------------------------

def test_table_lookup_and_define():
    table = SymbolTable()
    table.define("x", Number(1))
    assert table.lookup("x") == Number(1)
    assert "x" in table
    assert "X" not in table
    table.define("x", Number(2))
    assert table["x"] == Number(2)
    assert len(table) == 1
    assert list(table) == ["x"]


def test_table_lookup_unbound():
    with pytest.raises(UndefinedIdentifier) as exc:
        SymbolTable().lookup("nope")
    assert exc.value.name == "nope"


@pytest.mark.parametrize(
    "name,value",
    [
        ("x", 3.0),
        ("x", lambda args: args),
        ("", Number(1)),
        (3, Number(1)),
    ],
)
def test_table_rejects_invalid_bindings(name, value):
    with pytest.raises(InvalidBinding):
        SymbolTable().define(name, value)


def test_table_from_mapping_and_str():
    table = SymbolTable({"a": Number(1), "f": Function(lambda args: args[0])})
    assert str(table) == "{a: Number(1), f: Function}"
    assert repr(table) == "<SymbolTable {a: Number(1), f: Function}>"


# -----------------------------------------------------
# Values
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,expected",
    [
        (Number(7.0), "Number(7)"),
        (Number(-3.0), "Number(-3)"),
        (Number(0.5), "Number(0.5)"),
        (Number(-0.0), "Number(-0)"),
        (Number(math.inf), "Number(inf)"),
        (Number(-math.inf), "Number(-inf)"),
        (Number(math.nan), "Number(NaN)"),
        (Number(1e16), "Number(10000000000000000)"),
        (Number(1e20), "Number(100000000000000000000)"),
        (Number(1e-5), "Number(0.00001)"),
        (Number(0.1), "Number(0.1)"),
        (Number(2), "Number(2)"),
        (Function(lambda args: args), "Function"),
    ],
)
def test_value_display(value, expected):
    assert repr(value) == expected


def test_function_equality_is_identity():
    fn = lambda args: Number(0)  # noqa: E731
    f = Function(fn)
    assert f == f
    assert Function(fn) != Function(fn)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("10 ^ 16", "Number(10000000000000000)"),
        ("10 ^ 20", "Number(100000000000000000000)"),
        ("1 / 100000", "Number(0.00001)"),
    ],
)
def test_results_display_without_exponent(source, expected):
    assert repr(Expression(source).evaluate()) == expected


def test_number_coerces_to_float():
    assert type(Number(2).value) is float
    assert Number(2) == Number(2.0)
