import math

import pytest

from mexpr.builtin.operators import OPERATORS
from mexpr.errors import InvalidArguments
from mexpr.types.value import Function, Number


def const(value):
    return Function(lambda args: Number(value))


def first_arg():
    return Function(lambda args: args[0])


@pytest.mark.parametrize(
    "symbol,left,right,expected",
    [
        ("+", 3, 4, 7),
        ("-", 3, 4, -1),
        ("*", 3, 4, 12),
        ("/", 3, 4, 0.75),
        ("%", 10, 3, 1),
        ("%", -7, 3, -1),  # truncated, sign of the dividend
        ("%", 7, -3, 1),
        ("^", 2, 10, 1024),
        ("^", 4, 0.5, 2),
        ("/", 1, 0, math.inf),
        ("/", -1, 0, -math.inf),
        ("^", 10, 400, math.inf),
    ],
)
def test_numbers(symbol, left, right, expected):
    assert OPERATORS[symbol]([Number(left), Number(right)]) == Number(expected)


@pytest.mark.parametrize(
    "symbol,left,right",
    [
        ("/", 0, 0),
        ("%", 5, 0),
        ("^", -8, 1 / 3),
    ],
)
def test_not_a_number_results(symbol, left, right):
    result = OPERATORS[symbol]([Number(left), Number(right)])
    assert isinstance(result, Number)
    assert math.isnan(result.value)


def test_unary_plus_and_minus():
    assert OPERATORS["+"]([Number(5)]) == Number(5)
    assert OPERATORS["-"]([Number(5)]) == Number(-5)


@pytest.mark.parametrize("symbol", ["*", "/", "%", "^"])
def test_single_operand_rejected_for_binary_only(symbol):
    with pytest.raises(InvalidArguments) as exc:
        OPERATORS[symbol]([Number(1)])
    assert exc.value.values == [Number(1)]


@pytest.mark.parametrize("symbol", sorted(OPERATORS))
@pytest.mark.parametrize("args", [[], [Number(1), Number(2), Number(3)]])
def test_wrong_arity_rejected(symbol, args):
    with pytest.raises(InvalidArguments):
        OPERATORS[symbol](args)


@pytest.mark.parametrize(
    "symbol,expected",
    [
        ("+", 10),
        ("-", 4),
        ("*", 21),
        ("/", 7 / 3),
        ("%", 1),
        ("^", 343),
    ],
)
def test_function_with_function_is_pointwise(symbol, expected):
    lifted = OPERATORS[symbol]([first_arg(), const(3)])
    assert isinstance(lifted, Function)
    assert lifted([Number(7)]) == Number(expected)


def test_function_and_number_keep_operand_order():
    minus = OPERATORS["-"]
    assert minus([first_arg(), Number(1)])([Number(10)]) == Number(9)
    assert minus([Number(1), first_arg()])([Number(10)]) == Number(-9)

    power = OPERATORS["^"]
    assert power([Number(2), first_arg()])([Number(3)]) == Number(8)
    assert power([first_arg(), Number(2)])([Number(3)]) == Number(9)


def test_both_functions_receive_the_same_arguments():
    seen = []

    def record(args):
        seen.append(list(args))
        return Number(len(args))

    lifted = OPERATORS["+"]([Function(record), Function(record)])
    assert lifted([Number(1), Number(2)]) == Number(4)
    assert seen == [[Number(1), Number(2)], [Number(1), Number(2)]]


def test_unary_on_function_is_deferred():
    negated = OPERATORS["-"]([first_arg()])
    assert isinstance(negated, Function)
    assert negated([Number(4)]) == Number(-4)
    assert OPERATORS["+"]([first_arg()])([Number(4)]) == Number(4)


def test_lifting_composes():
    # (f + 1) * f  evaluated at 3 -> (3 + 1) * 3
    f = first_arg()
    plus_one = OPERATORS["+"]([f, Number(1)])
    product = OPERATORS["*"]([plus_one, f])
    assert product([Number(3)]) == Number(12)


def test_captured_functions_are_shared_not_copied():
    f = first_arg()
    doubled = OPERATORS["+"]([f, f])
    assert doubled([Number(2)]) == Number(4)
    # the original is still usable on its own
    assert f([Number(2)]) == Number(2)


def test_inner_failure_propagates():
    def reject(args):
        raise InvalidArguments(args)

    lifted = OPERATORS["+"]([Function(reject), Number(1)])
    with pytest.raises(InvalidArguments) as exc:
        lifted([Number(5)])
    assert exc.value.values == [Number(5)]


def test_function_operands_get_their_own_argument_list():
    def pop_last(args):
        return args.pop()

    lifted = OPERATORS["+"]([Function(pop_last), Function(lambda args: args[-1])])
    assert lifted([Number(1), Number(2)]) == Number(4)
    lifted = OPERATORS["-"]([Function(pop_last)])
    assert lifted([Number(1), Number(2)]) == Number(-2)


@pytest.mark.parametrize(
    "left,right,expected",
    [
        (2, 3, 8),
        (10, 400, math.inf),
        (-2, 0.5, math.nan),
    ],
)
def test_integer_operands_use_float_arithmetic(left, right, expected):
    result = OPERATORS["^"]([Number(left), Number(right)])
    if math.isnan(expected):
        assert math.isnan(result.value)
    else:
        assert result == Number(expected)
    assert type(result.value) is float
