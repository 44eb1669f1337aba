# mexpr: one-line arithmetic expressions over first-class operators.
#
# Every name in a symbol table, the operators "+ - * / % ^" included, is bound
# to a Value: a Number or a Function. The operators are lifted over Functions,
# so `(sin + cos)(0)` and `(2 * sin)(x)` need no closure syntax.
#
# Layout:
# - reader:      tokenizer, syntax tree and parser
# - types:       Values and the SymbolTable
# - builtin:     the lifted operators and optional named groups (math)
# - evaluation:  the tree-walking evaluator

from mexpr.errors import (
    MexprError,
    InvalidBinding,
    ParseError,
    ExpressionError,
    UndefinedIdentifier,
    InvalidFunction,
    InvalidArguments,
    FunctionCallFailure,
)
from mexpr.reader.tokens import Token, TokenKind, Tokens, lex
from mexpr.reader.tree import NumberLiteral, Identifier, Call, SyntaxTree
from mexpr.reader.parser import Parser, parse
from mexpr.types.value import Number, Function, Value
from mexpr.types.symbol_table import SymbolTable
from mexpr.evaluation.evaluator import evaluate
from mexpr.expression import Expression

__version__ = "0.1.0"

__all__ = [
    "MexprError",
    "InvalidBinding",
    "ParseError",
    "ExpressionError",
    "UndefinedIdentifier",
    "InvalidFunction",
    "InvalidArguments",
    "FunctionCallFailure",
    "Token",
    "TokenKind",
    "Tokens",
    "lex",
    "NumberLiteral",
    "Identifier",
    "Call",
    "SyntaxTree",
    "Parser",
    "parse",
    "Number",
    "Function",
    "Value",
    "SymbolTable",
    "evaluate",
    "Expression",
]
