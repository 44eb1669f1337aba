from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from mexpr.reader.tokens import Token, TokenKind
    from mexpr.types.value import Value


class MexprError(Exception):
    """ Base class for all mexpr errors"""
    pass


class InvalidBinding(MexprError):
    """ Raised when a symbol table entry is not a name bound to a Value"""
    pass


class ParseError(MexprError):
    """ Raised when the source text does not match the grammar.

    `expected` lists the token kinds that would have been accepted at the
    point of failure (possibly none), `found` is the offending token.
    """

    def __init__(self, expected: Sequence[TokenKind], found: Token):
        self.expected: tuple[TokenKind, ...] = tuple(expected)
        self.found: Token = found
        super().__init__(self._message())

    def _message(self) -> str:
        if self.expected:
            kinds = " or ".join(str(kind) for kind in self.expected)
            return f"expected a token of type {kinds} but found {self.found}"
        return f"found {self.found}"


class ExpressionError(MexprError):
    """ Base class for errors raised while evaluating a syntax tree"""
    pass


class UndefinedIdentifier(ExpressionError):
    """ Raised when a name has no binding in the symbol table"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'undefined identifier "{name}"')

    def __repr__(self):
        return f"UndefinedIdentifier({self.name!r})"


class InvalidFunction(ExpressionError):
    """ Raised when a non-function value is called"""

    def __init__(self, value: Value):
        self.value = value
        super().__init__(f"invalid function {value!r}")

    def __repr__(self):
        return f"InvalidFunction({self.value!r})"


class InvalidArguments(ExpressionError):
    """ Raised when a function does not accept the arity or variants it was given"""

    def __init__(self, values: Sequence[Value]):
        self.values = list(values)
        super().__init__(f"invalid arguments {self.values!r}")

    def __repr__(self):
        return f"InvalidArguments({self.values!r})"


class FunctionCallFailure(ExpressionError):
    """ Raised when a call fails; wraps the error raised inside the call"""

    def __init__(self, inner: BaseException):
        self.inner = inner
        super().__init__(f"function call failure {inner!r}")

    def __repr__(self):
        return f"FunctionCallFailure({self.inner!r})"
