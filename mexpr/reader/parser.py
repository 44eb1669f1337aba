"""
  Recursive-descent parser for mexpr.

    atom    = (number | identifier | "+" | "-" | "*" | "/" | "%" | "^" | "(" expr ")")
              ("(" [expr ("," expr)*] ")")*
    primary = atom ("^" factor)?
    factor  = (("+" | "-") factor) | primary
    term    = factor (("*" | "/" | "%") factor)*
    expr    = term (("+" | "-") term)*

- One token of lookahead.
- Speculative attempts run on a clone of the parser; a successful clone is
  committed back with `_commit`, a failed one is simply dropped.
- Any failure raises ParseError immediately; no partial tree is returned.
- Nesting depth is bounded by the interpreter's recursion limit
  (RecursionError on pathological input).
"""

from __future__ import annotations

from typing import Optional

from mexpr.errors import ParseError
from mexpr.reader.tokens import Token, TokenKind, Tokens
from mexpr.reader.tree import Call, Identifier, NumberLiteral, SyntaxTree, binary, unary


OPERATOR_KINDS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.STAR,
    TokenKind.SLASH,
    TokenKind.PERCENT,
    TokenKind.CARET,
})

ATOM_KINDS: tuple[TokenKind, ...] = (
    TokenKind.NUMBER,
    TokenKind.IDENTIFIER,
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.STAR,
    TokenKind.SLASH,
    TokenKind.PERCENT,
    TokenKind.CARET,
    TokenKind.LEFT_PARENTHESIS,
)

SIGN_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS})
TERM_KINDS = frozenset({TokenKind.STAR, TokenKind.SLASH, TokenKind.PERCENT})
# A sign followed by one of these may be a bare operand rather than a unary sign
SIGN_OPERAND_KINDS = TERM_KINDS | {TokenKind.CARET}


class Parser:
    __slots__ = ("tokens", "buffer")

    def __init__(self, source: str | Tokens):
        self.tokens: Tokens = source if isinstance(source, Tokens) else Tokens(source)
        self.buffer: Optional[Token] = None

    # --- Cursor ---
    def peek(self) -> Token:
        if self.buffer is None:
            self.buffer = next(self.tokens)
        return self.buffer

    def advance(self) -> Token:
        token = self.peek()
        self.buffer = None
        return token

    def clone(self) -> Parser:
        other = Parser(self.tokens.copy())
        other.buffer = self.buffer
        return other

    def _commit(self, other: Parser) -> None:
        self.tokens = other.tokens
        self.buffer = other.buffer

    def _expect(self, kind: TokenKind) -> Token:
        token = self.advance()
        if token.kind is not kind:
            raise ParseError((kind,), token)
        return token

    # --- Grammar ---
    def atom(self) -> SyntaxTree:
        token = self.advance()
        if token.kind is TokenKind.NUMBER:
            tree: SyntaxTree = NumberLiteral(float(token.lexeme))
        elif token.kind is TokenKind.IDENTIFIER or token.kind in OPERATOR_KINDS:
            tree = Identifier(token.lexeme)
        elif token.kind is TokenKind.LEFT_PARENTHESIS:
            tree = self.expr()
            self._expect(TokenKind.RIGHT_PARENTHESIS)
        else:
            raise ParseError(ATOM_KINDS, token)

        while self.peek().kind is TokenKind.LEFT_PARENTHESIS:
            self.advance()
            arguments: list[SyntaxTree] = []
            attempt = self.clone()
            try:
                first = attempt.expr()
            except ParseError:
                pass  # no first argument: only `()` is acceptable now
            else:
                self._commit(attempt)
                arguments.append(first)
                while self.peek().kind is TokenKind.COMMA:
                    self.advance()
                    arguments.append(self.expr())
            self._expect(TokenKind.RIGHT_PARENTHESIS)
            tree = Call(tree, tuple(arguments))
        return tree

    def primary(self) -> SyntaxTree:
        tree = self.atom()
        if self.peek().kind is TokenKind.CARET:
            self.advance()
            tree = binary("^", tree, self.factor())
        return tree

    def factor(self) -> SyntaxTree:
        sign = self.peek()
        if sign.kind not in SIGN_KINDS:
            return self.primary()

        attempt = self.clone()
        attempt.advance()
        if attempt.peek().kind in SIGN_OPERAND_KINDS:
            lookahead = attempt.clone()
            try:
                lookahead.factor()
                lookahead.factor()
            except ParseError:
                pass
            else:
                # The sign is the left operand of the following operator
                return self.primary()

        try:
            operand = attempt.factor()
        except ParseError:
            # Not a unary sign; read it as a bare operator value
            return self.primary()
        self._commit(attempt)
        return unary(sign.lexeme, operand)

    def term(self) -> SyntaxTree:
        tree = self.factor()
        while self.peek().kind in TERM_KINDS:
            operator = self.advance()
            tree = binary(operator.lexeme, tree, self.factor())
        return tree

    def expr(self) -> SyntaxTree:
        tree = self.term()
        while self.peek().kind in SIGN_KINDS:
            operator = self.advance()
            tree = binary(operator.lexeme, tree, self.term())
        return tree

    def parse(self) -> SyntaxTree:
        """Parse a whole expression; the input must end right after it."""
        tree = self.expr()
        self._expect(TokenKind.END_OF_FILE)
        return tree


def parse(source: str) -> SyntaxTree:
    return Parser(source).parse()
