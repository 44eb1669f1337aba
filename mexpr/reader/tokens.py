"""
  Tokens and the lazy tokenizer.

- `Tokens` is a cursor over the source string; every call to `next()`
  produces one token and advances the cursor past it.
- The stream never ends: once the input is exhausted it keeps yielding
  EndOfFile tokens, so the parser can always peek one token ahead.
- Copying a cursor is cheap (source reference + integer position), which
  is what the parser's speculative attempts rely on.
- `lex()` is the finite view: every token up to and including the first
  EndOfFile.

Lexeme boundaries are exact; error messages echo lexemes verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TokenKind(Enum):
    UNKNOWN = "Unknown"
    END_OF_FILE = "EndOfFile"
    NUMBER = "Number"
    IDENTIFIER = "Identifier"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    PERCENT = "Percent"
    CARET = "Caret"
    COMMA = "Comma"
    LEFT_PARENTHESIS = "LeftParenthesis"
    RIGHT_PARENTHESIS = "RightParenthesis"

    def __str__(self) -> str:
        return self.value


# Kinds whose lexeme is shown when a token is displayed
_SHOWS_LEXEME = frozenset({TokenKind.UNKNOWN, TokenKind.NUMBER, TokenKind.IDENTIFIER})

SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    ",": TokenKind.COMMA,
    "(": TokenKind.LEFT_PARENTHESIS,
    ")": TokenKind.RIGHT_PARENTHESIS,
}

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    offset: int = 0  # index of the lexeme in the source

    def __str__(self) -> str:
        if self.kind in _SHOWS_LEXEME:
            return f"{self.kind}({self.lexeme})"
        return str(self.kind)


def _digit_at(source: str, pos: int) -> bool:
    return pos < len(source) and source[pos] in _DIGITS


def _skip_digits(source: str, pos: int) -> int:
    while _digit_at(source, pos):
        pos += 1
    return pos


def _scan_number(source: str, pos: int) -> int:
    """Return the end of the number starting at `pos` (digits or '.' + digit)."""
    end = _skip_digits(source, pos)
    if end < len(source) and source[end] == ".":
        end = _skip_digits(source, end + 1)
    # The exponent only belongs to the number if a digit follows e[+-]
    if end < len(source) and source[end] in "eE":
        probe = end + 1
        if probe < len(source) and source[probe] in "+-":
            probe += 1
        if _digit_at(source, probe):
            end = _skip_digits(source, probe)
    return end


def _starts_token(source: str, pos: int) -> bool:
    """True if the character at `pos` begins a non-Unknown token or whitespace."""
    ch = source[pos]
    return (
        ch.isspace()
        or ch in _DIGITS
        or ch.isalpha()
        or (ch == "." and _digit_at(source, pos + 1))
        or ch in SINGLE_CHAR_KINDS
    )


class Tokens:
    """Infinite, copyable token cursor over a source string."""

    __slots__ = ("source", "pos")

    def __init__(self, source: str, pos: int = 0):
        self.source: str = source
        self.pos: int = pos

    def copy(self) -> Tokens:
        return Tokens(self.source, self.pos)

    def __iter__(self) -> Tokens:
        return self

    def __next__(self) -> Token:
        source = self.source
        n = len(source)
        pos = self.pos
        while pos < n and source[pos].isspace():
            pos += 1

        if pos >= n:
            self.pos = n
            return Token(TokenKind.END_OF_FILE, "", n)

        ch = source[pos]
        if ch in _DIGITS or (ch == "." and _digit_at(source, pos + 1)):
            end = _scan_number(source, pos)
            kind = TokenKind.NUMBER
        elif ch.isalpha() or ch == "_":
            end = pos + 1
            while end < n and (source[end].isalnum() or source[end] == "_"):
                end += 1
            kind = TokenKind.IDENTIFIER
        elif ch in SINGLE_CHAR_KINDS:
            end = pos + 1
            kind = SINGLE_CHAR_KINDS[ch]
        else:
            # Coalesce anything unrecognised into one maximal Unknown run
            end = pos + 1
            while end < n and not _starts_token(source, end):
                end += 1
            kind = TokenKind.UNKNOWN

        self.pos = end
        return Token(kind, source[pos:end], pos)

    def __repr__(self) -> str:
        return f"Tokens(pos={self.pos}, rest={self.source[self.pos:]!r})"


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token through the first EndOfFile."""
    tokens = Tokens(source)
    while True:
        token = next(tokens)
        yield token
        if token.kind is TokenKind.END_OF_FILE:
            return
