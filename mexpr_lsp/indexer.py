from __future__ import annotations

"""
Static indexer for mexpr documents; nothing is evaluated.

Every non-blank line is one expression. For each line we record:
- parse errors, positioned at the offending token
- identifier uses, and which of them no builtin binds

That is enough to power the language server's diagnostics, hover and
completion.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from mexpr.builtin import register_groups
from mexpr.config import get_builtin_groups
from mexpr.errors import ParseError
from mexpr.reader.parser import parse
from mexpr.reader.tokens import TokenKind, lex
from mexpr.types.symbol_table import SymbolTable


BUILTIN_SIGNATURES = {
    "+": "+(a, b) | +(a): sum or identity; lifted over functions",
    "-": "-(a, b) | -(a): difference or negation; lifted over functions",
    "*": "*(a, b): product; lifted over functions",
    "/": "/(a, b): quotient; lifted over functions",
    "%": "%(a, b): truncated remainder; lifted over functions",
    "^": "^(a, b): power; lifted over functions",
    "π": "π: 3.141592653589793",
    "τ": "τ: 2π",
    "sin": "sin(x): sine of x radians",
    "cos": "cos(x): cosine of x radians",
    "tan": "tan(x): tangent of x radians",
    "asin": "asin(x): arcsine, in radians",
    "acos": "acos(x): arccosine, in radians",
    "atan": "atan(x): arctangent, in radians",
}


@dataclass
class SyntaxProblem:
    line: int
    col: int
    length: int
    message: str


@dataclass
class IdentifierUse:
    name: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    errors: List[SyntaxProblem] = field(default_factory=list)
    identifiers: List[IdentifierUse] = field(default_factory=list)
    unbound: List[IdentifierUse] = field(default_factory=list)

    def names(self) -> Set[str]:
        return {use.name for use in self.identifiers}


def known_names(groups: Optional[Iterable[str]] = None) -> Set[str]:
    """Names bound in a fresh table once the builtin groups are registered."""
    table = SymbolTable.with_operators()
    register_groups(table, get_builtin_groups() if groups is None else groups)
    return set(table.names())


def build_index(text: str, known: Optional[Set[str]] = None) -> DocumentIndex:
    if known is None:
        known = known_names()
    idx = DocumentIndex()
    for line_no, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        for token in lex(line):
            if token.kind is TokenKind.IDENTIFIER:
                use = IdentifierUse(token.lexeme, line_no, token.offset)
                idx.identifiers.append(use)
                if token.lexeme not in known:
                    idx.unbound.append(use)
        try:
            parse(line)
        except ParseError as err:
            found = err.found
            idx.errors.append(
                SyntaxProblem(line_no, found.offset, max(len(found.lexeme), 1), str(err))
            )
    return idx
