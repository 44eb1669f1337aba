"""Command line front end: evaluate one line and print the value or the error.

    $ echo "(sin + cos)(0)" | python -m mexpr
    Number(1)
    $ python -m mexpr "2 ^ 3 ^ 2"
    Number(512)
"""
from __future__ import annotations

import sys
from typing import Optional

from mexpr.builtin import register_groups
from mexpr.config import get_builtin_groups
from mexpr.errors import ExpressionError, ParseError
from mexpr.expression import Expression


def run(source: str) -> tuple[str, bool]:
    """Evaluate `source`; returns the text to print and whether it succeeded."""
    try:
        expr = Expression(source)
    except ParseError as err:
        return f"ParseError: {err}", False
    register_groups(expr.table, get_builtin_groups())
    try:
        value = expr.evaluate()
    except ExpressionError as err:
        return str(err), False
    return repr(value), True


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    source = " ".join(argv) if argv else sys.stdin.readline()
    output, ok = run(source)
    print(output)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
