"""mexpr Language Server package.

This package provides:
- A pygls-based Language Server for mexpr expression files.
- A static indexer that tokenizes and parses each line without evaluating it.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
