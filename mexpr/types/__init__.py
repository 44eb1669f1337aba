"""Runtime values and the symbol table."""
