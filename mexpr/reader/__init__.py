"""Tokenizer, syntax tree and parser."""
