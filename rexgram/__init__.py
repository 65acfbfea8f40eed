"""Tokenizer and parser that turn regular-expression patterns into a syntax tree."""

__version__ = "0.1.0"
__all__ = ["tokens", "syntax", "parser"]