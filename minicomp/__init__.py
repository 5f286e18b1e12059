"""Lexers, grammar analysis and an intermediate-code machine for small languages."""

__version__ = "0.1.0"

__all__ = [
    "input_buffer",
    "number_lexer",
    "grammar_lexer",
    "program_lexer",
    "grammar",
    "machine",
    "demo",
]