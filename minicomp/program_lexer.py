"""Lexer for the small imperative language compiled to the instruction machine."""

from __future__ import annotations

from enum import IntEnum

from .grammar_lexer import _PreScannedLexer
from .number_lexer import _ALNUM, _DIGITS, _LETTERS
from .number_lexer import Token as _BaseToken


class TokenType(IntEnum):
    END_OF_FILE = 0
    VAR = 1
    FOR = 2
    IF = 3
    WHILE = 4
    SWITCH = 5
    CASE = 6
    DEFAULT = 7
    INPUT = 8
    OUTPUT = 9
    ARRAY = 10
    PLUS = 11
    MINUS = 12
    DIV = 13
    MULT = 14
    EQUAL = 15
    COLON = 16
    COMMA = 17
    SEMICOLON = 18
    LBRAC = 19
    RBRAC = 20
    LPAREN = 21
    RPAREN = 22
    LBRACE = 23
    RBRACE = 24
    NOTEQUAL = 25
    GREATER = 26
    LESS = 27
    NUM = 28
    ID = 29
    ERROR = 30


class Token(_BaseToken):
    """A token of a program in the small imperative language."""


# "ARRAY" has a token type but is not recognised as a keyword.
_KEYWORDS = {
    "VAR": TokenType.VAR,
    "FOR": TokenType.FOR,
    "IF": TokenType.IF,
    "WHILE": TokenType.WHILE,
    "SWITCH": TokenType.SWITCH,
    "CASE": TokenType.CASE,
    "DEFAULT": TokenType.DEFAULT,
    "input": TokenType.INPUT,
    "output": TokenType.OUTPUT,
}

_SINGLE_CHAR = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.DIV,
    "*": TokenType.MULT,
    "=": TokenType.EQUAL,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "[": TokenType.LBRAC,
    "]": TokenType.RBRAC,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ">": TokenType.GREATER,
}

_AFTER_LESS = {">": TokenType.NOTEQUAL}


class LexicalAnalyzer(_PreScannedLexer):
    """Program lexer with look-ahead and unget over a pre-scanned token list."""

    _end_of_file = TokenType.END_OF_FILE
    _token_class = Token

    def __init__(self, text: str) -> None:
        super().__init__(text)

    def get_token(self) -> Token:
        """Return the next token, or an END_OF_FILE token once all are consumed."""
        return super().get_token()

    def peek(self, how_far: int) -> Token:
        """Return the token ``how_far`` positions ahead without consuming anything."""
        return super().peek(how_far)

    def _scan_number(self) -> Token:
        buf = self._input
        c = buf.get_char()
        if c == "0":
            return self._make("0", TokenType.NUM)
        buf.unget_char(c)
        return self._make(self._read_while(_DIGITS), TokenType.NUM)

    def _scan_token(self) -> Token:
        buf = self._input
        self._skip_space()
        c = buf.get_char()
        if c in _SINGLE_CHAR:
            return self._make("", _SINGLE_CHAR[c])
        if c == "<":
            return self._make("", self._pick(_AFTER_LESS, TokenType.LESS))
        if c in _DIGITS:
            buf.unget_char(c)
            return self._scan_number()
        if c in _LETTERS:
            buf.unget_char(c)
            lexeme = self._read_while(_ALNUM)
            return self._make(lexeme, _KEYWORDS.get(lexeme, TokenType.ID))
        return self._leftover(TokenType.END_OF_FILE, TokenType.ERROR)

    def unget_token(self, how_many: int) -> None:
        """Step back ``how_many`` real tokens; END_OF_FILE results are not counted."""
        if how_many <= 0:
            raise ValueError("unget_token requires a positive count")
        if self._index - how_many < 0:
            raise ValueError("unget_token count exceeds the tokens read")
        self._index -= how_many