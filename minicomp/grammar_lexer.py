"""Lexer for context-free grammar descriptions: identifiers, arrows, stars and hashes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .number_lexer import _ALNUM, _LETTERS, _CharScanner
from .number_lexer import Token as _BaseToken


class TokenType(IntEnum):
    END_OF_FILE = 0
    ARROW = 1
    STAR = 2
    HASH = 3
    ID = 4
    ERROR = 5


class Token(_BaseToken):
    """A token of a grammar description."""


class _PreScannedLexer(_CharScanner, ABC):
    """Scans the whole text into a token list up front and serves it with look-ahead."""

    _end_of_file: IntEnum
    _token_class: type = _BaseToken

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self._tokens: list = []
        self._index = 0
        while (scanned := self._scan_token()).token_type is not self._end_of_file:
            self._tokens.append(scanned)

    @abstractmethod
    def _scan_token(self):
        """Scan one token from the input."""

    def _make(self, lexeme, token_type):
        base = super()._make(lexeme, token_type)
        if isinstance(base, self._token_class):
            return base
        return self._token_class(
            lexeme=base.lexeme, token_type=base.token_type, line_no=base.line_no
        )

    def _end_token(self):
        return self._make("", self._end_of_file)

    def get_token(self):
        """Return the next token, or an END_OF_FILE token once all are consumed."""
        if self._index >= len(self._tokens):
            return self._end_token()
        result = self._tokens[self._index]
        self._index += 1
        return result

    def peek(self, how_far: int):
        """Return the token ``how_far`` positions ahead without consuming anything."""
        if how_far <= 0:
            raise ValueError("peek requires a positive distance")
        peek_index = self._index + how_far - 1
        if peek_index >= len(self._tokens):
            return self._end_token()
        return self._tokens[peek_index]


_SINGLE_CHAR = {"#": TokenType.HASH, "*": TokenType.STAR}
_AFTER_DASH = {">": TokenType.ARROW}


class LexicalAnalyzer(_PreScannedLexer):
    """Grammar lexer with look-ahead over a pre-scanned token list."""

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

    def _scan_token(self) -> Token:
        buf = self._input
        self._skip_space()
        if buf.end_of_input():
            return self._end_token()
        c = buf.get_char()
        if c == "-":
            return self._make("", self._pick(_AFTER_DASH, TokenType.ERROR))
        if c in _SINGLE_CHAR:
            return self._make("", _SINGLE_CHAR[c])
        if c in _LETTERS:
            buf.unget_char(c)
            return self._make(self._read_while(_ALNUM), TokenType.ID)
        return self._leftover(TokenType.END_OF_FILE, TokenType.ERROR)