"""Lexer for a small expression language with real, octal and hexadecimal literals."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass
from enum import IntEnum

from .input_buffer import InputBuffer


class TokenType(IntEnum):
    END_OF_FILE = 0
    IF = 1
    WHILE = 2
    DO = 3
    THEN = 4
    PRINT = 5
    PLUS = 6
    MINUS = 7
    DIV = 8
    MULT = 9
    EQUAL = 10
    COLON = 11
    COMMA = 12
    SEMICOLON = 13
    LBRAC = 14
    RBRAC = 15
    LPAREN = 16
    RPAREN = 17
    NOTEQUAL = 18
    GREATER = 19
    LESS = 20
    LTEQ = 21
    GTEQ = 22
    DOT = 23
    NUM = 24
    ID = 25
    ERROR = 26
    REALNUM = 27
    BASE08NUM = 28
    BASE16NUM = 29


@dataclass(frozen=True)
class Token:
    lexeme: str
    token_type: IntEnum
    line_no: int

    def __str__(self) -> str:
        return f"{{{self.lexeme} , {self.token_type.name} , {self.line_no}}}"


_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _LETTERS
_SPACE = frozenset(" \t\n\v\f\r")


class _CharScanner:
    """Character-level helpers shared by the lexers."""

    def __init__(self, text: str) -> None:
        self._input = InputBuffer(text)
        self._line_no = 1

    def _make(self, lexeme: str, token_type: IntEnum) -> Token:
        return Token(lexeme, token_type, self._line_no)

    def _skip_space(self) -> bool:
        buf = self._input
        c = buf.get_char()
        self._line_no += c == "\n"
        encountered = False
        while not buf.end_of_input() and c in _SPACE:
            encountered = True
            c = buf.get_char()
            self._line_no += c == "\n"
        if not buf.end_of_input():
            buf.unget_char(c)
        return encountered

    def _read_while(self, allowed: frozenset[str]) -> str:
        """Read the longest run of characters in ``allowed``."""
        buf = self._input
        chars = []
        c = buf.get_char()
        while not buf.end_of_input() and c in allowed:
            chars.append(c)
            c = buf.get_char()
        if not buf.end_of_input():
            buf.unget_char(c)
        return "".join(chars)

    def _pick(self, followers: dict[str, IntEnum], fallback: IntEnum) -> IntEnum:
        """Choose a type by the next character, putting it back if it does not match."""
        buf = self._input
        c = buf.get_char()
        if c in followers:
            return followers[c]
        if not buf.end_of_input():
            buf.unget_char(c)
        return fallback

    def _leftover(self, end_type: IntEnum, error_type: IntEnum) -> Token:
        return self._make("", end_type if self._input.end_of_input() else error_type)


_KEYWORDS = {
    "IF": TokenType.IF,
    "WHILE": TokenType.WHILE,
    "DO": TokenType.DO,
    "THEN": TokenType.THEN,
    "PRINT": TokenType.PRINT,
}

_SINGLE_CHAR = {
    ".": TokenType.DOT,
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
}

_AFTER_LESS = {"=": TokenType.LTEQ, ">": TokenType.NOTEQUAL}
_AFTER_GREATER = {"=": TokenType.GTEQ}

_HEX_LETTERS = frozenset("ABCDEF")
_HEX_LETTERS_AFTER_A = frozenset("BCDEF")


class LexicalAnalyzer(_CharScanner):
    """Splits source text into tokens, tracking line numbers."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self._pushed: list[Token] = []

    def _scan_number(self) -> Token:
        buf = self._input
        c = buf.get_char()
        if c == "0":
            lexeme = "0"
            has_first_zero = True
            base_eight = False
        else:
            buf.unget_char(c)
            lexeme = self._read_while(_DIGITS)
            has_first_zero = False
            base_eight = any(ch in "89" for ch in lexeme[1:])

        first = buf.get_char()
        if first == "x":
            second = buf.get_char()
            if second == " ":
                buf.unget_char(second)
            if second in ("0", "1"):
                third = buf.get_char()
                if second == "0" and third == "8" and not base_eight:
                    return self._make(lexeme + "x08", TokenType.BASE08NUM)
                if second == "1" and third == "6":
                    return self._make(lexeme + "x16", TokenType.BASE16NUM)
                buf.unget_char(third)
                buf.unget_char(second)
            buf.unget_char(first)
        elif first == ".":
            fraction = self._read_while(_DIGITS)
            if fraction:
                buf.unget_string(fraction)
                if not (has_first_zero and all(ch == "0" for ch in fraction)):
                    lexeme += "." + self._read_while(_DIGITS)
                    return self._make(lexeme, TokenType.REALNUM)
            buf.unget_char(first)
        elif first in _HEX_LETTERS:
            buf.unget_char(first)
            read = [buf.get_char()]
            while (
                read[-1] in _DIGITS
                or (not buf.end_of_input() and read[-1] == "A")
                or read[-1] in _HEX_LETTERS_AFTER_A
            ):
                read.append(buf.get_char())
            if read[-1] == "x":
                read.append(buf.get_char())
                if read[-1] == "1":
                    read.append(buf.get_char())
                    if read[-1] == "6":
                        return self._make(lexeme + "".join(read), TokenType.BASE16NUM)
            buf.unget_string("".join(read))
        else:
            buf.unget_char(first)
        return self._make(lexeme, TokenType.NUM)

    def unget_token(self, token: Token) -> TokenType:
        """Push a token back; tokens must be returned in reverse order of reading."""
        self._pushed.append(token)
        return token.token_type

    def get_token(self) -> Token:
        """Return the next token, or an END_OF_FILE token at the end."""
        if self._pushed:
            return self._pushed.pop()

        buf = self._input
        self._skip_space()
        c = buf.get_char()
        if c in _SINGLE_CHAR:
            return self._make("", _SINGLE_CHAR[c])
        if c == "<":
            return self._make("", self._pick(_AFTER_LESS, TokenType.LESS))
        if c == ">":
            return self._make("", self._pick(_AFTER_GREATER, TokenType.GREATER))
        if c in _DIGITS:
            buf.unget_char(c)
            return self._scan_number()
        if c in _LETTERS:
            buf.unget_char(c)
            lexeme = self._read_while(_ALNUM)
            return self._make(lexeme, _KEYWORDS.get(lexeme, TokenType.ID))
        return self._leftover(TokenType.END_OF_FILE, TokenType.ERROR)


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, ending with the END_OF_FILE token."""
    lexer = LexicalAnalyzer(text)
    result = []
    while True:
        item = lexer.get_token()
        result.append(item)
        if item.token_type is TokenType.END_OF_FILE:
            return result


def main(argv: list[str] | None = None) -> int:
    """Print every token read from standard input, one per line."""
    parser = argparse.ArgumentParser(
        prog="minicomp-lex", description="Print the tokens of standard input."
    )
    parser.parse_args(argv)
    for item in tokenize(sys.stdin.read()):
        print(item)
    return 0


if __name__ == "__main__":
    sys.exit(main())