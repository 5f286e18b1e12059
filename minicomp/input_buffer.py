"""Character source with a push-back stack, modelled on a read-once stream."""

from __future__ import annotations

EOF = ""
"""Value returned by :meth:`InputBuffer.get_char` once the text is exhausted."""


class InputBuffer:
    """Reads characters from a text, allowing any number of them to be pushed back.

    Like a stream, the end of input is only reported after a read has been
    attempted past the last character and no pushed-back characters remain.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0
        self._pushed: list[str] = []
        self._eof = False

    def get_char(self) -> str:
        """Return the next character, or :data:`EOF` when there is none."""
        if self._pushed:
            return self._pushed.pop()
        if self._position < len(self._text):
            c = self._text[self._position]
            self._position += 1
            return c
        self._eof = True
        return EOF

    def unget_char(self, c: str) -> str:
        """Push ``c`` back so that it is read next; :data:`EOF` is ignored."""
        if c != EOF:
            self._pushed.append(c)
        return c

    def unget_string(self, s: str) -> str:
        """Push ``s`` back so that its characters are read again in order."""
        self._pushed.extend(reversed(s))
        return s

    def end_of_input(self) -> bool:
        """True once a read has gone past the end and nothing is pushed back."""
        return not self._pushed and self._eof