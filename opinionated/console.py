"""Token-oriented console input and plain text output."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Reads characters, numbers and lines from a text stream and writes text.

    Reading follows the usual interactive rules: single characters and numbers
    skip leading whitespace, while whole lines are taken exactly as typed.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pushed: list[str] = []

    def _next(self) -> str:
        if self._pushed:
            return self._pushed.pop()
        return self._in.read(1)

    def _unread(self, ch: str) -> None:
        if ch:
            self._pushed.append(ch)

    def _skip_whitespace(self) -> str:
        ch = self._next()
        while ch and ch.isspace():
            ch = self._next()
        if not ch:
            raise EOFError("end of input")
        return ch

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._out.write(text)
        self._out.flush()

    def read_char(self) -> str:
        """Return the next non-whitespace character."""
        return self._skip_whitespace()

    def read_int(self) -> int:
        """Read an optionally signed whole number after any whitespace."""
        ch = self._skip_whitespace()
        text = ""
        if ch in "+-":
            text = ch
            ch = self._next()
        while ch and ch.isdigit():
            text += ch
            ch = self._next()
        self._unread(ch)
        if not text.lstrip("+-"):
            raise ValueError("expected a number")
        return int(text)

    def read_line(self) -> str:
        """Read up to the end of the line; the newline itself is dropped."""
        chars: list[str] = []
        ch = self._next()
        if not ch:
            raise EOFError("end of input")
        while ch and ch != "\n":
            chars.append(ch)
            ch = self._next()
        return "".join(chars)

    def ignore(self) -> None:
        """Discard a single character of input, if any is left."""
        self._next()

    def ask_yes_no(self, invalid_message: str) -> bool:
        """Read characters until Y or N is given; True means yes."""
        while True:
            ch = self.read_char()
            if ch in "yYnN":
                return ch in "yY"
            self.write(invalid_message)