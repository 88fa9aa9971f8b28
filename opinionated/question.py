"""Survey questions, their answers and their binary form."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from .console import Console

_INT = struct.Struct("<i")
_BOOL = struct.Struct("<?")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unexpected end of question data")
    return data


def _read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def _read_bool(stream: BinaryIO) -> bool:
    return _BOOL.unpack(_read_exact(stream, _BOOL.size))[0]


def _read_text(stream: BinaryIO) -> str:
    size = _read_int(stream)
    if size < 0:
        raise ValueError(f"negative text length {size}")
    return _read_exact(stream, size).decode("utf-8")


def _write_text(stream: BinaryIO, text: str) -> None:
    data = text.encode("utf-8")
    stream.write(_INT.pack(len(data)))
    stream.write(data)


@dataclass
class Answer:
    """One possible answer: preset text, or a custom fill-in when custom is set."""

    text: str = ""
    chosen: int = 0
    custom: bool = False


@dataclass
class Question:
    """A question with its answers; multiple_choice False means single choice."""

    text: str = ""
    answers: list[Answer] = field(default_factory=list)
    total_responses: int = 0
    multiple_choice: bool = False

    def add_answer(self, answer: Answer) -> None:
        """Append an answer to the end of the list."""
        self.answers.append(answer)

    def remove_answer(self, index: int) -> Answer:
        """Remove and return the answer at a zero-based index."""
        if not 0 <= index < len(self.answers):
            raise IndexError(f"no answer at position {index}")
        return self.answers.pop(index)

    def format(self) -> str:
        """The question text followed by its numbered answers and a blank line."""
        lines = [self.text]
        lines.extend(f"{n}) {answer.text}" for n, answer in enumerate(self.answers, 1))
        return "\n".join(lines) + "\n\n"

    def write(self, stream: BinaryIO) -> None:
        """Write the question in its binary form."""
        _write_text(stream, self.text)
        stream.write(_INT.pack(len(self.answers)))
        for answer in self.answers:
            _write_text(stream, answer.text)
            stream.write(_INT.pack(answer.chosen))
            stream.write(_BOOL.pack(answer.custom))
        stream.write(_INT.pack(self.total_responses))
        stream.write(_BOOL.pack(self.multiple_choice))

    @classmethod
    def read(cls, stream: BinaryIO) -> Question:
        """Read a question written by write()."""
        text = _read_text(stream)
        count = _read_int(stream)
        if count < 0:
            raise ValueError(f"negative answer count {count}")
        answers = [
            Answer(_read_text(stream), _read_int(stream), _read_bool(stream))
            for _ in range(count)
        ]
        total = _read_int(stream)
        multiple = _read_bool(stream)
        return cls(text, answers, total, multiple)


def prompt_answer(console: Console) -> Answer:
    """Ask whether the answer is preset and, if so, for its text."""
    console.write("Is this a preset answer? (Y/N) ")
    if console.ask_yes_no("Invalid choice. Please re-enter\n"):
        console.write("Enter the answer text: ")
        console.ignore()
        return Answer(console.read_line(), 0, False)
    return Answer("", 0, True)