"""Surveys, their binary form and the index of survey IDs."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from .console import Console
from .question import Question, prompt_answer

_INT = struct.Struct("<i")

_ANSWER_MENU = "[1] Add Answer\n[2] Delete Answer\n[3] Exit Menu\n>> "
_ANSWER_NUMBER = "Enter answer number: "
_INVALID_CHOICE = "Invalid choice.\n"


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unexpected end of survey data")
    return data


def _read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def _read_text(stream: BinaryIO) -> str:
    size = _read_int(stream)
    if size < 0:
        raise ValueError(f"negative text length {size}")
    return _read_exact(stream, size).decode("utf-8")


def _write_text(stream: BinaryIO, text: str) -> None:
    data = text.encode("utf-8")
    stream.write(_INT.pack(len(data)))
    stream.write(data)


class SurveyIndex:
    """The file listing every survey ID in use: a count followed by the sorted IDs."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def ids(self) -> list[int]:
        """The IDs currently recorded; an absent or empty file holds none."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        if not data:
            return []
        count = _INT.unpack_from(data)[0]
        if count < 0:
            raise ValueError(f"negative survey count {count}")
        body = data[_INT.size:]
        if len(body) < count * _INT.size:
            raise EOFError("survey index is shorter than its count")
        return list(struct.unpack_from(f"<{count}i", body))

    def _store(self, ids: list[int]) -> None:
        self.path.write_bytes(_INT.pack(len(ids)) + struct.pack(f"<{len(ids)}i", *ids))

    def allocate(self) -> int:
        """Record and return a new ID, reusing the lowest gap left by a deletion."""
        ids = self.ids()
        new_id = next(
            (position for position, survey_id in enumerate(ids, 1) if survey_id > position),
            len(ids) + 1,
        )
        ids.append(new_id)
        ids.sort()
        self._store(ids)
        return new_id

    def remove_at(self, position: int) -> int:
        """Remove and return the ID at a zero-based position in the index."""
        ids = self.ids()
        if not 0 <= position < len(ids):
            raise IndexError(f"no survey at position {position}")
        removed = ids.pop(position)
        self._store(ids)
        return removed

    def contains(self, survey_id: int) -> bool:
        """Whether the ID is recorded in the index."""
        return survey_id in self.ids()


@dataclass
class Survey:
    """A named survey with a description and its questions."""

    id: int = 0
    name: str = ""
    about: str = ""
    questions: list[Question] = field(default_factory=list)

    def add_question(self, question: Question) -> None:
        """Append a question to the survey."""
        self.questions.append(question)

    def remove_question(self, index: int) -> Question:
        """Remove and return the question at a zero-based index."""
        if not 0 <= index < len(self.questions):
            raise IndexError(f"no question at position {index}")
        return self.questions.pop(index)

    def write(self, stream: BinaryIO) -> None:
        """Write the survey in its binary form."""
        stream.write(_INT.pack(self.id))
        _write_text(stream, self.name)
        _write_text(stream, self.about)
        stream.write(_INT.pack(len(self.questions)))
        for question in self.questions:
            question.write(stream)

    @classmethod
    def read(cls, stream: BinaryIO) -> Survey:
        """Read a survey written by write()."""
        survey_id = _read_int(stream)
        name = _read_text(stream)
        about = _read_text(stream)
        count = _read_int(stream)
        if count < 0:
            raise ValueError(f"negative question count {count}")
        questions = [Question.read(stream) for _ in range(count)]
        return cls(survey_id, name, about, questions)

    def response_report(self, index: int) -> str:
        """The question text and, per answer, its times chosen over the survey's
        question count (whole-number division) as a percentage."""
        if not 0 <= index < len(self.questions):
            raise IndexError(f"no question at position {index}")
        question = self.questions[index]
        count = len(self.questions)
        lines = [question.text]
        for number, answer in enumerate(question.answers, 1):
            percent = float(int(answer.chosen / count) * 100)
            lines.append(f"{number}) {answer.text}\t\t{percent:.2f}")
        return "\n".join(lines) + "\n\n"

    def modify_question(self, index: int, console: Console) -> None:
        """Menu for adding answers to, or deleting answers from, one question."""
        if not 0 <= index < len(self.questions):
            raise IndexError(f"no question at position {index}")
        question = self.questions[index]
        while True:
            console.write(_ANSWER_MENU)
            choice = console.read_char()
            if choice == "1":
                question.add_answer(prompt_answer(console))
            elif choice == "2":
                console.write(question.format())
                if not question.answers:
                    console.write(_INVALID_CHOICE)
                    continue
                while True:
                    console.write(_ANSWER_NUMBER)
                    number = console.read_int()
                    if 1 <= number <= len(question.answers):
                        break
                    console.write(_INVALID_CHOICE)
                question.remove_answer(number - 1)
            elif choice == "3":
                return
            else:
                console.write(_INVALID_CHOICE)


def prompt_question(console: Console) -> Question:
    """Ask for a question's text, its answers and whether it is single choice."""
    question = Question()
    console.write("Enter the question text: ")
    question.text = console.read_line()
    console.write("How many answers will this question have: ")
    for _ in range(console.read_int()):
        question.add_answer(prompt_answer(console))
    console.write("Does this question only allow one response? (Y/N) ")
    question.multiple_choice = not console.ask_yes_no("Invalid choice. Please re-enter.\n")
    return question


def new_survey(index: SurveyIndex) -> Survey:
    """An empty survey carrying a freshly allocated ID."""
    return Survey(id=index.allocate())