"""Interactive survey builder that saves a survey and reads it back."""

from __future__ import annotations

import argparse
from pathlib import Path

from .console import Console
from .question import Question, prompt_answer
from .survey import Survey, SurveyIndex, new_survey, prompt_question

INDEX_FILE = "SurveyIDs.bin"
SURVEY_DIR = "surveys"


def _format_survey(survey: Survey) -> str:
    parts = [
        f"Survey ID  : {survey.id}\n"
        f"Survey Name: {survey.name}\n"
        f"Description: {survey.about}\n"
        f"Num Queries: {len(survey.questions)}\n"
    ]
    for number, question in enumerate(survey.questions, 1):
        parts.append(f"Question {number}:\n")
        parts.append(question.format())
        parts.append("\n")
    return "".join(parts)


def build_survey(console: Console, directory: str | Path = ".") -> Survey:
    """Ask for a survey, print it, save it, then load and print the saved copy."""
    base = Path(directory)
    survey = new_survey(SurveyIndex(base / INDEX_FILE))
    console.write("Enter the Survey name: ")
    survey.name = console.read_line()
    console.write("Enter the Survey description: ")
    survey.about = console.read_line()
    while True:
        console.write("Would you like to add a question? (Y/N)")
        ch = console.read_char()
        if ch not in "yYnN":
            console.write("Invalid choice. Please re-enter: ")
        console.ignore()
        if ch in "yY":
            survey.add_question(prompt_question(console))
        elif ch in "nN":
            break

    console.write(_format_survey(survey))
    target = base / SURVEY_DIR / f"{survey.id}.bin"
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as stream:
        survey.write(stream)
    console.write("Loading from file.\n\n")
    with target.open("rb") as stream:
        loaded = Survey.read(stream)
    console.write("Survey from file:\n\n")
    console.write(_format_survey(loaded))
    return loaded


def question_demo(console: Console, directory: str | Path = ".") -> Question:
    """Build one question, delete an answer, save it, and read it back."""
    question = Question()
    console.write("Enter the question: ")
    question.text = console.read_line()
    console.write(
        "Enter the question type. 1 for single choice, 2 for multi-choice, "
        "3 for custom response: "
    )
    question.multiple_choice = console.read_int() != 0
    console.write("How many answers will this question have: ")
    for _ in range(console.read_int()):
        question.add_answer(prompt_answer(console))
    console.write(question.format())
    console.write("Enter the number of the answer you wish to delete: ")
    question.remove_answer(console.read_int() - 1)
    console.write(question.format())
    console.write("Writing to test file.\n")
    target = Path(directory) / SURVEY_DIR / "test.bin"
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as stream:
        question.write(stream)
    console.write("Loading from file.\n\n")
    with target.open("rb") as stream:
        loaded = Question.read(stream)
    console.write("Question from file:\n\n")
    console.write(loaded.format())
    return loaded


def main(argv: list[str] | None = None) -> int:
    """Run the survey builder against the given data directory."""
    parser = argparse.ArgumentParser(description="Build a survey and save it.")
    parser.add_argument("directory", nargs="?", default=".", help="data directory")
    args = parser.parse_args(argv)
    console = Console()
    try:
        build_survey(console, args.directory)
    except EOFError:
        return 1
    return 0