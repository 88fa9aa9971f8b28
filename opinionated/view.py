"""Menu prompts, error messages and formatted displays."""

from __future__ import annotations

from .console import Console
from .survey import Survey
from .user import User

_PROMPTS = {
    1: "\nMain Menu\n[1] Login\n[2] Register\n[3] Exit\n>> ",
    2: "Enter the email address: ",
    3: "Enter the Password: ",
    4: "[1] Take Survey\n[2] View Stats\n[3] Update Account\n[4] Logout\n>> ",
    5: "[1] View All Users\n[2] Add User\n[3] Delete User\n[4] Modify User\n[5] Exit Menu\n>> ",
    6: "[1] Admin Menu\n[2] User Menu\n[3] Exit Menu\n>> ",
    7: "[1] Change email\n[2] Update Password\n[3] Delete Account\n[4] Exit Menu\n>> ",
    8: "Are you sure? This can't be undone.\nEnter Y to continue, any other key to cancel.\n>> ",
    9: "Account Removed.\n",
    10: "Cancelling.\n",
    11: (
        "[1] Modify User's Email \n"
        "[2] Modify User's Password\n"
        "[3] Modify User's Admin Status\n"
        "[4] Modify User's Number of Surveys Completed\n"
        "[5] Modify User's Number of Questions Answered\n"
        "[6] Modify User's Rank\n"
        "[7] Exit Menu\n"
        ">> "
    ),
    12: "Enter the new value.\n>> ",
    13: "Enter the email of the user you wish to modify.\n>> ",
    14: "[1] Manage Users\n[2] Manage Surveys\n[3] Exit Menu\n>> ",
    15: (
        "[1] View Survey Data\n[2] Add Survey\n[3] Modify Survey\n"
        "[4] Delete Survey\n[5] Exit Menu\n>> "
    ),
    16: "Enter the Survey name: ",
    17: "Enter the Survey description: ",
    18: "Would you like to add a question? (Y/N)",
    19: "Enter the survey ID: ",
    20: "[1] Modify Question\n[2] Add Question\n[3] Delete Question\n[4] Exit Menu\n>> ",
    21: "Enter question number: ",
    22: "Enter answer number: ",
    23: "[1] Add Answer\n[2] Delete Answer\n[3] Exit Menu\n>> ",
}

_ERRORS = {
    1: "Must be at least 7 characters long.\n",
    2: "Must be no more than 80 characters long.\n",
    3: "Invalid email format.\n",
    4: "Password must contain an upper case letter.\n",
    5: "Password must contain a lower case letter.\n",
    6: "Password must contain a number.\n",
    7: "Invalid choice.\n",
    8: "Email already exists.\n",
    9: "No such Email exists.\n",
    10: "User data is not correct.\n",
    11: (
        "Unable to modify your account, access User Menu to make changes.\n"
        "Press Y to exit, any other key to re-enter.\n"
        ">> "
    ),
}


def prompt(code: int) -> str:
    """Text of a numbered prompt; unknown codes give an empty string."""
    return _PROMPTS.get(code, "")


def error(code: int) -> str:
    """Text of a numbered error message; unknown codes give an empty string."""
    return _ERRORS.get(code, "")


class UserView:
    """Writes prompts, errors and formatted records to a console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def prompt(self, code: int) -> None:
        """Show a numbered prompt."""
        self.console.write(prompt(code))

    def err(self, code: int) -> None:
        """Show a numbered error message."""
        self.console.write(error(code))

    def display(self, user: User) -> None:
        """Show a user's account details."""
        self.console.write(
            f"Email              : {user.email}\n"
            f"Password           : {user.password}\n"
            f"Surveys Completed  : {user.surveys}\n"
            f"Questions Answered : {user.questions}\n"
            f"Current Rank       : {user.rank}\n\n"
        )

    def survey_info(self, survey: Survey) -> None:
        """Show a survey's details and the responses to each question."""
        parts = [
            f"Survey ID  : {survey.id}\n"
            f"Survey Name: {survey.name}\n"
            f"Description: {survey.about}\n"
            f"Num Queries: {len(survey.questions)}\n"
        ]
        for number in range(1, len(survey.questions) + 1):
            parts.append(f"Question {number}:\n\tAnswer\t\tSelected\n")
            parts.append(survey.response_report(number - 1))
            parts.append("\n")
        self.console.write("".join(parts))

    def print_question(self, survey: Survey, index: int) -> None:
        """Show one question of a survey with its answers."""
        if not 0 <= index < len(survey.questions):
            raise IndexError(f"no question at position {index}")
        self.console.write(survey.questions[index].format() + "\n")

    def show_survey(self, survey: Survey) -> None:
        """Show the survey name and every numbered question, without data."""
        self.console.write(f"{survey.name}\n")
        for number in range(1, len(survey.questions) + 1):
            self.console.write(f"{number}) ")
            self.print_question(survey, number - 1)