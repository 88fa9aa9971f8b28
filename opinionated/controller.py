"""Menus for logging in, managing accounts and managing surveys."""

from __future__ import annotations

import argparse
from pathlib import Path

from .console import Console
from .database import USERS_FILE
from .engine import INDEX_FILE, SURVEY_DIR
from .survey import Survey, SurveyIndex, new_survey, prompt_question
from .user import MAX, User
from .userstore import UserStore, is_valid_email, password_problems
from .view import UserView

MIN_LENGTH = 7
INVALID_CHOICE = 7

_SEED_PASSWORD = "password"
_SEED_ADMIN = "admin@example.com"
_SEED_USERS = ("alpha@example.com", "bravo@example.com", "charlie@example.com")


class UserController:
    """Drives the interactive menus over a user file and a survey directory."""

    def __init__(self, console: Console | None = None, directory: str | Path = ".") -> None:
        self.console = console if console is not None else Console()
        self.view = UserView(self.console)
        self.directory = Path(directory)
        self.users = UserStore(self.directory / USERS_FILE)
        self.index = SurveyIndex(self.directory / INDEX_FILE)
        self.survey_dir = self.directory / SURVEY_DIR

    def _survey_path(self, survey_id: int) -> Path:
        return self.survey_dir / f"{survey_id}.bin"

    def _load_survey(self, survey_id: int) -> Survey:
        with self._survey_path(survey_id).open("rb") as stream:
            return Survey.read(stream)

    def _save_survey(self, survey: Survey) -> None:
        self.survey_dir.mkdir(parents=True, exist_ok=True)
        with self._survey_path(survey.id).open("wb") as stream:
            survey.write(stream)

    # Menus

    def main_menu(self) -> None:
        """Login, register or exit; lower-case letters run maintenance actions."""
        while True:
            self.view.prompt(1)
            choice = self.console.read_char()
            if choice == "1":
                self.login()
            elif choice == "2":
                self.register()
            elif choice == "3":
                return
            elif choice == "a":
                self.display_all()
            elif choice == "d":
                self.users.reset()
            elif choice == "s":
                self.print_survey_names()
            elif choice == "f":
                self.index.path.parent.mkdir(parents=True, exist_ok=True)
                self.index.path.write_bytes(b"")
            elif choice == "n":
                self.seed_users()
            else:
                self.view.err(INVALID_CHOICE)

    def login(self) -> None:
        """Check an email and password, then open the user or admin menus."""
        self.console.ignore()
        self.view.prompt(2)
        email = self.console.read_line()
        position = self.users.find(email)
        if position is None:
            self.view.err(9)
            return
        self.view.prompt(3)
        password = self.console.read_line()
        if not self.users.verify(email, password):
            self.view.err(10)
            return
        user = self.users.get(position)
        if not user.admin:
            self.user_menu(user)
            return
        while True:
            self.view.prompt(6)
            choice = self.console.read_char()
            if choice == "1":
                self.admin_menu(user)
            elif choice == "2":
                self.user_menu(user)
            else:
                return

    def user_menu(self, user: User) -> None:
        """Take surveys, view stats, update the account or log out."""
        while True:
            self.view.prompt(4)
            choice = self.console.read_char()
            if choice == "1":
                self.survey_menu(user)
            elif choice == "2":
                self.view.display(user)
            elif choice == "3":
                if not self.account_menu(user):
                    return
            elif choice == "4":
                return
            else:
                self.view.err(INVALID_CHOICE)

    def account_menu(self, user: User) -> bool:
        """Let a user change their own account; False means it was deleted."""
        position = self.users.find(user.email)
        while True:
            self.view.prompt(7)
            choice = self.console.read_char()
            self.console.ignore()
            if choice == "1":
                user.email = self.enter_email()
                if position is not None:
                    self.users.delete(position)
                position = self.users.add(user)
            elif choice == "2":
                user.password = self.enter_password()
                if position is None:
                    position = self.users.add(user)
                else:
                    self.users.set(position, user)
            elif choice == "3":
                self.view.prompt(8)
                if self.console.read_char() in "yY":
                    if position is not None:
                        self.users.delete(position)
                    self.view.prompt(9)
                    return False
                self.view.prompt(10)
            elif choice == "4":
                return True
            else:
                self.view.err(INVALID_CHOICE)

    def admin_menu(self, admin: User) -> None:
        """Manage users and surveys."""
        while True:
            self.view.prompt(14)
            choice = self.console.read_char()
            if choice == "1":
                self._manage_users(admin)
            elif choice == "2":
                self._manage_surveys()
            elif choice == "3":
                return
            else:
                self.view.err(INVALID_CHOICE)

    def _manage_users(self, admin: User) -> None:
        while True:
            self.view.prompt(5)
            choice = self.console.read_char()
            if choice == "1":
                self.display_all()
            elif choice == "2":
                self.register()
            elif choice == "3":
                self.console.ignore()
                self.view.prompt(2)
                email = self.console.read_line()
                if email != admin.email:
                    position = self.users.find(email)
                    if position is None:
                        self.view.err(9)
                    else:
                        self.users.delete(position)
                else:
                    self.view.err(11)
                    if self.console.read_char() in "yY":
                        return
            elif choice == "4":
                self.update_user(admin)
            elif choice == "5":
                return
            else:
                self.view.err(INVALID_CHOICE)

    def _manage_surveys(self) -> None:
        while True:
            self.view.prompt(15)
            choice = self.console.read_char()
            if choice == "1":
                self.print_survey_names()
                self.view.survey_info(self._load_survey(self.get_valid_id()))
            elif choice == "2":
                self.console.ignore()
                self.add_survey()
            elif choice == "3":
                self.print_survey_names()
                self.modify_survey(self.get_valid_id())
            elif choice == "4":
                self.print_survey_names()
                self.delete_survey(self.get_valid_id())
            elif choice == "5":
                return
            else:
                self.view.err(INVALID_CHOICE)

    def update_user(self, admin: User) -> None:
        """Let an admin change another user's account; the admin cannot pick themselves."""
        self.view.prompt(13)
        self.console.ignore()
        email = self.console.read_line()
        if email == admin.email:
            self.view.err(11)
            self.console.read_char()
            return
        position = self.users.find(email)
        if position is None:
            self.view.err(9)
            return
        user = self.users.get(position)
        while True:
            self.view.prompt(11)
            choice = self.console.read_char()
            self.console.ignore()
            if choice == "1":
                user.email = self.enter_email()
                self.users.delete(position)
                self.users.add(user)
                return
            if choice == "2":
                user.password = self.enter_password()
            elif choice == "3":
                user.toggle_admin()
            elif choice in "456" and choice:
                self.view.prompt(12)
                value = self.console.read_int()
                if choice == "4":
                    user.surveys = value
                elif choice == "5":
                    user.questions = value
                else:
                    user.rank = value
            elif choice == "7":
                return
            else:
                self.view.err(INVALID_CHOICE)
                continue
            self.users.set(position, user)

    def survey_menu(self, user: User) -> None:
        """List the surveys and show the one the user picks."""
        self.print_survey_names()
        if not self.index.ids():
            return
        self.view.show_survey(self._load_survey(self.get_valid_id()))

    # Input helpers

    def enter_email(self) -> str:
        """Read emails until one is well formed, of valid length and not taken."""
        self.view.prompt(2)
        while True:
            email = self.console.read_line()
            size = len(email.encode("utf-8"))
            taken = self.users.find(email) is not None
            valid = is_valid_email(email)
            if size < MIN_LENGTH:
                self.view.err(1)
            if size > MAX - 1:
                self.view.err(2)
            if not valid:
                self.view.err(3)
            if taken:
                self.view.err(8)
            if MIN_LENGTH <= size <= MAX - 1 and valid and not taken:
                return email

    def enter_password(self) -> str:
        """Read passwords until one has valid length, upper, lower and a digit."""
        self.view.prompt(3)
        while True:
            password = self.console.read_line()
            size = len(password.encode("utf-8"))
            if size < MIN_LENGTH:
                self.view.err(1)
            if size > MAX - 1:
                self.view.err(2)
            if MIN_LENGTH <= size <= MAX - 1:
                problems = password_problems(password)
                for code in problems:
                    self.view.err(code)
                if not problems:
                    return password

    def get_info(self) -> tuple[str, str]:
        """Read a new email and password."""
        email = self.enter_email()
        return email, self.enter_password()

    def register(self) -> User:
        """Create and store a new user."""
        self.console.ignore()
        email, password = self.get_info()
        user = User(email, password)
        self.users.add(user)
        return user

    def display_all(self) -> None:
        """Show every stored user."""
        for user in self.users.all():
            self.view.display(user)

    def seed_users(self) -> None:
        """Store one admin and a few ordinary starter accounts."""
        self.display_all()
        self.users.add(User(_SEED_ADMIN, _SEED_PASSWORD, True, 10, 10, 10))
        for email in _SEED_USERS:
            self.users.add(User(email, _SEED_PASSWORD))
        self.display_all()

    # Surveys

    def add_survey(self) -> Survey:
        """Ask for a new survey and its questions, then save it."""
        survey = new_survey(self.index)
        self.view.prompt(16)
        survey.name = self.console.read_line()
        self.view.prompt(17)
        survey.about = self.console.read_line()
        while True:
            self.view.prompt(18)
            choice = self.console.read_char()
            if choice not in "yYnN":
                self.view.err(INVALID_CHOICE)
            self.console.ignore()
            if choice in "yY":
                survey.add_question(prompt_question(self.console))
            elif choice in "nN":
                break
        self._save_survey(survey)
        return survey

    def delete_survey(self, number: int) -> None:
        """Remove a survey ID from the index and delete its file."""
        ids = self.index.ids()
        if number not in ids:
            raise KeyError(f"no survey with ID {number}")
        self.index.remove_at(ids.index(number))
        self._survey_path(number).unlink(missing_ok=True)

    def _ask_question_number(self, survey: Survey) -> int | None:
        self.view.show_survey(survey)
        if not survey.questions:
            self.view.err(INVALID_CHOICE)
            return None
        while True:
            self.view.prompt(21)
            number = self.console.read_int()
            if 1 <= number <= len(survey.questions):
                return number - 1
            self.view.err(INVALID_CHOICE)

    def modify_survey(self, number: int) -> Survey:
        """Modify, add or delete questions of a stored survey, then save it."""
        survey = self._load_survey(number)
        while True:
            self.view.prompt(20)
            choice = self.console.read_char()
            if choice == "1":
                index = self._ask_question_number(survey)
                if index is not None:
                    survey.modify_question(index, self.console)
            elif choice == "2":
                self.console.ignore()
                survey.add_question(prompt_question(self.console))
            elif choice == "3":
                index = self._ask_question_number(survey)
                if index is not None:
                    survey.remove_question(index)
            elif choice == "4":
                self._save_survey(survey)
                return survey
            else:
                self.view.err(INVALID_CHOICE)

    def print_survey_names(self) -> None:
        """Show the ID and name of every recorded survey."""
        for survey_id in self.index.ids():
            try:
                name = self._load_survey(survey_id).name
            except (OSError, EOFError, ValueError):
                name = ""
            self.console.write(f"{survey_id}) {name}\n")

    def get_valid_id(self) -> int:
        """Read survey IDs until one that is recorded in the index."""
        while True:
            self.view.prompt(19)
            choice = self.console.read_int()
            if self.index.contains(choice):
                return choice
            self.view.err(INVALID_CHOICE)


def main(argv: list[str] | None = None) -> int:
    """Run the main menu against the given data directory."""
    parser = argparse.ArgumentParser(description="Survey accounts and administration.")
    parser.add_argument("directory", nargs="?", default=".", help="data directory")
    args = parser.parse_args(argv)
    controller = UserController(Console(), args.directory)
    try:
        controller.main_menu()
    except EOFError:
        return 1
    return 0