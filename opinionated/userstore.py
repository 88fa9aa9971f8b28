"""A file of fixed-size user records kept in email order."""

from __future__ import annotations

import re
from pathlib import Path

from .user import RECORD_SIZE, User

_EMAIL = re.compile(
    r"\b[A-Za-z0-9_][A-Za-z0-9._-]*[A-Za-z0-9]@[A-Za-z0-9-]+"
    r"(?:\.[A-Za-z0-9-]+)*(?:\.[A-Z|a-z]{2,}\b)",
    re.ASCII,
)

MISSING_UPPER = 4
MISSING_LOWER = 5
MISSING_DIGIT = 6


def is_valid_email(email: str) -> bool:
    """Whether the whole string has the shape of an email address."""
    return _EMAIL.fullmatch(email) is not None


def password_problems(password: str) -> list[int]:
    """Error codes for what the password lacks: an upper case letter (4),
    a lower case letter (5) or a digit (6). An empty list means it is acceptable."""
    ascii_chars = [ch for ch in password if ch.isascii()]
    problems = []
    if not any(ch.isupper() for ch in ascii_chars):
        problems.append(MISSING_UPPER)
    if not any(ch.islower() for ch in ascii_chars):
        problems.append(MISSING_LOWER)
    if not any(ch.isdigit() for ch in ascii_chars):
        problems.append(MISSING_DIGIT)
    return problems


def _key(user: User) -> bytes:
    return user.email.encode("utf-8")


class UserStore:
    """Users stored one fixed-size record after another, sorted by email."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> list[User]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        usable = len(data) - len(data) % RECORD_SIZE
        return [
            User.unpack(data[offset:offset + RECORD_SIZE])
            for offset in range(0, usable, RECORD_SIZE)
        ]

    def _write_all(self, users: list[User]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(b"".join(user.pack() for user in users))

    def count(self) -> int:
        """Number of whole records in the file; a missing file holds none."""
        try:
            return self.path.stat().st_size // RECORD_SIZE
        except FileNotFoundError:
            return 0

    def find(self, email: str) -> int | None:
        """Position of the user with this email, or None if there is none."""
        target = email.encode("utf-8")
        for position, user in enumerate(self._read_all()):
            current = _key(user)
            if current == target:
                return position
            if current > target:
                break
        return None

    def get(self, position: int) -> User:
        """The user stored at a zero-based position."""
        if not 0 <= position < self.count():
            raise IndexError(f"no user at position {position}")
        with self.path.open("rb") as stream:
            stream.seek(position * RECORD_SIZE)
            return User.unpack(stream.read(RECORD_SIZE))

    def set(self, position: int, user: User) -> None:
        """Overwrite the record at a position with the given user."""
        if not 0 <= position < self.count():
            raise IndexError(f"no user at position {position}")
        with self.path.open("r+b") as stream:
            stream.seek(position * RECORD_SIZE)
            stream.write(user.pack())

    def add(self, user: User) -> int:
        """Insert a user, keep the file sorted and return the user's position."""
        users = self._read_all()
        users.append(user)
        users.sort(key=_key)
        self._write_all(users)
        return next(i for i, stored in enumerate(users) if stored is user)

    def delete(self, position: int) -> User:
        """Remove and return the user at a position."""
        users = self._read_all()
        if not 0 <= position < len(users):
            raise IndexError(f"no user at position {position}")
        removed = users.pop(position)
        self._write_all(users)
        return removed

    def all(self) -> list[User]:
        """Every stored user, in file order."""
        return self._read_all()

    def verify(self, email: str, password: str) -> bool:
        """Whether a user with this email exists and has this password."""
        position = self.find(email)
        if position is None:
            return False
        return self.get(position).password == password

    def reset(self) -> None:
        """Empty the file, creating it if needed."""
        self._write_all([])