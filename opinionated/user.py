"""User accounts and their fixed-size record form."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MAX = 100
"""Size of the email and password fields, terminator included."""

_RECORD = struct.Struct("<100s100s?3xiii")
RECORD_SIZE = _RECORD.size


def _field(text: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) > MAX - 1:
        raise ValueError(f"field longer than {MAX - 1} bytes")
    return data


def _unfield(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8")


@dataclass(eq=False)
class User:
    """An account; users compare and order by email alone."""

    email: str = ""
    password: str = ""
    admin: bool = False
    surveys: int = 0
    questions: int = 0
    rank: int = 1

    def __post_init__(self) -> None:
        _field(self.email)
        _field(self.password)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.email.encode("utf-8") == other.email.encode("utf-8")

    def __lt__(self, other: User) -> bool:
        return self.email.encode("utf-8") < other.email.encode("utf-8")

    def __gt__(self, other: User) -> bool:
        return self.email.encode("utf-8") > other.email.encode("utf-8")

    def __hash__(self) -> int:
        return hash(self.email)

    def toggle_admin(self) -> None:
        """Flip the admin flag."""
        self.admin = not self.admin

    def pack(self) -> bytes:
        """The user as a fixed-size record."""
        return _RECORD.pack(
            _field(self.email),
            _field(self.password),
            self.admin,
            self.surveys,
            self.questions,
            self.rank,
        )

    @classmethod
    def unpack(cls, data: bytes) -> User:
        """Rebuild a user from a record made by pack()."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
        email, password, admin, surveys, questions, rank = _RECORD.unpack(data)
        return cls(_unfield(email), _unfield(password), admin, surveys, questions, rank)