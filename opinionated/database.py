"""Paired binary data files for users and questions."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

USERS_FILE = "Users.bin"
QUESTIONS_FILE = "Questions.bin"


class DatabaseError(OSError):
    """Raised when a data file cannot be opened or is closed while not open."""


class Database:
    """Opens and closes the user file (users=True) or the question file (users=False)."""

    def __init__(self, directory: str | Path = ".") -> None:
        base = Path(directory)
        self._paths = {True: base / USERS_FILE, False: base / QUESTIONS_FILE}
        self._files: dict[bool, BinaryIO | None] = {True: None, False: None}

    def path(self, users: bool) -> Path:
        """Location of the chosen file."""
        return self._paths[bool(users)]

    def is_open(self, users: bool) -> bool:
        """Whether the chosen file is currently open."""
        return self._files[bool(users)] is not None

    def open(self, users: bool) -> BinaryIO:
        """Open the chosen existing file for reading and writing and return it."""
        key = bool(users)
        current = self._files[key]
        if current is not None:
            return current
        try:
            handle = open(self._paths[key], "r+b")
        except OSError as exc:
            raise DatabaseError("Error opening file!") from exc
        self._files[key] = handle
        return handle

    def close(self, users: bool) -> None:
        """Close the chosen file; closing a file that is not open is an error."""
        key = bool(users)
        handle = self._files[key]
        if handle is None:
            which = "User" if key else "Question"
            raise DatabaseError(f"{which} file is not open!")
        handle.close()
        self._files[key] = None

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for key, handle in self._files.items():
            if handle is not None:
                handle.close()
                self._files[key] = None