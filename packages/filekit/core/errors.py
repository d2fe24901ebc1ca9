"""Error taxonomy for FileKit operations.

Every operation failure is reported as exactly one of the kinds below.
Each kind carries the location that failed (or, for SearchPathNotFound,
the identifier of the requested special directory).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import ClassVar

# Exceptions raised by the OS layer that operations translate into the taxonomy.
# ValueError covers paths the OS refuses outright (e.g. embedded NUL bytes).
FILESYSTEM_ERRORS: tuple[type[Exception], ...] = (OSError, ValueError)


class ErrorKind(str, Enum):
    """Discriminant for the closed set of failure kinds."""

    FAILED_TO_SAVE = "failed_to_save"
    FAILED_TO_LOAD = "failed_to_load"
    FAILED_TO_DELETE = "failed_to_delete"
    FAILED_TO_CREATE = "failed_to_create"
    FOLDER_DOES_NOT_EXIST = "folder_does_not_exist"
    SEARCH_PATH_NOT_FOUND = "search_path_not_found"


class FileKitError(Exception):
    """Base exception for FileKit operation failures.

    Errors are values: operations return them inside a FileKitResult and
    only raise them from FileKitResult.unwrap().

    Attributes:
        kind: Failure discriminant
        location: Location that failed
        reason: Text of the underlying OS error (informational, not compared)
    """

    kind: ClassVar[ErrorKind]
    verb: ClassVar[str] = "process"

    def __init__(self, location: Path | str, reason: str | None = None) -> None:
        self.location: Path | None = Path(location)
        self.reason = reason
        super().__init__(self._message())

    def _subject(self) -> str:
        return str(self.location)

    def _message(self) -> str:
        message = f"Failed to {self.verb} {self._subject()}"
        if self.reason:
            message = f"{message}: {self.reason}"
        return message

    def _key(self) -> tuple[ErrorKind, object]:
        return (self.kind, self.location)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileKitError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._subject()!r})"


class FailedToSave(FileKitError):
    """Writing a file's content failed."""

    kind = ErrorKind.FAILED_TO_SAVE
    verb = "save"


class FailedToLoad(FileKitError):
    """Reading a file or enumerating a folder failed."""

    kind = ErrorKind.FAILED_TO_LOAD
    verb = "load"


class FailedToDelete(FileKitError):
    """Removing a file or folder failed."""

    kind = ErrorKind.FAILED_TO_DELETE
    verb = "delete"


class FailedToCreate(FileKitError):
    """Creating a folder (or one of its ancestors) failed."""

    kind = ErrorKind.FAILED_TO_CREATE
    verb = "create"


class FolderDoesNotExist(FileKitError):
    """A save targeted a folder that does not exist."""

    kind = ErrorKind.FOLDER_DOES_NOT_EXIST

    def _message(self) -> str:
        return f"Folder does not exist: {self.location}"


class SearchPathNotFound(FileKitError):
    """A platform special directory has no resolvable location on this host."""

    kind = ErrorKind.SEARCH_PATH_NOT_FOUND

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        self.identifier = identifier.value if isinstance(identifier, Enum) else str(identifier)
        self.location = None
        self.reason = reason
        Exception.__init__(self, self._message())

    def _subject(self) -> str:
        return self.identifier

    def _message(self) -> str:
        message = f"Search path not found: {self.identifier}"
        if self.reason:
            message = f"{message} ({self.reason})"
        return message

    def _key(self) -> tuple[ErrorKind, object]:
        return (self.kind, self.identifier)
