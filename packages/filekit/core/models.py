"""File and Folder value types.

Both are immutable pydantic models with structural equality. "Updating" a
value means constructing a new one; the service never mutates its inputs.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SEPARATORS = {sep for sep in (os.sep, os.altsep, "/") if sep}


class Folder(BaseModel):
    """A folder location and the entries found by the most recent load.

    A Folder built directly (not returned by a load) has no entries,
    whatever is actually on disk.

    Attributes:
        location: Folder path
        entries: Child locations in filesystem enumeration order (unsorted)
    """

    location: Path = Field(description="Folder path")
    entries: tuple[Path, ...] = Field(
        default=(), description="Child locations discovered by the most recent load"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def files(self) -> tuple[File, ...]:
        """Unloaded File values, one per entry (name and folder only, no data)."""
        bare = Folder(location=self.location)
        return tuple(File(name=entry.name, folder=bare) for entry in self.entries)


class File(BaseModel):
    """A named file inside a folder, with optional content.

    Attributes:
        name: Leaf name (no path separators)
        folder: Owning folder
        data: File content; None when not loaded or empty
    """

    name: str = Field(description="Leaf name of the file")
    folder: Folder = Field(description="Owning folder")
    data: bytes | None = Field(default=None, description="File content, if loaded")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _validate_leaf_name(cls, value: str) -> str:
        if value in ("", ".", ".."):
            raise ValueError(f"Invalid file name: {value!r}")
        if any(sep in value for sep in _SEPARATORS):
            raise ValueError(f"File name must not contain path separators: {value!r}")
        return value

    @property
    def location(self) -> Path:
        """Path of the file: the folder location joined with the name."""
        return self.folder.location / self.name

    def with_data(self, data: bytes | None) -> File:
        """Return a copy of this file carrying different content."""
        return File(name=self.name, folder=self.folder, data=data)
