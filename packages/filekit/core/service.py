"""Synchronous FileKit service.

Operations run on the caller's thread and block until the filesystem call
returns. Every OS failure is translated into one error kind and returned in
a FileKitResult; nothing is raised.

Save policy: the owning folder must already exist. Saving into a missing
folder fails with FolderDoesNotExist; call create() first.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from filekit.core.attributes import apply_attributes
from filekit.core.errors import (
    FILESYSTEM_ERRORS,
    FailedToCreate,
    FailedToDelete,
    FailedToLoad,
    FailedToSave,
    FolderDoesNotExist,
)
from filekit.core.models import File, Folder
from filekit.core.result import FileKitResult, failure, success
from filekit.core.utils.fs import remove_item, translate

logger = logging.getLogger(__name__)


class FileKit:
    """
    Blocking create/save/load/delete for File and Folder values.

    Stateless and reentrant: one instance may be shared across threads.
    Suitable for command-line and batch contexts.

    Example:
        >>> kit = FileKit()
        >>> folder = Folder(location="/tmp/filekit")
        >>> kit.create(folder).unwrap()
        >>> file = File(name="file.txt", folder=folder, data=b"Hello World")
        >>> kit.save(file).unwrap()
        >>> kit.load(file).unwrap().data
        b'Hello World'
    """

    def create(
        self, folder: Folder, attributes: Mapping[str, Any] | None = None
    ) -> FileKitResult[Path]:
        """
        Create folder and any missing ancestors.

        Creating an existing folder succeeds.

        Args:
            folder: Folder to create
            attributes: Optional attributes applied to the folder

        Returns:
            Folder location, or FailedToCreate
        """
        try:
            folder.location.mkdir(parents=True, exist_ok=True)
            apply_attributes(folder.location, attributes)
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToCreate, folder.location, e)

        logger.debug(f"Created folder {folder.location}")
        return success(folder.location)

    def save(self, file: File, attributes: Mapping[str, Any] | None = None) -> FileKitResult[Path]:
        """
        Write file.data to file.location, replacing existing content.

        Missing data is written as an empty file.

        Args:
            file: File to write
            attributes: Optional attributes applied to the written file

        Returns:
            File location, FolderDoesNotExist, or FailedToSave
        """
        if not os.path.isdir(file.folder.location):
            logger.debug(f"Refusing to save {file.location}: folder does not exist")
            return failure(FolderDoesNotExist(file.folder.location))

        try:
            with open(file.location, "wb") as f:
                f.write(file.data or b"")
            apply_attributes(file.location, attributes)
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToSave, file.location, e)

        logger.debug(f"Saved {len(file.data or b'')} bytes to {file.location}")
        return success(file.location)

    def load_file(self, file: File) -> FileKitResult[File]:
        """
        Read the content at file.location.

        Returns:
            New File with data populated, or FailedToLoad
        """
        try:
            with open(file.location, "rb") as f:
                data = f.read()
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToLoad, file.location, e)

        return success(file.with_data(data))

    def load_folder(self, folder: Folder) -> FileKitResult[Folder]:
        """
        Enumerate the immediate children of folder.location.

        Returns:
            New Folder with entries populated (unsorted), or FailedToLoad
        """
        try:
            names = os.listdir(folder.location)
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToLoad, folder.location, e)

        entries = tuple(folder.location / name for name in names)
        return success(Folder(location=folder.location, entries=entries))

    def delete_file(self, file: File) -> FileKitResult[Path]:
        """
        Remove the single entry at file.location.

        Returns:
            File location, or FailedToDelete
        """
        try:
            os.unlink(file.location)
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToDelete, file.location, e)

        logger.debug(f"Deleted file {file.location}")
        return success(file.location)

    def delete_folder(self, folder: Folder) -> FileKitResult[Path]:
        """
        Remove folder.location together with everything inside it.

        Returns:
            Folder location, or FailedToDelete
        """
        try:
            remove_item(folder.location)
        except FILESYSTEM_ERRORS as e:
            return translate(FailedToDelete, folder.location, e)

        logger.debug(f"Deleted folder {folder.location}")
        return success(folder.location)

    def load(self, item: File | Folder) -> FileKitResult[Any]:
        """Load a File (content) or a Folder (entries)."""
        if isinstance(item, File):
            return self.load_file(item)
        if isinstance(item, Folder):
            return self.load_folder(item)
        raise TypeError(f"Expected File or Folder, got {type(item).__name__}")

    def delete(self, item: File | Folder) -> FileKitResult[Path]:
        """Delete a File (single entry) or a Folder (recursively)."""
        if isinstance(item, File):
            return self.delete_file(item)
        if isinstance(item, Folder):
            return self.delete_folder(item)
        raise TypeError(f"Expected File or Folder, got {type(item).__name__}")
