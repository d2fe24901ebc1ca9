"""Blocking filesystem helpers shared by the sync and async services."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from filekit.core.errors import FileKitError
from filekit.core.result import FileKitResult, failure

logger = logging.getLogger(__name__)


def remove_item(path: Path) -> None:
    """
    Remove the filesystem entry at path.

    Directories are removed with their contents. Symlinks and regular
    files are removed as a single entry (links are never followed).

    Raises:
        OSError: On removal failure (including a missing path)
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        os.unlink(path)


def translate(
    error_cls: type[FileKitError], location: Path, exc: BaseException
) -> FileKitResult[object]:
    """Build a failed result of kind error_cls, recording the OS error that caused it."""
    error = error_cls(location, reason=str(exc))
    error.__cause__ = exc
    logger.debug(f"{error.kind.value}: {error.location} ({type(exc).__name__}: {exc})")
    return failure(error)
