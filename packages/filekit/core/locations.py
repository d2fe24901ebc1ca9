"""Lookups that produce File and Folder values.

Special platform directories, resources shipped inside installed packages,
and raw path strings. These only build values; the FileKit services work
the same on any File or Folder however its location was obtained.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from importlib import resources
from pathlib import Path

from filekit.core.errors import FailedToLoad, SearchPathNotFound
from filekit.core.models import File, Folder
from filekit.core.result import FileKitResult, failure, success

logger = logging.getLogger(__name__)


class SearchPath(str, Enum):
    """Platform special directories."""

    CACHES = "caches"
    DOCUMENTS = "documents"


def _home() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def _resolve(search_path: SearchPath) -> Path | None:
    if sys.platform == "win32":
        if search_path is SearchPath.CACHES:
            return _env_path("LOCALAPPDATA")
        profile = _env_path("USERPROFILE") or _home()
        return profile / "Documents" if profile else None

    if sys.platform == "darwin":
        home = _home()
        if home is None:
            return None
        if search_path is SearchPath.CACHES:
            return home / "Library" / "Caches"
        return home / "Documents"

    if search_path is SearchPath.CACHES:
        override = _env_path("XDG_CACHE_HOME")
        fallback = ".cache"
    else:
        override = _env_path("XDG_DOCUMENTS_DIR")
        fallback = "Documents"
    if override is not None:
        return override
    home = _home()
    return home / fallback if home else None


def path_to_folder(search_path: SearchPath) -> FileKitResult[Path]:
    """
    Resolve a special directory to its location on this host.

    The directory is not required to exist.

    Returns:
        Directory location, or SearchPathNotFound
    """
    location = _resolve(search_path)
    if location is None:
        logger.debug(f"No location for search path {search_path.value} on {sys.platform}")
        return failure(SearchPathNotFound(search_path))
    return success(location)


def folder_for(search_path: SearchPath) -> FileKitResult[Folder]:
    """Folder value for a special directory."""
    result = path_to_folder(search_path)
    if not result.ok:
        return result
    return success(Folder(location=result.value))


def _file_in(search_path: SearchPath, name: str, data: bytes | None) -> FileKitResult[File]:
    result = folder_for(search_path)
    if not result.ok:
        return result
    return success(File(name=name, folder=result.value, data=data))


def file_in_caches_folder(name: str, data: bytes | None = None) -> FileKitResult[File]:
    """File value named name inside the caches directory."""
    return _file_in(SearchPath.CACHES, name, data)


def file_in_documents_folder(name: str, data: bytes | None = None) -> FileKitResult[File]:
    """File value named name inside the documents directory."""
    return _file_in(SearchPath.DOCUMENTS, name, data)


def file_for_resource(
    resource: str,
    extension: str,
    package: str,
    subdirectory: str | None = None,
) -> FileKitResult[File]:
    """
    Locate a file shipped inside an installed Python package.

    Args:
        resource: Resource name without extension
        extension: File extension without the dot
        package: Dotted name of the package holding the resource
        subdirectory: Optional directory inside the package

    Returns:
        Unloaded File for "<resource>.<extension>", or FailedToLoad
        carrying the resource name when it cannot be found on disk
    """
    name = f"{resource}.{extension}"
    try:
        root = resources.files(package)
    except (ModuleNotFoundError, TypeError) as e:
        logger.debug(f"Package {package!r} not available: {e}")
        return failure(FailedToLoad(resource, reason=str(e)))

    target = root.joinpath(subdirectory, name) if subdirectory else root.joinpath(name)
    # Resources inside zip archives have no filesystem location.
    if not isinstance(target, Path) or not target.is_file():
        return failure(FailedToLoad(resource))

    return success(File(name=name, folder=Folder(location=target.parent)))


def location_from_path(path: str | Path) -> Path:
    """Make a raw path absolute against the current directory (no normalization)."""
    return Path(path).absolute()


def folder_from_path(path: str | Path) -> Folder:
    """Folder value for a raw path string."""
    return Folder(location=location_from_path(path))


def current_working_folder() -> FileKitResult[Folder]:
    """
    Folder value for the process working directory.

    Returns:
        Folder, or FailedToLoad when the working directory no longer exists
    """
    try:
        return success(Folder(location=Path.cwd()))
    except OSError as e:
        return failure(FailedToLoad(".", reason=str(e)))
