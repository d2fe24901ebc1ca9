"""FileKit: typed create/save/load/delete for files and folders.

Values describe what is on disk; services act on them and report every
failure as a FileKitResult carrying one error kind.

Example (sync):
    >>> from filekit import File, FileKit, Folder
    >>> kit = FileKit()
    >>> folder = Folder(location="/tmp/filekit")
    >>> kit.create(folder).unwrap()
    >>> kit.save(File(name="file.txt", folder=folder, data=b"Hello World")).unwrap()

Example (async, callback delivered on the caller's event loop):
    >>> from filekit import FileKitAsync
    >>> kit = FileKitAsync()
    >>> done = asyncio.get_running_loop().create_future()
    >>> kit.load(File(name="file.txt", folder=folder), done.set_result)
    >>> result = await done
"""

from filekit.core.config import FileKitConfig, LoggingConfig, load_filekit_config
from filekit.core.dispatch import ExecutionContext
from filekit.core.errors import (
    ErrorKind,
    FailedToCreate,
    FailedToDelete,
    FailedToLoad,
    FailedToSave,
    FileKitError,
    FolderDoesNotExist,
    SearchPathNotFound,
)
from filekit.core.locations import (
    SearchPath,
    current_working_folder,
    file_for_resource,
    file_in_caches_folder,
    file_in_documents_folder,
    folder_for,
    folder_from_path,
    location_from_path,
    path_to_folder,
)
from filekit.core.models import File, Folder
from filekit.core.result import FileKitResult, failure, success
from filekit.core.service import FileKit
from filekit.core.service_async import Callback, FileKitAsync
from filekit.core.utils.logging import configure_logging, configure_logging_from, get_logger

__version__ = "0.1.0"

__all__ = [
    # Values
    "File",
    "Folder",
    # Results and errors
    "FileKitResult",
    "success",
    "failure",
    "ErrorKind",
    "FileKitError",
    "FailedToSave",
    "FailedToLoad",
    "FailedToDelete",
    "FailedToCreate",
    "FolderDoesNotExist",
    "SearchPathNotFound",
    # Services
    "FileKit",
    "FileKitAsync",
    "Callback",
    "ExecutionContext",
    # Locations
    "SearchPath",
    "path_to_folder",
    "folder_for",
    "file_in_caches_folder",
    "file_in_documents_folder",
    "file_for_resource",
    "location_from_path",
    "folder_from_path",
    "current_working_folder",
    # Configuration and logging
    "FileKitConfig",
    "LoggingConfig",
    "load_filekit_config",
    "configure_logging",
    "configure_logging_from",
    "get_logger",
]
