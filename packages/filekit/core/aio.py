"""Async FileKit operations using aiofiles for non-blocking I/O.

Coroutine counterparts of the FileKit service operations, with the same
results and the same error classification. FileKitAsync runs these on its
worker loop; they can also be awaited directly from any event loop.
"""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]

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


async def create(folder: Folder, attributes: Mapping[str, Any] | None = None) -> FileKitResult[Path]:
    """Create folder and missing ancestors asynchronously."""
    loop = asyncio.get_running_loop()
    try:
        await aiofiles.os.makedirs(folder.location, exist_ok=True)
        await loop.run_in_executor(None, apply_attributes, folder.location, attributes)
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToCreate, folder.location, e)
    return success(folder.location)


async def save(file: File, attributes: Mapping[str, Any] | None = None) -> FileKitResult[Path]:
    """Write file.data into an existing folder asynchronously."""
    if not await aiofiles.os.path.isdir(file.folder.location):
        return failure(FolderDoesNotExist(file.folder.location))

    loop = asyncio.get_running_loop()
    try:
        async with aiofiles.open(file.location, mode="wb") as f:
            await f.write(file.data or b"")
        await loop.run_in_executor(None, apply_attributes, file.location, attributes)
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToSave, file.location, e)
    return success(file.location)


async def load_file(file: File) -> FileKitResult[File]:
    """Read file content asynchronously."""
    try:
        async with aiofiles.open(file.location, mode="rb") as f:
            data: bytes = await f.read()
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToLoad, file.location, e)
    return success(file.with_data(data))


async def load_folder(folder: Folder) -> FileKitResult[Folder]:
    """Enumerate folder entries asynchronously."""
    try:
        names: list[str] = await aiofiles.os.listdir(folder.location)
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToLoad, folder.location, e)

    entries = tuple(folder.location / name for name in names)
    return success(Folder(location=folder.location, entries=entries))


async def delete_file(file: File) -> FileKitResult[Path]:
    """Remove a single file asynchronously."""
    try:
        await aiofiles.os.unlink(file.location)
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToDelete, file.location, e)
    return success(file.location)


async def delete_folder(folder: Folder) -> FileKitResult[Path]:
    """Remove a folder recursively asynchronously."""
    # shutil.rmtree is blocking, run in executor
    loop = asyncio.get_running_loop()
    try:
        await loop.run_in_executor(None, remove_item, folder.location)
    except FILESYSTEM_ERRORS as e:
        return translate(FailedToDelete, folder.location, e)
    return success(folder.location)
