"""Shared pytest fixtures for filekit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from filekit import File, FileKit, FileKitAsync, FileKitResult, Folder

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Provide an empty directory for filesystem tests."""
    return tmp_path


@pytest.fixture
def folder(root: Path) -> Folder:
    """Provide a folder value that does not exist on disk yet."""
    return Folder(location=root / "filekit")


@pytest.fixture
def file(folder: Folder) -> File:
    """Provide a file value with content inside the folder fixture."""
    return File(name="file.txt", folder=folder, data=b"Hello World")


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def kit() -> FileKit:
    """Provide synchronous service."""
    return FileKit()


@pytest.fixture
def async_kit() -> Iterator[FileKitAsync]:
    """Provide async service, shut down after the test."""
    service = FileKitAsync()
    yield service
    service.close()


@pytest.fixture
def collect() -> Callable[..., Awaitable[FileKitResult[Any]]]:
    """Run an async-service operation and await the result on the running loop.

    Usage:
        result = await collect(async_kit.load, file)
    """

    async def run(operation: Callable[..., None], *args: Any, **kwargs: Any) -> FileKitResult[Any]:
        done: asyncio.Future[FileKitResult[Any]] = asyncio.get_running_loop().create_future()
        operation(*args, callback=done.set_result, **kwargs)
        return await asyncio.wait_for(done, timeout=5.0)

    return run
