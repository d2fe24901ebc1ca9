"""Asynchronous, callback-based FileKit service.

Each call returns immediately. The filesystem work runs on a worker event
loop thread and the FileKitResult is delivered exactly once to the callback,
on the execution context the caller chose:

- an asyncio event loop (scheduled with call_soon_threadsafe)
- a concurrent.futures.Executor (submitted to it)
- omitted: the caller's running event loop, or the shared
  ``filekit-callbacks`` thread when the caller has none

Callbacks never run inside the original call and never on the worker.
Operations cannot be cancelled once submitted. Outcomes and error kinds
match FileKit exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine, Mapping
from types import TracebackType
from typing import Any

from filekit.core import aio
from filekit.core.config.models import FileKitConfig
from filekit.core.dispatch import ExecutionContext, WorkerLoop, deliver, resolve_context
from filekit.core.models import File, Folder
from filekit.core.result import FileKitResult

logger = logging.getLogger(__name__)

Callback = Callable[[FileKitResult[Any]], Any]


class FileKitAsync:
    """
    Non-blocking create/save/load/delete for File and Folder values.

    Example:
        >>> async def main():
        ...     loop = asyncio.get_running_loop()
        ...     done = loop.create_future()
        ...     kit = FileKitAsync()
        ...     kit.load(file, done.set_result)
        ...     result = await done
        ...     kit.close()
    """

    def __init__(self, config: FileKitConfig | None = None) -> None:
        """
        Initialize async service.

        Args:
            config: Worker configuration (defaults to FileKitConfig())
        """
        config = config or FileKitConfig()
        self._worker = WorkerLoop(name=config.worker_name, max_workers=config.max_workers)

    @property
    def worker(self) -> WorkerLoop:
        """Worker execution context running the filesystem operations."""
        return self._worker

    def _submit(
        self,
        operation: Coroutine[Any, Any, FileKitResult[Any]],
        callback: Callback | None,
        context: ExecutionContext | None,
    ) -> None:
        # Resolve on the caller's thread so the caller's running loop is captured.
        target = resolve_context(context) if callback is not None else None
        try:
            self._worker.submit(self._run(operation, callback, target))
        except RuntimeError:
            operation.close()
            raise

    @staticmethod
    async def _run(
        operation: Coroutine[Any, Any, FileKitResult[Any]],
        callback: Callback | None,
        context: ExecutionContext | None,
    ) -> None:
        result = await operation
        if callback is None or context is None:
            return
        try:
            deliver(context, callback, result)
        except RuntimeError as e:
            # Caller's loop closed or executor shut down before delivery.
            logger.warning(f"Could not deliver FileKit result to {context!r}: {e}")

    @staticmethod
    def _require(callback: Callback | None) -> Callback:
        if callback is None:
            raise TypeError("load requires a callback to receive the loaded value")
        return callback

    def create(
        self,
        folder: Folder,
        attributes: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Create folder and missing ancestors; result is Path or FailedToCreate."""
        self._submit(aio.create(folder, attributes), callback, context)

    def save(
        self,
        file: File,
        attributes: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Write file into its existing folder.

        The result is the file's Path, FolderDoesNotExist, or FailedToSave.
        """
        self._submit(aio.save(file, attributes), callback, context)

    def load_file(
        self, file: File, callback: Callback, context: ExecutionContext | None = None
    ) -> None:
        """Read file content; result is the loaded File or FailedToLoad."""
        callback = self._require(callback)
        self._submit(aio.load_file(file), callback, context)

    def load_folder(
        self, folder: Folder, callback: Callback, context: ExecutionContext | None = None
    ) -> None:
        """Enumerate folder; result is the loaded Folder or FailedToLoad."""
        callback = self._require(callback)
        self._submit(aio.load_folder(folder), callback, context)

    def delete_file(
        self,
        file: File,
        callback: Callback | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Remove a single file; result is Path or FailedToDelete."""
        self._submit(aio.delete_file(file), callback, context)

    def delete_folder(
        self,
        folder: Folder,
        callback: Callback | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Remove a folder recursively; result is Path or FailedToDelete."""
        self._submit(aio.delete_folder(folder), callback, context)

    def load(
        self, item: File | Folder, callback: Callback, context: ExecutionContext | None = None
    ) -> None:
        """Load a File (content) or a Folder (entries)."""
        if isinstance(item, File):
            self.load_file(item, callback, context)
        elif isinstance(item, Folder):
            self.load_folder(item, callback, context)
        else:
            raise TypeError(f"Expected File or Folder, got {type(item).__name__}")

    def delete(
        self,
        item: File | Folder,
        callback: Callback | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Delete a File (single entry) or a Folder (recursively)."""
        if isinstance(item, File):
            self.delete_file(item, callback, context)
        elif isinstance(item, Folder):
            self.delete_folder(item, callback, context)
        else:
            raise TypeError(f"Expected File or Folder, got {type(item).__name__}")

    def close(self, wait: bool = True) -> None:
        """
        Shut down the worker once submitted operations have finished.

        Args:
            wait: Block until then. When False, close returns at once and
                pending results are still delivered to their callbacks.
        """
        self._worker.shutdown(wait_pending=wait)

    def __enter__(self) -> FileKitAsync:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

