"""Worker execution context and result delivery for FileKitAsync.

Work runs on a WorkerLoop: a background thread driving its own asyncio
event loop, whose default executor is a bounded thread pool used by
aiofiles for blocking calls. Results are handed back on an execution
context chosen by the caller: an asyncio event loop or a
concurrent.futures.Executor.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Coroutine
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import Any, TypeAlias, TypeVar

from filekit.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExecutionContext: TypeAlias = asyncio.AbstractEventLoop | Executor

_callback_executor: ThreadPoolExecutor | None = None
_callback_executor_lock = threading.Lock()


def default_callback_executor() -> ThreadPoolExecutor:
    """Shared single-thread executor for callers without a running event loop."""
    global _callback_executor

    with _callback_executor_lock:
        if _callback_executor is None:
            _callback_executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="filekit-callbacks"
            )
        return _callback_executor


def resolve_context(context: ExecutionContext | None) -> ExecutionContext:
    """
    Pick the context a callback will run on.

    Must be called on the caller's thread: with no explicit context, the
    caller's running event loop is used, falling back to the shared
    callback executor.
    """
    if context is not None:
        return context
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return default_callback_executor()


def _invoke(callback: Callable[[T], Any], result: T) -> None:
    try:
        callback(result)
    except Exception:
        logger.exception(f"FileKit callback {callback!r} raised")
        raise


def deliver(context: ExecutionContext, callback: Callable[[T], Any], result: T) -> None:
    """Schedule callback(result) on context (never runs it inline)."""
    if isinstance(context, asyncio.AbstractEventLoop):
        context.call_soon_threadsafe(_invoke, callback, result)
    else:
        context.submit(_invoke, callback, result)


class WorkerLoop:
    """
    Background thread running an asyncio event loop for filesystem work.

    Started lazily on first submit. Thread-safe: submit() may be called
    from any thread.
    """

    def __init__(self, name: str = "filekit-worker", max_workers: int | None = None) -> None:
        """
        Initialize worker loop.

        Args:
            name: Worker thread name (I/O pool threads use it as prefix)
            max_workers: I/O thread pool size (None = Python default)
        """
        self.name = name
        self._max_workers = max_workers
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._pending: set[Future[Any]] = set()
        self._lock = threading.Lock()
        self._closed = False
        self._log = get_logger(__name__, worker=name)

    @property
    def thread(self) -> threading.Thread | None:
        """Worker thread, once started."""
        return self._thread

    def _start(self) -> asyncio.AbstractEventLoop:
        loop = asyncio.new_event_loop()
        loop.set_default_executor(
            ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix=f"{self.name}-io")
        )
        ready = threading.Event()

        def run() -> None:
            asyncio.set_event_loop(loop)
            loop.call_soon(ready.set)
            try:
                loop.run_forever()
            finally:
                loop.run_until_complete(loop.shutdown_default_executor())
                loop.close()

        self._thread = threading.Thread(target=run, name=self.name, daemon=True)
        self._thread.start()
        ready.wait()
        self._log.debug(f"Started worker loop {self.name}")
        return loop

    def submit(self, coro: Coroutine[Any, Any, T]) -> Future[T]:
        """
        Schedule coro on the worker loop.

        Raises:
            RuntimeError: If the worker has been shut down
        """
        with self._lock:
            if self._closed:
                coro.close()
                raise RuntimeError(f"Worker loop {self.name} is shut down")
            if self._loop is None:
                self._loop = self._start()
            future = asyncio.run_coroutine_threadsafe(coro, self._loop)
            self._pending.add(future)

        future.add_done_callback(self._discard)
        return future

    def _discard(self, future: Future[Any]) -> None:
        with self._lock:
            self._pending.discard(future)
        if not future.cancelled() and future.exception() is not None:
            self._log.error(f"Worker task failed: {future.exception()!r}")

    async def _drain(self) -> None:
        current = asyncio.current_task()
        tasks = [task for task in asyncio.all_tasks() if task is not current]
        await asyncio.gather(*tasks, return_exceptions=True)
        asyncio.get_running_loop().stop()

    def shutdown(self, wait_pending: bool = True) -> None:
        """
        Stop the worker loop once submitted work has finished.

        Args:
            wait_pending: Block until the worker has stopped. When False,
                submitted work still runs to completion in the background.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            pending = list(self._pending)
            loop = self._loop

        if loop is None or self._thread is None:
            return

        if not wait_pending:
            # Tasks submitted before close were scheduled ahead of the drain.
            asyncio.run_coroutine_threadsafe(self._drain(), loop)
            self._log.debug(f"Stopping worker loop {self.name} after {len(pending)} pending")
            return

        if pending:
            wait(pending)
        loop.call_soon_threadsafe(loop.stop)
        self._thread.join()
        self._log.debug(f"Stopped worker loop {self.name}")
