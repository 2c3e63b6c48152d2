"""
Background task runner for File Browser.
Runs blocking work (HTTP requests, file reads) on daemon threads and hands
results back to the main thread through a queue.
"""

import traceback
from queue import Queue, Empty
from threading import Thread
from typing import Any, Callable, Optional

from utils.logging import log_error


class TaskRunner:
    """
    Runs work on background threads.

    Completion callbacks are queued and only executed when update() is
    called, which the main loop does once per frame. This keeps all
    state mutation on the UI thread. Work that raises is logged and its
    exception goes to ``on_error`` the same way.
    """

    def __init__(self):
        self._done_queue: Queue = Queue()

    def submit(
        self,
        work: Callable[[], Any],
        on_done: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        """
        Run ``work`` on a daemon thread.

        Args:
            work: Blocking callable
            on_done: Called on the main thread with the result of work
            on_error: Called on the main thread with the exception if
                work raised
        """
        thread = Thread(target=self._run, args=(work, on_done, on_error), daemon=True)
        thread.start()

    def call_soon(self, callback: Callable[[], None]) -> None:
        """Queue a callback for the next update() without running work."""
        self._done_queue.put((lambda _result: callback(), None))

    def update(self) -> int:
        """
        Execute completion callbacks queued by finished tasks.
        Should be called from main thread each frame.

        Returns:
            Number of callbacks executed
        """
        executed = 0
        while not self._done_queue.empty():
            try:
                callback, result = self._done_queue.get_nowait()
            except Empty:
                break
            callback(result)
            executed += 1
        return executed

    def _run(
        self,
        work: Callable[[], Any],
        on_done: Optional[Callable],
        on_error: Optional[Callable],
    ) -> None:
        """Thread body: run the work and queue its completion."""
        try:
            result = work()
        except Exception as e:
            log_error("Background task failed", type(e).__name__, traceback.format_exc())
            if on_error is not None:
                self._done_queue.put((on_error, e))
            return
        if on_done is not None:
            self._done_queue.put((on_done, result))


class ImmediateTaskRunner(TaskRunner):
    """
    Task runner that executes work synchronously.

    Used when no main loop is pumping update(), e.g. in scripts and tests.
    """

    def submit(
        self,
        work: Callable[[], Any],
        on_done: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        try:
            result = work()
        except Exception as e:
            log_error("Background task failed", type(e).__name__, traceback.format_exc())
            if on_error is not None:
                on_error(e)
            return
        if on_done is not None:
            on_done(result)

    def call_soon(self, callback: Callable[[], None]) -> None:
        callback()
