"""A resizable pool of worker threads that runs submitted callables."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from enum import Enum
from typing import Any

DEFAULT_MIN_THREADS = 1
DEFAULT_MAX_THREADS = os.cpu_count() or 1
DEFAULT_MAX_IDLE_MS = 60_000


class Status(Enum):
    """Life-cycle state of a thread pool."""

    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


class ThreadPool:
    """Runs callables on between ``min_threads`` and ``max_threads`` worker threads.

    A worker that has found no work for ``max_idle_ms`` milliseconds exits as
    long as more than ``min_threads`` workers remain.
    """

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREADS,
        max_threads: int = DEFAULT_MAX_THREADS,
        max_idle_ms: int | timedelta = DEFAULT_MAX_IDLE_MS,
    ) -> None:
        if min_threads < 0:
            raise ValueError("min_threads must not be negative")
        if max_threads < min_threads:
            raise ValueError("max_threads must not be smaller than min_threads")
        if isinstance(max_idle_ms, timedelta):
            max_idle_ms = max_idle_ms // timedelta(milliseconds=1)
        self.min_threads = min_threads
        self.max_threads = max_threads
        self.max_idle_ms = max_idle_ms
        self._cond = threading.Condition()
        self._status = Status.STOP
        self._tasks: deque[Callable[[], None]] = deque()
        self._futures: deque[Future[Any]] = deque()
        self._threads: dict[int, threading.Thread] = {}
        self._cur = 0
        self._idle = 0

    @property
    def status(self) -> Status:
        return self._status

    @property
    def thread_count(self) -> int:
        with self._cond:
            return self._cur

    @property
    def idle_thread_count(self) -> int:
        with self._cond:
            return self._idle

    @property
    def task_count(self) -> int:
        with self._cond:
            return len(self._tasks)

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with ``start_threads`` workers, clamped to the limits."""
        with self._cond:
            if self._status is not Status.STOP:
                raise RuntimeError("thread pool is already started")
            self._status = Status.RUNNING
            count = max(self.min_threads, min(start_threads, self.max_threads))
            for _ in range(count):
                self._create_thread()

    def stop(self) -> None:
        """Stop all workers, cancel queued tasks and wait for the workers to end."""
        with self._cond:
            if self._status is Status.STOP:
                raise RuntimeError("thread pool is already stopped")
            self._status = Status.STOP
            self._tasks.clear()
            pending = list(self._futures)
            self._futures.clear()
            threads = list(self._threads.values())
            self._cond.notify_all()
        for future in pending:
            future.cancel()
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._cur = 0
            self._idle = 0
            self._cond.notify_all()

    def pause(self) -> None:
        """Keep workers from taking new tasks until :meth:`resume` is called."""
        with self._cond:
            if self._status is Status.RUNNING:
                self._status = Status.PAUSE

    def resume(self) -> None:
        """Let paused workers take tasks again."""
        with self._cond:
            if self._status is Status.PAUSE:
                self._status = Status.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every worker is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is Status.STOP
                or (not self._tasks and self._idle == self._cur)
            )

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        A stopped pool is started first.
        """
        future: Future[Any] = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # noqa: BLE001 - handed to the caller
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._status is Status.STOP:
                self._status = Status.RUNNING
                for _ in range(self.min_threads):
                    self._create_thread()
            self._tasks.append(task)
            self._futures.append(future)
            if self._idle <= 0 and self._cur < self.max_threads:
                self._create_thread()
            self._cond.notify_all()
        return future

    def __enter__(self) -> ThreadPool:
        if self._status is Status.STOP:
            self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        if self._status is not Status.STOP:
            self.stop()

    def _create_thread(self) -> bool:
        # Caller holds self._cond.
        if self._cur >= self.max_threads:
            return False
        thread = threading.Thread(target=self._work, daemon=True)
        self._cur += 1
        self._idle += 1
        thread.start()
        self._threads[thread.ident or id(thread)] = thread
        return True

    def _work(self) -> None:
        idle_timeout = self.max_idle_ms / 1000
        me = threading.current_thread()
        while True:
            with self._cond:
                while self._status is Status.PAUSE:
                    self._cond.wait()
                if self._status is Status.STOP:
                    return
                self._cond.wait_for(
                    lambda: self._status is not Status.RUNNING or bool(self._tasks),
                    timeout=idle_timeout,
                )
                if self._status is Status.STOP:
                    return
                if self._status is Status.PAUSE:
                    continue
                if not self._tasks:
                    if self._cur > self.min_threads:
                        self._cur -= 1
                        self._idle -= 1
                        self._threads.pop(me.ident or id(me), None)
                        self._cond.notify_all()
                        return
                    continue
                task = self._tasks.popleft()
                self._futures.popleft()
                self._idle -= 1
            task()
            with self._cond:
                self._idle += 1
                self._cond.notify_all()