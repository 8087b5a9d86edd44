"""Task queues run on the calling thread or on worker threads."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections import deque
from collections.abc import Callable
from enum import Enum

Task = Callable[[], object]

_log = logging.getLogger(__name__)


class LocalDispatchQueue:
    """Task queue whose tasks run on the thread that processes it."""

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._lock = threading.Lock()

    def add(self, task: Task) -> None:
        """Add a task to the queue."""
        with self._lock:
            self._tasks.append(task)

    def _pop(self) -> Task | None:
        with self._lock:
            return self._tasks.popleft() if self._tasks else None

    def process_one(self) -> None:
        """Run the oldest task, if any, and return when it finishes."""
        task = self._pop()
        if task is not None:
            task()

    def process_all(self) -> None:
        """Run tasks one at a time until the queue is empty."""
        while (task := self._pop()) is not None:
            task()


class QueueType(Enum):
    """Serial runs one task at a time; concurrent runs one per CPU core."""

    SERIAL = "serial"
    CONCURRENT = "concurrent"


class DispatchQueue:
    """Task queue executed on one or more background threads."""

    def __init__(self, queue_type: QueueType) -> None:
        self._running = True
        self._working = 0
        self._tasks: deque[Task] = deque()
        self._cond = threading.Condition()
        count = 1
        if queue_type is QueueType.CONCURRENT:
            count = max(1, os.cpu_count() or 1)
        self._workers = [
            threading.Thread(target=self._worker, name=f"dispatch-{i}", daemon=True)
            for i in range(count)
        ]
        for worker in self._workers:
            worker.start()

    def _worker(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: not self._running or bool(self._tasks))
                if not self._running:
                    return
                task = self._tasks.popleft()
                self._working += 1
            try:
                task()
            except Exception:
                _log.exception("dispatched task failed")
            finally:
                with self._cond:
                    self._working -= 1

    def busy(self) -> bool:
        """Whether tasks are waiting or running."""
        with self._cond:
            return bool(self._tasks) or self._working > 0

    def stop(self) -> None:
        """Finish running tasks and skip those not yet started."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        for worker in self._workers:
            worker.join()
        self._workers.clear()

    def wait(self) -> None:
        """Block until the queue is idle."""
        while self.busy():
            time.sleep(0)

    def join(self) -> None:
        """Wait for all tasks to finish, then stop the workers."""
        self.wait()
        self.stop()

    def add(self, task: Task) -> None:
        """Add a task to the queue."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify()

    def __enter__(self) -> DispatchQueue:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.join()