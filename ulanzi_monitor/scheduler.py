"""
Run poll cycles on independent timers.
"""

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class PeriodicTask:
    """
    Calls a function every interval seconds on its own thread.

    The first call happens immediately. An exception from one call is logged
    and the task waits for its next tick as usual.
    """

    def __init__(self, name: str, func: Callable[[], object], interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.name = name
        self.func = func
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def run_once(self) -> bool:
        """Run one cycle. Returns False if it raised."""
        try:
            self.func()
        except Exception:
            logger.exception("Poll '%s' failed, retrying in %ss", self.name, self.interval)
            return False
        return True

    def _run(self) -> None:
        while not self._stop.is_set():
            self.run_once()
            self._stop.wait(self.interval)

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError(f"Task '{self.name}' already started")
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()


class Scheduler:
    """A set of PeriodicTasks that share nothing but a lifetime."""

    def __init__(self):
        self.tasks: list[PeriodicTask] = []

    def add(self, name: str, func: Callable[[], object], interval: float) -> PeriodicTask:
        task = PeriodicTask(name, func, interval)
        self.tasks.append(task)
        return task

    def start(self) -> None:
        for task in self.tasks:
            logger.info("Starting '%s' every %ss", task.name, task.interval)
            task.start()

    def stop(self, timeout: float | None = None) -> None:
        for task in self.tasks:
            task.stop(timeout)

    def run_once(self) -> bool:
        """Run every task once in order. Returns True if all succeeded."""
        results = [task.run_once() for task in self.tasks]
        return all(results)
