"""Subsystem interface and a factory that runs subsystems on threads."""

from __future__ import annotations

import abc
import threading
from typing import Callable, TypeVar


class Subsystem(abc.ABC):
    """Something that runs until its shared running flag is cleared."""

    @abc.abstractmethod
    def run(self) -> None:
        """Run the subsystem's loop."""


S = TypeVar("S", bound=Subsystem)


class ThreadFactory:
    """Starts subsystems on their own threads and joins them on exit."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []

    def launch(
        self, subsystem_type: Callable[[threading.Event], S], running: threading.Event
    ) -> S:
        """Build a subsystem with ``running`` and start its ``run`` on a thread."""
        subsystem = subsystem_type(running)
        thread = threading.Thread(
            target=subsystem.run, name=type(subsystem).__name__
        )
        thread.start()
        self._threads.append(thread)
        return subsystem

    def join(self) -> None:
        """Wait for every launched thread to finish."""
        while self._threads:
            self._threads.pop(0).join()

    def __enter__(self) -> "ThreadFactory":
        return self

    def __exit__(self, *args: object) -> None:
        self.join()