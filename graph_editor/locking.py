"""
    ReadWriteLock — single writer / many readers around the shared graph.

    Readers may hold the lock together; a writer holds it alone and
    blocks readers and other writers.  Waiting writers are served before
    new readers so a steady stream of renders can't starve a command.

    If an exception escapes while a writer holds the lock, the graph may
    be half-mutated.  The lock is then *poisoned*: every later acquire
    raises ``LockPoisonedError`` instead of handing out the graph.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .services.exceptions import LockPoisonedError

logger = logging.getLogger(__name__)


class ReadWriteLock:

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def _check_poison(self) -> None:
        if self._poisoned:
            raise LockPoisonedError("graph lock poisoned by a failed writer")

    # ── Readers ──────────────────────────────────────────────────

    def acquire_read(self) -> None:
        with self._cond:
            self._check_poison()
            while self._writer or self._waiting_writers:
                self._cond.wait()
                self._check_poison()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    # ── Writers ──────────────────────────────────────────────────

    def acquire_write(self) -> None:
        with self._cond:
            self._check_poison()
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                    self._check_poison()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self, poison: bool = False) -> None:
        with self._cond:
            self._writer = False
            if poison:
                self._poisoned = True
            self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        except BaseException:
            logger.error("Writer failed while holding the graph lock; lock poisoned.")
            self.release_write(poison=True)
            raise
        else:
            self.release_write()
