"""Local capability store interface."""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from collab.domain.model.local_share import LocalShareData


class LocalShareStore(ABC):
    """Client-local mapping of resource id to share slots.

    Implementations must never raise on unreadable data: a corrupt store
    reads as empty. Writers in one process are serialised through
    ``writing()``; separate processes sharing a file are not.
    """

    def __init__(self) -> None:
        self._write_lock = threading.RLock()

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Hold the store for a load-modify-save sequence."""
        with self._write_lock:
            yield

    @abstractmethod
    def load(self) -> dict[str, LocalShareData]:
        """Read the whole mapping."""
        pass

    @abstractmethod
    def save(self, shares: dict[str, LocalShareData]) -> None:
        """Replace the whole mapping."""
        pass
