"""
In-memory stores for events and booths.

Both stores are flat mappings owned by a single FestivalStore whose lifetime
is the server process. Callers must hold ``FestivalStore.locked()`` around any
sequence that reads and then writes.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from festival.core.config import get_settings
from festival.core.locking import LocalLock, make_lock
from festival.models.booths import Booth
from festival.models.events import Event


class EventStore:
    """Events keyed by admin id."""

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, admin_id: str) -> bool:
        return admin_id in self._events

    def add(self, event: Event) -> None:
        self._events[event.admin_id] = event

    def get(self, admin_id: str) -> Event | None:
        return self._events.get(admin_id)

    def find_by_public_id(self, public_id: str) -> Event | None:
        # Linear scan; the store is expected to stay small.
        for event in self._events.values():
            if event.public_id == public_id:
                return event
        return None

    def public_id_taken(self, public_id: str) -> bool:
        return self.find_by_public_id(public_id) is not None


class BoothStore:
    """Booths keyed by booth id."""

    def __init__(self) -> None:
        self._booths: dict[str, Booth] = {}

    def __len__(self) -> int:
        return len(self._booths)

    def __contains__(self, booth_id: str) -> bool:
        return booth_id in self._booths

    def add(self, booth: Booth) -> None:
        self._booths[booth.id] = booth

    def get(self, booth_id: str) -> Booth | None:
        return self._booths.get(booth_id)

    def resolve(self, booth_ids: list[str]) -> list[Booth]:
        """Return the booths for ``booth_ids`` in the same order."""
        return [self._booths[booth_id] for booth_id in booth_ids]


class FestivalStore:
    def __init__(self, lock=None) -> None:
        self.events = EventStore()
        self.booths = BoothStore()
        self._lock = lock if lock is not None else LocalLock()

    @contextmanager
    def locked(self) -> Iterator["FestivalStore"]:
        with self._lock.hold():
            yield self


_store: FestivalStore | None = None
_store_init_lock = threading.Lock()


def build_store() -> FestivalStore:
    settings = get_settings()
    lock = make_lock(
        settings.lock_backend,
        name=settings.lock_name,
        timeout=settings.lock_timeout,
        blocking_timeout=settings.lock_blocking_timeout,
    )
    return FestivalStore(lock=lock)


def get_store() -> FestivalStore:
    """Process-wide store dependency; override it in tests."""
    global _store
    with _store_init_lock:
        if _store is None:
            _store = build_store()
    return _store
