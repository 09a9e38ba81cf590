import threading
from contextlib import contextmanager
from typing import Iterator

import redis

from festival.core.errors import StoreBusyError


class LocalLock:
    """Process-local mutual exclusion around the in-memory stores."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @contextmanager
    def hold(self) -> Iterator[None]:
        with self._lock:
            yield


class RedisLock:
    """
    Mutual exclusion through a Redis lock, so that only one request at a time
    can run a read-modify-write sequence against the stores.
    """

    def __init__(self, client, name: str, timeout: float = 10, blocking_timeout: float = 5):
        self._client = client
        self.name = name
        self.timeout = timeout
        self.blocking_timeout = blocking_timeout

    @contextmanager
    def hold(self) -> Iterator[None]:
        lock = self._client.lock(self.name, timeout=self.timeout, blocking_timeout=self.blocking_timeout)
        try:
            # Acquire the lock - only one request can proceed at a time
            if not lock.acquire(blocking=True, blocking_timeout=self.blocking_timeout):
                raise StoreBusyError()
        except redis.exceptions.LockError:  # type: ignore
            raise StoreBusyError()

        try:
            yield
        finally:
            # Always release the lock
            lock.release()


def make_lock(backend: str = "local", *, name: str = "festival:store",
              timeout: float = 10, blocking_timeout: float = 5, client=None):
    if backend == "local":
        return LocalLock()
    if backend == "redis":
        if client is None:
            from festival.core.redis_config import get_redis_client

            client = get_redis_client()
        return RedisLock(client, name, timeout=timeout, blocking_timeout=blocking_timeout)
    raise ValueError(f"Unknown lock backend: {backend!r}")
