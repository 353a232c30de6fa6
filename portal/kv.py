import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional, Tuple


def now() -> datetime:
    return datetime.now(timezone.utc)


# Kulcs-érték tároló interfész (a munkamenetek és jelszavak ebben élnek)
class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    def put(self, key: str, value: Any, ttl: Optional[timedelta] = None) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def compare_and_swap(self, key: str, expected: Optional[Any], new: Optional[Any],
                         ttl: Optional[timedelta] = None) -> bool:
        """Atomically replace ``expected`` with ``new``.

        ``expected=None`` means the key must be absent, ``new=None`` deletes it.
        Returns False (and changes nothing) when the current value differs.
        """

    @abstractmethod
    def purge_expired(self) -> int:
        ...


# Memóriabeli tároló: csak a folyamat élettartamáig él, példányok között nincs megosztva
class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, clock: Callable[[], datetime] = now):
        self._clock = clock
        self._lock = threading.RLock()
        # key -> (value, deadline vagy None)
        self._data: Dict[str, Tuple[Any, Optional[datetime]]] = {}

    def _deadline(self, ttl: Optional[timedelta]) -> Optional[datetime]:
        return self._clock() + ttl if ttl is not None else None

    # Élő érték lekérése; lejártat azonnal törli (lock alatt hívandó)
    def _live(self, key: str) -> Optional[Any]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if deadline is not None and deadline <= self._clock():
            del self._data[key]
            return None
        return value

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._live(key)

    def put(self, key: str, value: Any, ttl: Optional[timedelta] = None) -> None:
        with self._lock:
            self._data[key] = (value, self._deadline(ttl))

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def compare_and_swap(self, key: str, expected: Optional[Any], new: Optional[Any],
                         ttl: Optional[timedelta] = None) -> bool:
        with self._lock:
            if self._live(key) != expected:
                return False
            if new is None:
                self._data.pop(key, None)
            else:
                self._data[key] = (new, self._deadline(ttl))
            return True

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            stale = [k for k, (_, deadline) in self._data.items()
                     if deadline is not None and deadline <= now]
            for k in stale:
                del self._data[k]
            return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
