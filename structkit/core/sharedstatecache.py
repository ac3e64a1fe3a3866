#!/usr/bin/env python
import logging
from typing import Dict, Hashable, Mapping, Optional

from structkit.core.keys import Entry
from structkit.core.rwlock import ReadWriteLock


class SharedStateCache:
    """Flyweight view over a shared read-only baseline.

    Writes land in a private override mapping guarded by a readers-writer
    lock; the baseline is never mutated and is read without locking, so
    several caches can share one baseline safely.
    """

    def __init__(self, identity: Hashable, baseline: Mapping[Hashable, Entry]) -> None:
        self.identity = identity
        self._baseline = baseline
        self._overrides: Dict[Hashable, Entry] = {}
        self._lock = ReadWriteLock()

    @property
    def baseline(self) -> Mapping[Hashable, Entry]:
        return self._baseline

    def get(self, key: Hashable) -> Optional[int | float]:
        with self._lock.read_locked():
            entry = self._overrides.get(key)
        if entry is None:
            entry = self._baseline.get(key)
        return entry.value if entry is not None else None

    def set(self, key: Hashable, value: int | float) -> None:
        entry = Entry(key=key, value=value)
        with self._lock.write_locked():
            self._overrides[key] = entry
        logging.debug(
            "cache %(identity)s: override %(key)s -> %(value)s",
            {"identity": self.identity, "key": key, "value": value},
        )

    def total(self) -> int | float:
        """Sum over baseline and override keys, each counted once."""
        with self._lock.read_locked():
            overrides = dict(self._overrides)
        result = sum(
            entry.value
            for key, entry in self._baseline.items()
            if key not in overrides
        )
        return result + sum(entry.value for entry in overrides.values())

    def override_count(self) -> int:
        with self._lock.read_locked():
            return len(self._overrides)

    def overrides(self) -> Dict[Hashable, int | float]:
        with self._lock.read_locked():
            snapshot = dict(self._overrides)
        return {key: entry.value for key, entry in snapshot.items()}

    def __repr__(self) -> str:
        return (
            f"SharedStateCache(identity={self.identity!r}, "
            f"baseline={len(self._baseline)}, overrides={self.override_count()})"
        )
