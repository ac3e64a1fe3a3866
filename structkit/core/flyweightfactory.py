#!/usr/bin/env python
import logging
from threading import Lock
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    Mapping,
    Optional,
    TypeVar,
)

from structkit.core.baseline import BaselineGenerator, build_baseline
from structkit.core.keys import Entry
from structkit.core.sharedstatecache import SharedStateCache

I = TypeVar("I", bound=Hashable)
T = TypeVar("T")


class FlyweightFactory(Generic[I, T]):
    """Hands out exactly one instance per identity.

    Lookup, construction and registration happen under a single lock, so
    concurrent first requests for an identity build it once. A builder that
    raises registers nothing.
    """

    def __init__(self, builder: Callable[[I], T]) -> None:
        self._builder = builder
        self._instances: Dict[I, T] = {}
        self._lock: Lock = Lock()

    def get_or_create(self, identity: I) -> T:
        with self._lock:
            if identity not in self._instances:
                self._instances[identity] = self._builder(identity)
                logging.info(
                    "%(factory)s: created instance for %(identity)s",
                    {"factory": type(self).__name__, "identity": identity},
                )
            return self._instances[identity]

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def __iter__(self) -> Iterator[I]:
        with self._lock:
            return iter(list(self._instances))


class CacheRegistry(FlyweightFactory[Hashable, SharedStateCache]):
    def __init__(
        self, generator: BaselineGenerator, share_baseline: bool = True
    ) -> None:
        super().__init__(self._build_cache)
        self._generator = generator
        self._share_baseline = share_baseline
        self._shared_baseline: Optional[Mapping[Hashable, Entry]] = None

    def _build_cache(self, identity: Hashable) -> SharedStateCache:
        # runs under the factory lock
        if not self._share_baseline:
            return SharedStateCache(identity, build_baseline(self._generator))
        if self._shared_baseline is None:
            self._shared_baseline = build_baseline(self._generator)
        return SharedStateCache(identity, self._shared_baseline)
