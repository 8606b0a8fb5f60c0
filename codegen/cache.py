from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Iterator, Mapping, TypeVar

from .errors import GenerationError, TargetConstructionError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TargetCache(Generic[K, V]):
    """Memoizing map from key to a lazily built target.

    A target is built at most once per cache. Not safe for concurrent use;
    a generation pass owns its caches exclusively.
    """

    __slots__ = ("_factory", "_items")

    def __init__(self, factory: Callable[[K], V]) -> None:
        self._factory = factory
        self._items: dict[K, V] = {}

    def get(self, key: K) -> V:
        if key in self._items:
            return self._items[key]
        try:
            value = self._factory(key)
        except GenerationError:
            raise
        except Exception as exc:
            raise TargetConstructionError(f"Failed to construct output target for '{key}'") from exc
        logger.debug("Created output target %s", key)
        self._items[key] = value
        return value

    def values(self) -> list[V]:
        return list(self._items.values())

    def as_map(self) -> Mapping[K, V]:
        return MappingProxyType(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
