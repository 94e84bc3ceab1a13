"""Response cache collaborators, keyed by the full request URL."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import OrderedDict

from dummyimage.schemas import RenderedImage

logger = logging.getLogger("dummyimage.cache")


class ResponseCache(ABC):
    """Storage for rendered images. Renders are pure, so entries never expire."""

    @abstractmethod
    async def get(self, key: str) -> RenderedImage | None:
        ...

    @abstractmethod
    async def put(self, key: str, image: RenderedImage) -> None:
        ...

    @abstractmethod
    async def clear(self) -> None:
        ...


class InMemoryResponseCache(ResponseCache):
    """Bounded LRU cache held in process memory."""

    def __init__(self, max_entries: int = 1024) -> None:
        self._entries: OrderedDict[str, RenderedImage] = OrderedDict()
        self._max_entries = max_entries
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> RenderedImage | None:
        async with self._lock:
            image = self._entries.get(key)
            if image is not None:
                self._entries.move_to_end(key)
            return image

    async def put(self, key: str, image: RenderedImage) -> None:
        if self._max_entries <= 0:
            return
        async with self._lock:
            self._entries[key] = image
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted %s", evicted)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def size(self) -> int:
        return len(self._entries)
