"""In-memory storage."""

import copy
from typing import Iterable

from .storage import StoreItem


class MemoryStorage:
    """Dict-backed storage. Single process only; nothing survives a restart."""

    def __init__(self, initial: dict[str, StoreItem] | None = None):
        self._items: dict[str, StoreItem] = copy.deepcopy(initial or {})

    async def read(self, keys: Iterable[str]) -> dict[str, StoreItem]:
        return {
            key: copy.deepcopy(self._items[key]) for key in keys if key in self._items
        }

    async def write(self, changes: dict[str, StoreItem]) -> None:
        for key, item in changes.items():
            self._items[key] = copy.deepcopy(item)

    async def delete(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._items.pop(key, None)
