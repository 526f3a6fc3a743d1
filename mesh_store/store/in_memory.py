"""Module for an in memory storage adapter."""

import logging
from typing import Any

from .adapter import StoreStorageAdapter
from .options import ProxyOptions

_LOGGER = logging.getLogger(__name__)


class InMemoryStoreStorageAdapter(StoreStorageAdapter):
    """In-memory implementation of the StoreStorageAdapter interface.

    Values are held as-is for the lifetime of the adapter, without going through
    the strategy's serialization.
    """

    def __init__(self) -> None:
        """Initialize the InMemoryStoreStorageAdapter."""
        self._data: dict[str, Any] = {}

    async def exists(self, key: str) -> bool:
        """Return True if a value is stored under the key."""
        return key in self._data

    async def read(self, key: str, options: ProxyOptions[Any]) -> Any:
        """Return the value stored under the key, or None when missing."""
        return self._data.get(key)

    async def write(self, key: str, value: Any, options: ProxyOptions[Any]) -> None:
        """Replace the value stored under the key."""
        _LOGGER.debug("Writing %s to memory", key)
        self._data[key] = value

    async def delete(self, key: str) -> None:
        """Remove the value stored under the key, ignoring missing keys."""
        _LOGGER.debug("Deleting %s from memory", key)
        self._data.pop(key, None)

    def clear(self) -> None:
        """Remove every stored value."""
        self._data.clear()
