"""Storage adapter contract shared by every store medium."""

from abc import ABC, abstractmethod
from typing import Any

from .options import ProxyOptions


class StoreStorageAdapter(ABC):
    """Abstract base class for a key addressed storage medium.

    Implementations must honor two guarantees: a read after a write returns the
    written value, and `exists` reflects the most recent write or delete.
    """

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return True if a value is stored under the key."""

    @abstractmethod
    async def read(self, key: str, options: ProxyOptions[Any]) -> Any:
        """Return the value stored under the key.

        The behavior for a missing key is left to the implementation, so callers
        are expected to check `exists` first.
        """

    @abstractmethod
    async def write(self, key: str, value: Any, options: ProxyOptions[Any]) -> None:
        """Replace the value stored under the key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the value stored under the key."""
