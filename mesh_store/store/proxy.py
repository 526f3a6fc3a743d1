"""Per-key lazy cache over one entry of a storage adapter.

A proxy loads its value from storage at most once, then serves it from memory.
Writes are validated according to the flags of the store that created the proxy
and go straight through to storage.

Some behaviors are intentional and relied upon by callers:

- `delete` is not gated by the read-only flag, and does not reset the cached
  value, so `get` may return a value that was deleted from storage.
- Two proxies created for the same key cache independently.
- Concurrent calls are not de-duplicated: two `get` calls racing before the
  first load completes both read from storage, and concurrent `set` calls are
  last write wins.
"""

from collections.abc import Awaitable, Callable
import inspect
import logging
from typing import Any, Generic, TypeVar

from mesh_store.context import trace_context
from mesh_store.exceptions import (
    ChangesRejectedError,
    ReadonlyStoreError,
    ValidationError,
)

from .adapter import StoreStorageAdapter
from .flags import StoreFlags
from .options import ProxyOptions

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class StoreProxy(Generic[T]):
    """Cached access to the value of a single key in a store."""

    def __init__(
        self,
        key: str,
        namespace: str,
        identifier: str,
        storage: StoreStorageAdapter,
        options: ProxyOptions[T],
        flags: StoreFlags,
    ) -> None:
        """Initialize the StoreProxy."""
        self._key = key
        self._namespace = namespace
        self._identifier = identifier
        self._storage = storage
        self._options = options
        self._flags = flags
        self._value: T | None = None
        self._is_cached = False

    @property
    def identifier(self) -> str:
        """Return the full identifier of the storage slot."""
        return self._identifier

    @property
    def flags(self) -> StoreFlags:
        """Return the flags of the store the proxy was created from."""
        return self._flags

    @property
    def is_cached(self) -> bool:
        """Return True once the value was loaded from storage or set."""
        return self._is_cached

    async def _ensure_value_cached(self) -> None:
        if self._is_cached:
            return
        with trace_context(f"Load {self._identifier}") as label:
            if await self._storage.exists(self._identifier):
                self._value = await self._storage.read(self._identifier, self._options)
            else:
                _LOGGER.debug("%s: no stored value", label)
        self._is_cached = True

    async def _validate(self, new_value: T | None) -> None:
        await self._ensure_value_cached()
        if self._value is None or new_value is None:
            return
        try:
            await self._options.async_validate(
                self._value, new_value, self._identifier
            )
        except Exception as err:
            errors = err.errors if isinstance(err, ChangesRejectedError) else [str(err)]
            raise ValidationError(self._key, self._namespace, errors) from err

    async def get(self) -> T | None:
        """Return the value, loading it from storage on first access."""
        await self._ensure_value_cached()
        return self._value

    async def set(self, value: T) -> None:
        """Validate the value if required and write it through to storage."""
        if self._flags.readonly:
            raise ReadonlyStoreError(self._key, self._namespace)
        if self._flags.validate:
            await self._validate(value)
        self._value = value
        self._is_cached = True
        with trace_context(f"Write {self._identifier}"):
            await self._storage.write(self._identifier, value, self._options)

    async def get_with_set(
        self, setter: Callable[[], T | Awaitable[T]]
    ) -> T | None:
        """Return the stored value, computing and storing it when needed.

        The setter is called when there is no stored value yet, or when the
        store validates values. A read-only validating store only checks the
        computed value against the stored one and never persists it.
        """
        await self._ensure_value_cached()
        if self._flags.validate or self._value is None:
            new_value: Any = setter()
            if inspect.isawaitable(new_value):
                new_value = await new_value
            if self._flags.validate and self._flags.readonly:
                await self._validate(new_value)
                _LOGGER.info("Validated %s without persisting it", self._identifier)
            if not self._flags.readonly:
                await self.set(new_value)
        return self._value

    async def delete(self) -> None:
        """Remove the value from storage."""
        with trace_context(f"Delete {self._identifier}"):
            await self._storage.delete(self._identifier)
