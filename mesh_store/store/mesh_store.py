"""Hierarchical namespaces of cached artifacts over one storage adapter."""

from collections.abc import Mapping
import logging
import posixpath
from typing import Any, TypeVar

from .adapter import StoreStorageAdapter
from .flags import StoreFlags
from .options import ProxyOptions
from .proxy import StoreProxy

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class MeshStore:
    """A namespace node in a tree of stores.

    Every node created from a root store through `child` holds a handle to the
    same storage adapter. Nodes never close or release the adapter, and do not
    keep track of their children: the tree only exists through the identifiers.
    """

    def __init__(
        self, identifier: str, storage: StoreStorageAdapter, flags: StoreFlags
    ) -> None:
        """Initialize the MeshStore."""
        self.identifier = identifier
        self.flags = flags
        self._storage = storage

    @property
    def storage(self) -> StoreStorageAdapter:
        """Return the storage adapter shared by the whole store tree."""
        return self._storage

    def child(
        self,
        child_identifier: str,
        flags: StoreFlags | Mapping[str, Any] | None = None,
    ) -> "MeshStore":
        """Return a store for a nested namespace, optionally overriding flags."""
        return MeshStore(
            posixpath.join(self.identifier, child_identifier),
            self._storage,
            self.flags.merge(flags),
        )

    def proxy(self, key: str, options: ProxyOptions[T]) -> StoreProxy[T]:
        """Return a new proxy for a key in this namespace.

        Each call creates a proxy with its own cache, so callers should hold on
        to the returned proxy rather than asking for the same key again.
        """
        identifier = posixpath.join(self.identifier, key)
        _LOGGER.debug("Creating proxy for %s (%s)", identifier, self.flags)
        return StoreProxy(
            key=key,
            namespace=self.identifier,
            identifier=identifier,
            storage=self._storage,
            options=options,
            flags=self.flags,
        )

    def __repr__(self) -> str:
        """Return a debug representation of the store."""
        return f"MeshStore({self.identifier!r}, {self.flags})"
