"""
The store module provides a lazily populated, validated cache of build artifacts.

- A `MeshStore` is a namespace node; children share its storage adapter.
- A `StoreProxy` caches the value of a single key and writes it through.
- `ProxyOptions` strategies encode, reconstruct and validate values.

The storage interface allows for various implementations (in-memory, filesystem, etc.).
"""

from .adapter import StoreStorageAdapter
from .flags import StoreFlags, StoreMode
from .fs import FsStoreStorageAdapter
from .in_memory import InMemoryStoreStorageAdapter
from .mesh_store import MeshStore
from .options import ProxyOptions
from .predefined import PredefinedProxyOptions, PredefinedProxyOptionsName
from .proxy import StoreProxy

__all__ = [
    "StoreStorageAdapter",
    "StoreFlags",
    "StoreMode",
    "FsStoreStorageAdapter",
    "InMemoryStoreStorageAdapter",
    "MeshStore",
    "ProxyOptions",
    "PredefinedProxyOptions",
    "PredefinedProxyOptionsName",
    "StoreProxy",
]
