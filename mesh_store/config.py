"""Configuration objects for mesh-store.

A store configuration selects the storage medium, the root identifier of the
store tree and its flags, either explicitly or through a pipeline mode:

```yaml
root: .mesh
adapter: fs
module_extension: yaml
mode: validate
```
"""

from dataclasses import dataclass
from enum import StrEnum
import logging
from pathlib import Path
from typing import Any

import aiofiles
from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig
from mashumaro.exceptions import ExtraKeysError, InvalidFieldValue, MissingField
import yaml

from .exceptions import ConfigException
from .store import (
    FsStoreStorageAdapter,
    InMemoryStoreStorageAdapter,
    MeshStore,
    StoreFlags,
    StoreMode,
    StoreStorageAdapter,
)
from .store.fs import DEFAULT_EXTENSION

__all__ = [
    "AdapterType",
    "StoreConfig",
    "read_store_config",
    "create_storage",
    "create_store",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_ROOT = ".mesh"


class AdapterType(StrEnum):
    """Storage medium backing a store tree."""

    FS = "fs"
    MEMORY = "memory"


@dataclass
class StoreConfig(DataClassDictMixin):
    """Configuration for the root store of a pipeline run."""

    root: str = DEFAULT_ROOT
    """Identifier of the root store, a directory for the filesystem adapter."""

    adapter: AdapterType = AdapterType.FS
    """Storage medium for the artifacts."""

    module_extension: str = DEFAULT_EXTENSION
    """File extension of artifacts written by the filesystem adapter."""

    mode: StoreMode | None = None
    """Pipeline stage used to pick the store flags."""

    flags: StoreFlags | None = None
    """Explicit store flags, taking precedence over the mode."""

    @property
    def store_flags(self) -> StoreFlags:
        """Return the flags of the root store."""
        if self.flags is not None:
            return self.flags
        if self.mode is not None:
            return StoreFlags.for_mode(self.mode)
        return StoreFlags()

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "StoreConfig":
        """Parse a store configuration from a parsed yaml document."""
        if not isinstance(doc, dict):
            raise ConfigException(f"Invalid store configuration: {doc}")
        try:
            return cls.from_dict(doc)
        except (ExtraKeysError, InvalidFieldValue, MissingField) as err:
            raise ConfigException(f"Invalid store configuration: {err}") from err

    @classmethod
    def parse_yaml(cls, content: str) -> "StoreConfig":
        """Parse a serialized store configuration."""
        try:
            doc = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise ConfigException(f"Invalid store configuration: {err}") from err
        return cls.parse_doc(doc if doc is not None else {})

    class Config(BaseConfig):
        omit_none = True
        forbid_extra_keys = True


async def read_store_config(config_path: Path) -> StoreConfig:
    """Return the store configuration from a yaml file."""
    async with aiofiles.open(str(config_path)) as config_file:
        content = await config_file.read()
    return StoreConfig.parse_yaml(content)


def create_storage(config: StoreConfig) -> StoreStorageAdapter:
    """Return a new storage adapter for the configured medium."""
    if config.adapter == AdapterType.MEMORY:
        return InMemoryStoreStorageAdapter()
    return FsStoreStorageAdapter(config.module_extension)


def create_store(config: StoreConfig) -> MeshStore:
    """Return the root store described by the configuration."""
    flags = config.store_flags
    _LOGGER.debug(
        "Creating %s store at %s with %s", config.adapter, config.root, flags
    )
    return MeshStore(config.root, create_storage(config), flags)
