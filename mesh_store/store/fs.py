"""Module for a storage adapter that persists each key as a file on disk.

Each key is written as a single artifact document at `<key>.<extension>`. The
strategy used for a proxy decides how a value is encoded (`codify`) and how it is
reconstructed when the file is read back (`load`), so the adapter itself only
moves text between the strategy and the filesystem.
"""

import logging
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os
from aiofiles.ospath import exists

from .adapter import StoreStorageAdapter
from .options import ProxyOptions

_LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSION = "yaml"


class FsStoreStorageAdapter(StoreStorageAdapter):
    """Filesystem implementation of the StoreStorageAdapter interface."""

    def __init__(self, module_extension: str = DEFAULT_EXTENSION) -> None:
        """Initialize the FsStoreStorageAdapter."""
        self._extension = module_extension.lstrip(".")

    @property
    def module_extension(self) -> str:
        """Return the file extension used for artifacts."""
        return self._extension

    def path_for(self, key: str) -> Path:
        """Return the path of the file holding the key."""
        return Path(f"{key}.{self._extension}")

    async def exists(self, key: str) -> bool:
        """Return True if the artifact file exists."""
        return await exists(self.path_for(key))

    async def read(self, key: str, options: ProxyOptions[Any]) -> Any:
        """Read the artifact file and reconstruct its value with the strategy."""
        path = self.path_for(key)
        _LOGGER.debug("Reading artifact %s", path)
        async with aiofiles.open(str(path), encoding="utf-8") as artifact_file:
            content = await artifact_file.read()
        return options.load(content, key)

    async def write(self, key: str, value: Any, options: ProxyOptions[Any]) -> None:
        """Encode the value with the strategy and write it to the artifact file."""
        content = options.codify(value, key)
        path = self.path_for(key)
        _LOGGER.debug("Writing artifact %s (%d bytes)", path, len(content))
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        async with aiofiles.open(
            str(path), mode="w", encoding="utf-8"
        ) as artifact_file:
            await artifact_file.write(content)

    async def delete(self, key: str) -> None:
        """Remove the artifact file, failing if it does not exist."""
        path = self.path_for(key)
        _LOGGER.debug("Removing artifact %s", path)
        await aiofiles.os.remove(path)
