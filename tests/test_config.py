"""Tests for the store configuration."""

from pathlib import Path

import pytest

import mesh_store.config
from mesh_store.config import (
    AdapterType,
    StoreConfig,
    create_storage,
    create_store,
    read_store_config,
)
from mesh_store.exceptions import ConfigException
from mesh_store.store import (
    FsStoreStorageAdapter,
    InMemoryStoreStorageAdapter,
    StoreFlags,
    StoreMode,
)


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (StoreMode.BUILD, StoreFlags(readonly=False, validate=False)),
        (StoreMode.VALIDATE, StoreFlags(readonly=True, validate=True)),
        (StoreMode.UPDATE, StoreFlags(readonly=False, validate=True)),
        (StoreMode.SERVE, StoreFlags(readonly=True, validate=False)),
        ("validate", StoreFlags(readonly=True, validate=True)),
    ],
)
def test_flags_for_mode(mode: StoreMode | str, expected: StoreFlags) -> None:
    """Test the flag presets of each pipeline stage."""
    assert StoreFlags.for_mode(mode) == expected


def test_flags_for_unknown_mode() -> None:
    """Test an unknown mode is a configuration error."""
    with pytest.raises(ConfigException, match="Unknown store mode 'deploy'"):
        StoreFlags.for_mode("deploy")


def test_defaults() -> None:
    """Test the default configuration."""
    config = StoreConfig.parse_yaml("")
    assert config == StoreConfig()
    assert config.root == ".mesh"
    assert config.adapter == AdapterType.FS
    assert config.store_flags == StoreFlags()


def test_parse_mode() -> None:
    """Test flags are taken from the mode."""
    config = StoreConfig.parse_yaml("root: out/.mesh\nadapter: memory\nmode: update\n")
    assert config.root == "out/.mesh"
    assert config.adapter == AdapterType.MEMORY
    assert config.mode == StoreMode.UPDATE
    assert config.store_flags == StoreFlags(readonly=False, validate=True)


def test_explicit_flags_win() -> None:
    """Test explicit flags take precedence over the mode."""
    config = StoreConfig.parse_yaml(
        "mode: validate\nflags:\n  readonly: false\n  validate: true\n"
    )
    assert config.store_flags == StoreFlags(readonly=False, validate=True)


@pytest.mark.parametrize(
    "content",
    [
        "- not\n- a mapping\n",
        "mode: deploy\n",
        "adapter: s3\n",
        "unknown: key\n",
        "root: [unclosed\n",
    ],
)
def test_invalid_config(content: str) -> None:
    """Test invalid configurations raise a configuration error."""
    with pytest.raises(ConfigException, match="Invalid store configuration"):
        StoreConfig.parse_yaml(content)


async def test_read_store_config(tmp_path: Path) -> None:
    """Test reading the configuration from a file."""
    config_path = tmp_path / "store.yaml"
    config_path.write_text("root: build\nmode: serve\nmodule_extension: json\n")
    config = await read_store_config(config_path)
    assert config == StoreConfig(
        root="build", mode=StoreMode.SERVE, module_extension="json"
    )


def test_create_fs_store() -> None:
    """Test creating a store backed by the filesystem."""
    store = create_store(StoreConfig(module_extension="yml", mode=StoreMode.BUILD))
    assert store.identifier == ".mesh"
    assert isinstance(store.storage, FsStoreStorageAdapter)
    assert store.storage.module_extension == "yml"
    assert store.flags == StoreFlags()


async def test_create_memory_store() -> None:
    """Test creating a store backed by memory."""
    store = create_store(
        StoreConfig(adapter=AdapterType.MEMORY, flags=StoreFlags(validate=True))
    )
    assert isinstance(store.storage, InMemoryStoreStorageAdapter)
    assert store.flags == StoreFlags(validate=True)


@pytest.mark.parametrize(
    ("adapter", "expected"),
    [
        (AdapterType.FS, FsStoreStorageAdapter),
        (AdapterType.MEMORY, InMemoryStoreStorageAdapter),
    ],
)
def test_create_storage(adapter: AdapterType, expected: type) -> None:
    """Test creating a storage adapter on its own, e.g. to share it."""
    assert isinstance(create_storage(StoreConfig(adapter=adapter)), expected)


def test_public_api() -> None:
    """Test the public functions are exported."""
    assert set(mesh_store.config.__all__) == {
        "AdapterType",
        "StoreConfig",
        "read_store_config",
        "create_storage",
        "create_store",
    }
