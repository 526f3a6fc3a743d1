"""Flags controlling whether a store writes and validates values."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

from mashumaro import DataClassDictMixin

from mesh_store.exceptions import ConfigException

__all__ = [
    "StoreFlags",
    "StoreMode",
]


class StoreMode(StrEnum):
    """Presets for the flags used by each stage of the pipeline."""

    BUILD = "build"
    """Compute and persist every artifact without comparing to previous ones."""

    VALIDATE = "validate"
    """Compute every artifact and compare it to the stored one, without writing."""

    UPDATE = "update"
    """Compute every artifact and persist it only if it is compatible."""

    SERVE = "serve"
    """Only read previously built artifacts."""


@dataclass(frozen=True)
class StoreFlags(DataClassDictMixin):
    """Flags of a store node, inherited by its children."""

    readonly: bool = False
    """Reject every write through a proxy of the store."""

    validate: bool = False
    """Check new values against the stored ones before accepting them."""

    @classmethod
    def for_mode(cls, mode: StoreMode | str) -> "StoreFlags":
        """Return the flags preset for a pipeline stage."""
        try:
            return _MODE_FLAGS[StoreMode(mode)]
        except ValueError as err:
            raise ConfigException(f"Unknown store mode '{mode}'") from err

    def merge(
        self, overrides: "StoreFlags | Mapping[str, Any] | None" = None
    ) -> "StoreFlags":
        """Return a copy of these flags with the overrides applied."""
        if overrides is None:
            return self
        if isinstance(overrides, StoreFlags):
            return overrides
        names = {field.name for field in fields(self)}
        if unknown := set(overrides) - names:
            raise ConfigException(f"Unknown store flags: {sorted(unknown)}")
        return replace(self, **overrides)


_MODE_FLAGS = {
    StoreMode.BUILD: StoreFlags(readonly=False, validate=False),
    StoreMode.VALIDATE: StoreFlags(readonly=True, validate=True),
    StoreMode.UPDATE: StoreFlags(readonly=False, validate=True),
    StoreMode.SERVE: StoreFlags(readonly=True, validate=False),
}
