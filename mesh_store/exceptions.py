"""Exceptions related to mesh-store."""

__all__ = [
    "MeshStoreException",
    "ReadonlyStoreError",
    "ValidationError",
    "ChangesRejectedError",
    "ArtifactFormatError",
    "ConfigException",
]


class MeshStoreException(Exception):
    """Generic base exception used for this library."""


class ReadonlyStoreError(MeshStoreException):
    """Raised when writing a value to a store in read-only mode."""

    def __init__(self, identifier: str, namespace: str) -> None:
        super().__init__(
            f'Unable to set value for "{identifier}" under "{namespace}" '
            "because the store is in read-only mode."
        )
        self.identifier = identifier
        self.namespace = namespace


class ValidationError(MeshStoreException):
    """Raised when a strategy rejects the transition from an old to a new value."""

    def __init__(self, identifier: str, namespace: str, errors: list[str]) -> None:
        super().__init__(
            f'Validation failed for "{identifier}" under "{namespace}": '
            + "\n".join(errors)
        )
        self.identifier = identifier
        self.namespace = namespace
        self.errors = errors


class ChangesRejectedError(MeshStoreException):
    """Aggregate of every reason a validator rejected a new value."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = errors


class ArtifactFormatError(MeshStoreException):
    """Raised when a persisted artifact can't be decoded by its strategy."""


class ConfigException(MeshStoreException):
    """Raised when the store configuration is not formatted as expected."""
