"""
mesh-store is a validated, lazily populated key/value cache for build artifacts.

A pipeline asks a `MeshStore` for a proxy to a named artifact. The proxy loads the
artifact from storage when it exists, lets the caller compute it when it does not,
optionally checks a new value against the previous one, and writes it through a
storage adapter.
"""

__all__ = [
    "config",
    "exceptions",
    "schema_diff",
    "schema_print",
    "store",
]
