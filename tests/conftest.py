"""Shared fixtures for mesh-store tests."""

import logging
from typing import Any

import pytest
from graphql import GraphQLSchema, build_schema

from mesh_store.store import InMemoryStoreStorageAdapter, ProxyOptions

_LOGGER = logging.getLogger(__name__)


USER_SCHEMA_SDL = """
type Query {
  user(id: ID!): User
}

type User {
  id: ID!
  name: String!
  email: String
}
"""


class RecordingStorageAdapter(InMemoryStoreStorageAdapter):
    """In-memory adapter that records every storage call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def count(self, method: str) -> int:
        return len([call for call in self.calls if call[0] == method])

    async def exists(self, key: str) -> bool:
        self.calls.append(("exists", key))
        return await super().exists(key)

    async def read(self, key: str, options: ProxyOptions[Any]) -> Any:
        self.calls.append(("read", key))
        return await super().read(key, options)

    async def write(self, key: str, value: Any, options: ProxyOptions[Any]) -> None:
        self.calls.append(("write", key))
        await super().write(key, value, options)

    async def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        await super().delete(key)


@pytest.fixture
def storage() -> RecordingStorageAdapter:
    """Fixture for an instrumented in-memory storage adapter."""
    return RecordingStorageAdapter()


@pytest.fixture
def user_schema_sdl() -> str:
    """Fixture for the SDL of the user schema."""
    return USER_SCHEMA_SDL


@pytest.fixture
def user_schema() -> GraphQLSchema:
    """Fixture for a small schema with a required and an optional field."""
    return build_schema(USER_SCHEMA_SDL)
