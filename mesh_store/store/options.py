"""Codify/load/validate strategies that govern how a proxy persists a value."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import inspect
from typing import Any, Generic, TypeVar

__all__ = [
    "ProxyOptions",
    "accept_all",
]

T = TypeVar("T")


def accept_all(old_value: Any, new_value: Any, identifier: str) -> None:
    """Validator that accepts every transition."""


@dataclass(frozen=True)
class ProxyOptions(Generic[T]):
    """Strategy for serializing, reconstructing and validating one kind of value.

    The functions are pure and hold no state, so a single instance may be shared
    by any number of proxies.
    """

    codify: Callable[[T, str], str]
    """Encode a value written under an identifier as storable artifact text."""

    load: Callable[[str, str], T]
    """Reconstruct the value from artifact text produced by `codify`."""

    validate: Callable[[T, T, str], None | Awaitable[None]] = accept_all
    """Check an old/new value pair, raising to reject the new value."""

    async def async_validate(self, old_value: T, new_value: T, identifier: str) -> None:
        """Run the validator, awaiting it when it is a coroutine function."""
        result = self.validate(old_value, new_value, identifier)
        if inspect.isawaitable(result):
            await result
