"""Predefined strategies for the common kinds of artifacts."""

from enum import StrEnum
import json
import logging
from typing import Any

from graphql import GraphQLSchema, Source, build_schema

from mesh_store.exceptions import ArtifactFormatError, ChangesRejectedError
from mesh_store.schema_diff import rejected_changes
from mesh_store.schema_print import print_schema_with_directives

from .document import decode_document, encode_document
from .options import ProxyOptions, accept_all

__all__ = [
    "PredefinedProxyOptionsName",
    "PredefinedProxyOptions",
]

_LOGGER = logging.getLogger(__name__)

JSON_KIND = "json"
STRING_KIND = "string"
SCHEMA_KIND = "graphql-schema"


class PredefinedProxyOptionsName(StrEnum):
    """Names of the predefined strategies."""

    JSON_WITHOUT_VALIDATION = "JsonWithoutValidation"
    STRING_WITHOUT_VALIDATION = "StringWithoutValidation"
    GRAPHQL_SCHEMA_WITH_DIFFING = "GraphQLSchemaWithDiffing"


def _codify_json(value: Any, identifier: str) -> str:
    # Round trip through json so only JSON compatible values are accepted
    return encode_document(JSON_KIND, identifier, json.loads(json.dumps(value)))


def _load_json(content: str, identifier: str) -> Any:
    return decode_document(content, JSON_KIND, identifier)


def _codify_string(value: str, identifier: str) -> str:
    if not isinstance(value, str):
        raise TypeError(
            f"Artifact {identifier} must be a string (was {value.__class__.__name__})"
        )
    return encode_document(STRING_KIND, identifier, value)


def _load_string(content: str, identifier: str) -> str:
    value = decode_document(content, STRING_KIND, identifier)
    if not isinstance(value, str):
        raise ArtifactFormatError(f"Artifact {identifier} does not contain a string")
    return value


def _codify_schema(schema: GraphQLSchema, identifier: str) -> str:
    return encode_document(
        SCHEMA_KIND, identifier, print_schema_with_directives(schema)
    )


def _load_schema(content: str, identifier: str) -> GraphQLSchema:
    """Rebuild the schema from its stored SDL.

    The SDL was printed from a schema that was already valid when it was stored,
    so the rebuilt schema is trusted and not validated again.
    """
    sdl = decode_document(content, SCHEMA_KIND, identifier)
    if not isinstance(sdl, str):
        raise ArtifactFormatError(f"Artifact {identifier} does not contain SDL")
    return build_schema(
        Source(sdl, identifier), assume_valid=True, assume_valid_sdl=True
    )


def _validate_schema(
    old_schema: GraphQLSchema, new_schema: GraphQLSchema, identifier: str
) -> None:
    """Reject the new schema if it contains breaking or dangerous changes."""
    changes = rejected_changes(old_schema, new_schema)
    if errors := [change.message for change in changes]:
        _LOGGER.debug("Schema %s has %d rejected changes", identifier, len(errors))
        raise ChangesRejectedError(errors)


PredefinedProxyOptions: dict[PredefinedProxyOptionsName, ProxyOptions[Any]] = {
    PredefinedProxyOptionsName.JSON_WITHOUT_VALIDATION: ProxyOptions(
        codify=_codify_json,
        load=_load_json,
        validate=accept_all,
    ),
    PredefinedProxyOptionsName.STRING_WITHOUT_VALIDATION: ProxyOptions(
        codify=_codify_string,
        load=_load_string,
        validate=accept_all,
    ),
    PredefinedProxyOptionsName.GRAPHQL_SCHEMA_WITH_DIFFING: ProxyOptions(
        codify=_codify_schema,
        load=_load_schema,
        validate=_validate_schema,
    ),
}
