"""Module for computing the changes between two GraphQL schemas.

Each change is classified by how it affects existing clients of the schema:

- `BREAKING` changes make previously valid operations fail (e.g. a removed
  field, or a new required argument).
- `DANGEROUS` changes keep operations valid but may change their behavior (e.g.
  a new enum value, or a changed default value).
- `NON_BREAKING` changes only add to the schema (e.g. a new type or field).

This is used by the schema strategy to reject unsafe overwrites of a stored
schema.
"""

from dataclasses import dataclass
from enum import StrEnum
import logging

from graphql import (
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    find_breaking_changes,
    find_dangerous_changes,
)

__all__ = [
    "Criticality",
    "SchemaChange",
    "diff_schemas",
    "rejected_changes",
]

_LOGGER = logging.getLogger(__name__)


class Criticality(StrEnum):
    """Severity of a schema change."""

    BREAKING = "BREAKING"
    DANGEROUS = "DANGEROUS"
    NON_BREAKING = "NON_BREAKING"


REJECTED = {Criticality.BREAKING, Criticality.DANGEROUS}


@dataclass(frozen=True)
class SchemaChange:
    """A single difference between an old and a new schema."""

    criticality: Criticality
    """How the change affects existing clients."""

    change_type: str
    """Name of the kind of change e.g. FIELD_REMOVED."""

    message: str
    """Human readable description of the change."""


def _type_kind(graphql_type: object) -> str:
    if isinstance(graphql_type, GraphQLInterfaceType):
        return "interface"
    return "object"


def _additions(old: GraphQLSchema, new: GraphQLSchema) -> list[SchemaChange]:
    """Return the types, fields and directives only present in the new schema.

    Additions that may affect clients (new required input fields, enum values,
    ...) are already reported by the breaking/dangerous checks and are skipped.
    """
    changes: list[SchemaChange] = []
    for name, new_type in new.type_map.items():
        if name.startswith("__"):
            continue
        if (old_type := old.type_map.get(name)) is None:
            changes.append(
                SchemaChange(
                    Criticality.NON_BREAKING,
                    "TYPE_ADDED",
                    f"Type '{name}' was added.",
                )
            )
            continue
        if not isinstance(new_type, (GraphQLObjectType, GraphQLInterfaceType)):
            continue
        if type(old_type) is not type(new_type):
            continue
        for field_name in new_type.fields:
            if field_name not in old_type.fields:  # type: ignore[union-attr]
                changes.append(
                    SchemaChange(
                        Criticality.NON_BREAKING,
                        "FIELD_ADDED",
                        f"Field '{field_name}' was added to {_type_kind(new_type)} type '{name}'.",
                    )
                )
    for directive in new.directives:
        if old.get_directive(directive.name) is None:
            changes.append(
                SchemaChange(
                    Criticality.NON_BREAKING,
                    "DIRECTIVE_ADDED",
                    f"Directive '@{directive.name}' was added.",
                )
            )
    return changes


def diff_schemas(old: GraphQLSchema, new: GraphQLSchema) -> list[SchemaChange]:
    """Return every change from the old to the new schema, most severe first."""
    changes = [
        SchemaChange(Criticality.BREAKING, change.type.name, change.description)
        for change in find_breaking_changes(old, new)
    ]
    changes.extend(
        SchemaChange(Criticality.DANGEROUS, change.type.name, change.description)
        for change in find_dangerous_changes(old, new)
    )
    changes.extend(_additions(old, new))
    _LOGGER.debug(
        "Found %d schema changes (%d rejected)",
        len(changes),
        len([change for change in changes if change.criticality in REJECTED]),
    )
    return changes


def rejected_changes(old: GraphQLSchema, new: GraphQLSchema) -> list[SchemaChange]:
    """Return only the breaking and dangerous changes from the old to the new schema."""
    return [
        change for change in diff_schemas(old, new) if change.criticality in REJECTED
    ]
