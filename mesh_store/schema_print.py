"""Module for printing a GraphQL schema without losing applied directives.

`graphql.print_schema` rebuilds the SDL from the schema objects, which only
carry `@deprecated` and `@specifiedBy`. Any other directive applied to a type,
field or the schema itself (e.g. `@key(fields: "id")`) only survives on the
AST nodes the schema was built from, so those nodes are printed directly.
Definitions built in code without an AST node fall back to `print_schema`'s
own printers.
"""

from collections.abc import Iterable
import logging

from graphql import (
    GraphQLSchema,
    is_introspection_type,
    is_specified_directive,
    is_specified_scalar_type,
    print_ast,
    print_type,
)
from graphql.language import Node
from graphql.utilities.print_schema import print_directive, print_schema_definition

__all__ = [
    "print_schema_with_directives",
]

_LOGGER = logging.getLogger(__name__)


def _print_nodes(
    node: Node | None, extension_nodes: Iterable[Node] | None
) -> list[str]:
    return [print_ast(n) for n in (node, *(extension_nodes or ())) if n is not None]


def print_schema_with_directives(schema: GraphQLSchema) -> str:
    """Return the SDL of the schema including every applied directive."""
    blocks: list[str] = []
    if schema_nodes := _print_nodes(schema.ast_node, schema.extension_ast_nodes):
        blocks.extend(schema_nodes)
    elif schema_definition := print_schema_definition(schema):
        blocks.append(schema_definition)

    for directive in schema.directives:
        if is_specified_directive(directive):
            continue
        if directive.ast_node is not None:
            blocks.append(print_ast(directive.ast_node))
        else:
            blocks.append(print_directive(directive))

    for named_type in schema.type_map.values():
        if is_specified_scalar_type(named_type) or is_introspection_type(named_type):
            continue
        if named_type.ast_node is None:
            _LOGGER.debug("Type %s has no AST node to print", named_type.name)
            blocks.append(print_type(named_type))
            continue
        blocks.extend(
            _print_nodes(named_type.ast_node, named_type.extension_ast_nodes)
        )
    return "\n\n".join(blocks)
