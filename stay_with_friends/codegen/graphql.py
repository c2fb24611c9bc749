"""
GraphQL SDL rendering.
"""

from __future__ import annotations

from typing import Iterable

from .introspect import EntitySpec, FieldKind, FieldSpec
from .naming import camel_case

SCALARS = {
    FieldKind.ID: "ID",
    FieldKind.STRING: "String",
    FieldKind.INT: "Int",
    FieldKind.FLOAT: "Float",
    FieldKind.BOOL: "Boolean",
    FieldKind.TIMESTAMP: "String",
    FieldKind.STRING_LIST: "[String!]",
}


def graphql_type(column: FieldSpec) -> str:
    return SCALARS[column.kind] + ("" if column.nullable else "!")


def render_type(entity: EntitySpec) -> str:
    lines = [f"type {entity.name} {{"]
    lines += [f"  {camel_case(f.name)}: {graphql_type(f)}" for f in entity.fields]
    for relation in entity.relations:
        target = f"[{relation.target}!]!" if relation.many else f"{relation.target}!"
        lines.append(f"  {camel_case(relation.name)}: {target}")
    lines.append("}")
    return "\n".join(lines)


def render_sdl(entities: Iterable[EntitySpec]) -> str:
    """Render one ``type`` block per entity, separated by blank lines."""
    return "\n\n".join(render_type(entity) for entity in entities) + "\n"


def render_typedefs_module(sdl: str) -> str:
    """Wrap SDL in a TypeScript module exporting it as ``typeDefs``."""
    return (
        "// Generated GraphQL TypeDefs from entity metadata - do not edit\n"
        "\n"
        "export const typeDefs = `#graphql\n"
        f"{sdl}"
        "`;\n"
    )
