"""
TypeScript rendering.

Backend interfaces keep the snake_case column names; frontend interfaces use
camelCase, and the generated transformers convert one into the other.
"""

from __future__ import annotations

from typing import Iterable, List

from .introspect import EntitySpec, FieldKind, FieldSpec
from .naming import camel_case

TS_TYPES = {
    FieldKind.ID: "string",
    FieldKind.STRING: "string",
    FieldKind.INT: "number",
    FieldKind.FLOAT: "number",
    FieldKind.BOOL: "boolean",
    FieldKind.TIMESTAMP: "string",
    FieldKind.STRING_LIST: "string[]",
}


def _member(name: str, column: FieldSpec) -> str:
    optional = "?" if column.nullable else ""
    return f"  {name}{optional}: {TS_TYPES[column.kind]};"


def _interface(entity: EntitySpec, camel: bool) -> str:
    lines = [f"export interface {entity.name} {{"]
    lines += [_member(camel_case(f.name) if camel else f.name, f) for f in entity.fields]
    lines.append("}")
    return "\n".join(lines)


def render_backend_types(entities: Iterable[EntitySpec]) -> str:
    blocks = [_interface(entity, camel=False) for entity in entities]
    header = "// Generated from entity metadata - do not edit\n// Backend types with snake_case field names\n"
    return header + "\n" + "\n\n".join(blocks) + "\n"


def render_frontend_types(entities: Iterable[EntitySpec]) -> str:
    blocks = [_interface(entity, camel=True) for entity in entities]
    header = "// Generated from entity metadata - do not edit\n// Frontend types with camelCase field names\n"
    return header + "\n" + "\n\n".join(blocks) + "\n"


def _transformer(entity: EntitySpec) -> str:
    lines = [f"export function toFrontend{entity.name}(row: Backend{entity.name}): Frontend{entity.name} {{", "  return {"]
    for column in entity.fields:
        lines.append(f"    {camel_case(column.name)}: row.{column.name},")
    lines += ["  };", "}"]
    return "\n".join(lines)


def render_transformers(
    entities: Iterable[EntitySpec], backend_module: str = "./types", frontend_module: str = "./frontend-types"
) -> str:
    """Render ``toFrontend<Entity>`` functions mapping backend rows to frontend objects."""
    entities = list(entities)
    names: List[str] = [entity.name for entity in entities]
    backend_imports = ",\n".join(f"  {name} as Backend{name}" for name in names)
    frontend_imports = ",\n".join(f"  {name} as Frontend{name}" for name in names)
    parts = [
        "// Generated transformation utilities - do not edit\n",
        f"import type {{\n{backend_imports},\n}} from '{backend_module}';\n",
        f"import type {{\n{frontend_imports},\n}} from '{frontend_module}';\n",
        "\n\n".join(_transformer(entity) for entity in entities) + "\n",
    ]
    return "\n".join(parts)
