"""Frontend type generation.

Renders GraphQL SDL and TypeScript definitions from the SQLModel entity
metadata so the frontend stays in step with the database schema.
"""

from .graphql import render_sdl, render_typedefs_module
from .introspect import EntitySpec, FieldKind, FieldSpec, collect_entities
from .typescript import render_backend_types, render_frontend_types, render_transformers
from .writer import generate

__all__ = [
    "EntitySpec",
    "FieldKind",
    "FieldSpec",
    "collect_entities",
    "generate",
    "render_backend_types",
    "render_frontend_types",
    "render_sdl",
    "render_transformers",
    "render_typedefs_module",
]
