"""
Declarative base for the tables.

All entities share one ``SQLModel.metadata``, which ``create_all``, the dev
reset and the codegen introspection walk.
"""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)
