"""
Entity metadata introspection.

Reads the SQLAlchemy tables behind the SQLModel entities and reduces every
column to a language-neutral :class:`FieldSpec`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Type

from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, Numeric, Table
from sqlalchemy.types import TypeDecorator

from stay_with_friends.core.database.base import Base
from stay_with_friends.core.database.entities import (
    Availability,
    BookingRequest,
    Connection,
    Host,
    Invitation,
    User,
)

ENTITIES: Tuple[Type[Base], ...] = (User, Host, Availability, BookingRequest, Connection, Invitation)

# Object fields the API resolves on top of the stored columns
RELATIONS: Dict[str, List[Tuple[str, str, bool]]] = {
    "Host": [("availabilities", "Availability", True), ("user", "User", False)],
    "Availability": [("host", "Host", False)],
    "BookingRequest": [("host", "Host", False), ("requester", "User", False)],
    "Connection": [("connected_user", "User", False)],
    "Invitation": [("inviter", "User", False)],
}


class FieldKind(str, Enum):
    ID = "id"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TIMESTAMP = "timestamp"
    STRING_LIST = "string_list"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind
    nullable: bool


@dataclass(frozen=True)
class RelationSpec:
    name: str
    target: str
    many: bool


@dataclass(frozen=True)
class EntitySpec:
    name: str
    table: str
    fields: Tuple[FieldSpec, ...]
    relations: Tuple[RelationSpec, ...] = field(default_factory=tuple)


def column_kind(column: Column) -> FieldKind:
    """Map a column onto a field kind.

    Primary keys are ids; TEXT columns flagged ``json_array`` hold string lists.
    """
    if column.primary_key:
        return FieldKind.ID
    if column.info.get("json_array"):
        return FieldKind.STRING_LIST
    column_type = column.type
    if isinstance(column_type, TypeDecorator):
        column_type = column_type.impl
    if isinstance(column_type, Boolean):
        return FieldKind.BOOL
    if isinstance(column_type, Integer):
        return FieldKind.INT
    if isinstance(column_type, (Float, Numeric)):
        return FieldKind.FLOAT
    if isinstance(column_type, (DateTime, Date)):
        return FieldKind.TIMESTAMP
    return FieldKind.STRING


def describe_table(name: str, table: Table, relations: Optional[Sequence[Tuple[str, str, bool]]] = None) -> EntitySpec:
    columns = sorted(table.columns, key=lambda c: not c.primary_key)
    fields = tuple(
        FieldSpec(name=c.name, kind=column_kind(c), nullable=bool(c.nullable) and not c.primary_key) for c in columns
    )
    return EntitySpec(
        name=name,
        table=table.name,
        fields=fields,
        relations=tuple(RelationSpec(*relation) for relation in relations or ()),
    )


def collect_entities(entities: Sequence[Type[Base]] = ENTITIES) -> List[EntitySpec]:
    """Describe every entity in a fixed order.

    Returns:
        One ``EntitySpec`` per entity, columns with the primary key first and the
        rest in declaration order
    """
    return [describe_table(model.__name__, model.__table__, RELATIONS.get(model.__name__)) for model in entities]
