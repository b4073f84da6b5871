#Explicit column mapping for every record table, read from the SQLAlchemy table definitions.
from collections import namedtuple
from typing import Dict, List

from sqlalchemy import Enum

ColumnSpec = namedtuple("ColumnSpec", ["name", "type_name", "nullable", "unique", "primary_key"])


def _type_name(column) -> str:
    if isinstance(column.type, Enum):
        return f"enum({column.type.enum_class.__name__})"
    return type(column.type).__name__.lower()


def column_specs(model) -> List[ColumnSpec]:
    """Columns of ``model`` in declaration order."""
    specs = []
    for column in model.__table__.columns:
        specs.append(ColumnSpec(
            name=column.name,
            type_name=_type_name(column),
            nullable=bool(column.nullable),
            unique=bool(column.unique) or column.primary_key,
            primary_key=column.primary_key,
        ))
    return specs


def mapped_tables() -> Dict[str, List[ColumnSpec]]:
    from . import RECORD_MODELS

    return {model.__tablename__: column_specs(model) for model in RECORD_MODELS}
