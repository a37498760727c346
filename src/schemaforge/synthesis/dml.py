"""
DML Synthesizer - SELECT / INSERT / UPDATE / DELETE skeletons

The statements are templates for a human to edit: syntactically valid, with
type-aware sample values, but not meant to run against real data as-is.
Only the dialect's identifier quoting is applied; types are not rewritten.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from ..constants import (
    DATE_TYPES,
    INTEGER_TYPES,
    NUMERIC_TYPES,
    QUERY_PREVIEW_LIMIT,
    SAMPLE_DATETIME,
    SAMPLE_NUMBER,
    SAMPLE_STRING,
    UPDATE_SAMPLE_DATETIME,
    UPDATE_SAMPLE_INTEGER,
    UPDATE_SAMPLE_STRING,
    UPDATE_SET_COLUMN_LIMIT,
    UPDATE_SKIPPED_COLUMNS,
    WHERE_KEY_SAMPLE,
)
from ..dialects import DatabaseDialect, DialectFactory
from ..errors import EmptySchema
from ..models import ColumnDescriptor, Dialect, TableSchema

logger = logging.getLogger(__name__)

DialectLike = Union[DatabaseDialect, Dialect, str]


class StatementKind(Enum):
    """DML statement kinds."""
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


def _prepare(schema: TableSchema, dialect: DialectLike) -> DatabaseDialect:
    if schema.is_empty:
        raise EmptySchema(schema.name)
    return DialectFactory.resolve(dialect)


def _key_column(schema: TableSchema) -> ColumnDescriptor:
    """First primary-key column, or the first column when there is none."""
    pk_columns = schema.primary_key_columns
    return pk_columns[0] if pk_columns else schema.columns[0]


def _insert_sample(column: ColumnDescriptor) -> str:
    type_name = column.type_lower
    if type_name in NUMERIC_TYPES:
        return SAMPLE_NUMBER
    if type_name in DATE_TYPES:
        return SAMPLE_DATETIME
    return SAMPLE_STRING


def _update_sample(column: ColumnDescriptor) -> str:
    type_name = column.type_lower
    if type_name in INTEGER_TYPES:
        return UPDATE_SAMPLE_INTEGER
    if type_name == "datetime":
        return UPDATE_SAMPLE_DATETIME
    return UPDATE_SAMPLE_STRING


def synthesize_select(schema: TableSchema, dialect: DialectLike) -> str:
    """
    SELECT every column with a LIMIT clause.

    LIMIT is emitted for every dialect, including Oracle and SQL Server.
    """
    strategy = _prepare(schema, dialect)
    columns = strategy.quote_identifiers(schema.column_names)
    return (
        f"SELECT\n  {columns}\n"
        f"FROM {strategy.quote_identifier(schema.name)}\n"
        f"LIMIT {QUERY_PREVIEW_LIMIT};"
    )


def synthesize_insert(schema: TableSchema, dialect: DialectLike) -> str:
    """
    INSERT one row of sample values.

    MySQL leaves primary-key columns out (assumed AUTO_INCREMENT).
    """
    strategy = _prepare(schema, dialect)
    if strategy.dialect is Dialect.MYSQL:
        columns = [c for c in schema.columns if not c.is_primary_key]
    else:
        columns = list(schema.columns)

    names = strategy.quote_identifiers([c.name for c in columns])
    values = ", ".join(_insert_sample(c) for c in columns)
    return (
        f"INSERT INTO {strategy.quote_identifier(schema.name)}\n"
        f"({names})\n"
        f"VALUES\n"
        f"({values});"
    )


def synthesize_update(schema: TableSchema, dialect: DialectLike) -> str:
    """UPDATE up to three non-key columns of the row whose key is 1."""
    strategy = _prepare(schema, dialect)
    key = _key_column(schema)

    targets: List[ColumnDescriptor] = [
        c for c in schema.columns
        if c.name != key.name and c.name not in UPDATE_SKIPPED_COLUMNS
    ][:UPDATE_SET_COLUMN_LIMIT]

    assignments = ",\n".join(
        f"  {strategy.quote_identifier(c.name)} = {_update_sample(c)}" for c in targets
    )
    if not assignments:
        # Only the key is left: assign it to itself
        quoted_key = strategy.quote_identifier(key.name)
        assignments = f"  {quoted_key} = {quoted_key}"
    return (
        f"UPDATE {strategy.quote_identifier(schema.name)}\n"
        f"SET\n{assignments}\n"
        f"WHERE {strategy.quote_identifier(key.name)} = {WHERE_KEY_SAMPLE};"
    )


def synthesize_delete(schema: TableSchema, dialect: DialectLike) -> str:
    """DELETE the row whose key is 1."""
    strategy = _prepare(schema, dialect)
    key = _key_column(schema)
    return (
        f"DELETE FROM {strategy.quote_identifier(schema.name)}\n"
        f"WHERE {strategy.quote_identifier(key.name)} = {WHERE_KEY_SAMPLE};"
    )


_SYNTHESIZERS: Dict[StatementKind, Callable[[TableSchema, DialectLike], str]] = {
    StatementKind.SELECT: synthesize_select,
    StatementKind.INSERT: synthesize_insert,
    StatementKind.UPDATE: synthesize_update,
    StatementKind.DELETE: synthesize_delete,
}


def synthesize_dml(
    kind: Union[StatementKind, str],
    schema: TableSchema,
    dialect: DialectLike
) -> str:
    """
    Dispatch to the synthesizer for a statement kind.

    Args:
        kind: StatementKind or its name ("select", "INSERT", ...)
        schema: Table to render
        dialect: Target dialect

    Returns:
        SQL skeleton
    """
    if not isinstance(kind, StatementKind):
        try:
            kind = StatementKind(str(kind).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown statement kind: {kind}") from None
    logger.debug(f"Synthesizing {kind.name} skeleton for {schema.name}")
    return _SYNTHESIZERS[kind](schema, dialect)
