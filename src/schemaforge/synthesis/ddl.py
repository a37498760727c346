"""
DDL Synthesizer - CREATE TABLE statements for every supported dialect

Composes the per-column definitions produced by the dialect strategy with
the dialect's key line, table options and post-create COMMENT ON statements.

Layout of the generated text:

    CREATE TABLE <table> (
      <column definition>,
      ...
      <key line>
    )<table suffix>;

    <COMMENT ON statements, one per line>
"""

import logging
from typing import Union

from ..dialects import DatabaseDialect, DialectFactory
from ..errors import EmptySchema
from ..models import Dialect, TableSchema

logger = logging.getLogger(__name__)

DialectLike = Union[DatabaseDialect, Dialect, str]


def synthesize_create_table(schema: TableSchema, dialect: DialectLike) -> str:
    """
    Render a CREATE TABLE statement.

    No column-count validation is done here: an empty schema yields an
    empty-body statement. Use synthesize_ddl() for the checked variant.

    Args:
        schema: Table to render
        dialect: Target dialect (enum, name, or strategy instance)

    Returns:
        SQL text terminated by ';', followed by any deferred comment statements
    """
    strategy = DialectFactory.resolve(dialect)

    lines = [
        strategy.map_column(column).render()
        for column in strategy.order_columns(schema.columns)
    ]
    key_line = strategy.primary_key_line(schema)
    if key_line:
        lines.append(key_line)

    body = ",\n".join(f"  {line}" for line in lines)
    sql = (
        f"CREATE TABLE {strategy.quote_identifier(schema.name)} (\n"
        f"{body}\n"
        f"){strategy.table_suffix(schema)};"
    )

    comments = strategy.deferred_comments(schema)
    if comments:
        sql += "\n\n" + "\n".join(comments) + "\n"

    return sql


def synthesize_ddl(schema: TableSchema, dialect: DialectLike) -> str:
    """
    Checked entry point for CREATE TABLE synthesis.

    Raises:
        EmptySchema: if the schema has no columns
    """
    if schema.is_empty:
        raise EmptySchema(schema.name)

    strategy = DialectFactory.resolve(dialect)
    sql = synthesize_create_table(schema, strategy)
    logger.debug(
        f"Synthesized CREATE TABLE {schema.name} for {strategy.dialect.display_name} "
        f"({len(schema.columns)} columns)"
    )
    return sql
