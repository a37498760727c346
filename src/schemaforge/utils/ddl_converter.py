"""
MySQL <-> Doris DDL conversion

Doris speaks the MySQL protocol, so tables are often moved between the two.
This module re-renders a table's columns for the other engine, using the
original DDL text only to detect the source engine and recover the table
comment.
"""

import re
import logging
from typing import Optional, Union

from ..constants import DORIS_BUCKETS, DORIS_KEY_COLUMN, DORIS_REPLICATION_NUM
from ..dialects import DialectFactory, quote_literal
from ..errors import UnsupportedDialectFeature
from ..models import ColumnDescriptor, Dialect, TableSchema

logger = logging.getLogger(__name__)

_DORIS_MARKERS = (
    "ENGINE=OLAP",
    "ENGINE = OLAP",
    "DISTRIBUTED BY HASH",
    "DUPLICATE KEY",
    "AGGREGATE KEY",
    "BUCKETS",
)

_KEY_CLAUSE_COMMENT = re.compile(
    r"(?:UNIQUE\s+KEY|DUPLICATE\s+KEY|AGGREGATE\s+KEY)\s*\([^)]*\)\s*COMMENT\s*['\"]([^'\"]*)['\"]",
    re.IGNORECASE,
)
_TABLE_OPTION_COMMENT = re.compile(r"\)\s*(?:[^;]*?)COMMENT\s*=\s*['\"]([^'\"]*)['\"]", re.IGNORECASE)
_ANY_COMMENT = re.compile(r"COMMENT\s*(?:=)?\s*['\"]([^'\"]*)['\"]", re.IGNORECASE)

# MySQL -> Doris type rewrites, first match wins
_TO_DORIS_RULES = [
    (re.compile(r"^TINYINT\s*\(1\)$", re.I), lambda t: "BOOLEAN"),
    (re.compile(r"^(BIGINT|INT|TINYINT|SMALLINT|MEDIUMINT)\s*\(\d+\)$", re.I),
     lambda t: re.sub(r"\s*\(\d+\)", "", t)),
    (re.compile(r"^(DOUBLE|FLOAT)\s*\(\d+,\s*\d+\)$", re.I),
     lambda t: re.sub(r"\s*\(\d+,\s*\d+\)", "", t)),
    (re.compile(r"^(TEXT|LONGTEXT|MEDIUMTEXT|TINYTEXT)$", re.I), lambda t: "STRING"),
    (re.compile(r"^(DATETIME|TIMESTAMP)(\(\d+\))?$", re.I), lambda t: "DATETIME"),
    (re.compile(r"^VARCHAR$", re.I), lambda t: "STRING"),
]

_TO_MYSQL_TYPES = {
    "STRING": "TEXT",
    "BOOLEAN": "TINYINT(1)",
}


def detect_dialect_from_ddl(ddl: str) -> Dialect:
    """
    Tell MySQL and Doris DDL apart by Doris-only keywords.

    Returns:
        Dialect.DORIS or Dialect.MYSQL (the default, also for empty text)
    """
    if not ddl:
        return Dialect.MYSQL
    upper = ddl.upper()
    if any(marker in upper for marker in _DORIS_MARKERS):
        return Dialect.DORIS
    if "UNIQUE KEY" in upper and "ENGINE=INNODB" not in upper:
        return Dialect.DORIS
    return Dialect.MYSQL


def extract_table_comment(ddl: str) -> str:
    """
    Table-level comment of a MySQL or Doris CREATE TABLE.

    Tries the Doris key-clause comment, then MySQL's COMMENT= table option,
    then falls back to the last COMMENT in the text.
    """
    if not ddl:
        return ""

    match = _KEY_CLAUSE_COMMENT.search(ddl)
    if match:
        return match.group(1)

    match = _TABLE_OPTION_COMMENT.search(ddl)
    if match:
        return match.group(1)

    comments = _ANY_COMMENT.findall(ddl)
    return comments[-1] if comments else ""


def format_column_type(column: ColumnDescriptor) -> str:
    """
    Upper-case type with its length or precision.

    varchar + length 50            -> VARCHAR(50)
    decimal + length 10, scale 2   -> DECIMAL(10,2)
    datetime + scale 3             -> DATETIME(3)
    int + length 11                -> INT (display width dropped)
    """
    upper = column.type_upper

    if re.search(r"\(.*\)", upper):
        return upper

    if re.match(r"^(VARCHAR|CHAR|VARBINARY|BINARY)$", upper):
        return f"{upper}({column.length})" if column.length else upper

    if re.match(r"^(DECIMAL|NUMERIC)$", upper):
        if not column.length:
            return upper
        if column.scale:
            return f"{upper}({column.length},{column.scale})"
        return f"{upper}({column.length})"

    if re.match(r"^(DATETIME|TIMESTAMP|TIME)$", upper):
        return f"{upper}({column.scale})" if column.scale else upper

    return upper


def _doris_type(column: ColumnDescriptor) -> str:
    formatted = format_column_type(column)
    for pattern, rewrite in _TO_DORIS_RULES:
        if pattern.match(formatted):
            return rewrite(formatted)
    return formatted


def convert_mysql_to_doris(schema: TableSchema, ddl: str = "") -> str:
    """
    Render a MySQL table as a Doris UNIQUE KEY table.

    Keys on the schema's primary-key columns (or `id` when none is flagged)
    and enables merge-on-write.
    """
    doris = DialectFactory.create(Dialect.DORIS)
    pk_names = [c.name for c in schema.primary_key_columns] or [DORIS_KEY_COLUMN]
    keys = doris.quote_identifiers(pk_names)
    table_comment = extract_table_comment(ddl) or schema.comment or schema.name

    lines = []
    for column in doris.order_columns(schema.columns):
        line = f"    {doris.quote_identifier(column.name)} {_doris_type(column)}"
        if column.comment:
            line += f" COMMENT {quote_literal(column.comment)}"
        lines.append(line)

    fields = ",\n".join(lines)
    return (
        f"CREATE TABLE {doris.quote_identifier(schema.name)} (\n"
        f"{fields}\n"
        f") ENGINE = OLAP\n"
        f"UNIQUE KEY({keys}) COMMENT {quote_literal(table_comment)}\n"
        f"DISTRIBUTED BY HASH({keys}) BUCKETS {DORIS_BUCKETS}\n"
        f"PROPERTIES (\n"
        f"    \"replication_num\" = \"{DORIS_REPLICATION_NUM}\",\n"
        f"    \"enable_unique_key_merge_on_write\" = \"true\"\n"
        f");"
    )


def convert_doris_to_mysql(schema: TableSchema, ddl: str = "") -> str:
    """Render a Doris table as an InnoDB table with an explicit PRIMARY KEY."""
    mysql = DialectFactory.create(Dialect.MYSQL)
    table_comment = extract_table_comment(ddl) or schema.comment or ""

    lines = []
    for column in schema.columns:
        type_token = format_column_type(column)
        type_token = _TO_MYSQL_TYPES.get(type_token, type_token)
        null_clause = "NULL" if column.nullable else "NOT NULL"
        line = f"    {mysql.quote_identifier(column.name)} {type_token} {null_clause}"
        if column.comment:
            line += f" COMMENT {quote_literal(column.comment)}"
        lines.append(line)

    pk_names = [c.name for c in schema.primary_key_columns]
    if pk_names:
        lines.append(f"    PRIMARY KEY ({mysql.quote_identifiers(pk_names)})")

    fields = ",\n".join(lines)
    comment = f" COMMENT={quote_literal(table_comment)}" if table_comment else ""
    return (
        f"CREATE TABLE {mysql.quote_identifier(schema.name)} (\n"
        f"{fields}\n"
        f") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4{comment};"
    )


def convert_ddl(
    schema: TableSchema,
    ddl: str = "",
    target: Optional[Union[Dialect, str]] = None
) -> str:
    """
    Convert a table between MySQL and Doris.

    Args:
        schema: Introspected columns of the table
        ddl: Original CREATE TABLE text (source detection and table comment)
        target: Dialect.MYSQL or Dialect.DORIS; defaults to the engine the
                DDL is not written for

    Raises:
        UnsupportedDialectFeature: for any other target
    """
    source = detect_dialect_from_ddl(ddl)
    if target is None:
        target = Dialect.MYSQL if source is Dialect.DORIS else Dialect.DORIS
    target = Dialect.from_name(target)

    if target is source and ddl:
        logger.info(f"DDL for {schema.name} is already {target.display_name}; re-rendering")

    if target is Dialect.DORIS:
        return convert_mysql_to_doris(schema, ddl)
    if target is Dialect.MYSQL:
        return convert_doris_to_mysql(schema, ddl)
    raise UnsupportedDialectFeature(
        f"MySQL/Doris conversion cannot target {target.display_name}"
    )
