"""
Dialects - Per-engine type mapping and SQL syntax rules

One strategy class per target engine, created through a factory:

Usage:
    from schemaforge.dialects import DialectFactory

    dialect = DialectFactory.create("oracle")
    dialect.quote_identifier("users")            # '"users"'
    dialect.map_column(column).render()           # '"id" NUMBER(19) NOT NULL'
"""

from .base import DatabaseDialect, ColumnMapping, escape_literal, quote_literal
from .factory import DialectFactory

from .mysql_dialect import MySQLDialect
from .postgresql_dialect import PostgreSQLDialect
from .doris_dialect import DorisDialect
from .oracle_dialect import OracleDialect
from .sqlserver_dialect import SQLServerDialect

__all__ = [
    # Base classes
    "DatabaseDialect",
    "ColumnMapping",
    "escape_literal",
    "quote_literal",

    # Factory
    "DialectFactory",

    # Implementations
    "MySQLDialect",
    "PostgreSQLDialect",
    "DorisDialect",
    "OracleDialect",
    "SQLServerDialect",
]
