"""
MySQL Dialect - MySQL-specific DDL syntax
"""

from typing import Optional

from .base import DatabaseDialect, quote_literal
from ..constants import MYSQL_DEFAULT_CHARSET, MYSQL_DEFAULT_ENGINE
from ..models import ColumnDescriptor, Dialect, TableSchema

import logging
logger = logging.getLogger(__name__)


class MySQLDialect(DatabaseDialect):
    """Dialect for MySQL/MariaDB databases."""

    dialect = Dialect.MYSQL
    supports_inline_comments = True

    @property
    def quote_char(self) -> str:
        """MySQL uses backticks for identifier quoting."""
        return '`'

    def auto_increment_clause(self, column: ColumnDescriptor) -> str:
        return "AUTO_INCREMENT"

    def primary_key_line(self, schema: TableSchema) -> Optional[str]:
        """Unnamed PRIMARY KEY (...) line."""
        pk_columns = [c.name for c in schema.primary_key_columns]
        if not pk_columns:
            return None
        return f"PRIMARY KEY ({self.quote_identifiers(pk_columns)})"

    def table_suffix(self, schema: TableSchema) -> str:
        """ENGINE / CHARSET / COMMENT table options."""
        engine = schema.engine_hint or MYSQL_DEFAULT_ENGINE
        suffix = f" ENGINE={engine} DEFAULT CHARSET={MYSQL_DEFAULT_CHARSET}"
        if schema.comment:
            suffix += f" COMMENT={quote_literal(schema.comment)}"
        return suffix

    def supports_auto_increment(self) -> bool:
        return True
