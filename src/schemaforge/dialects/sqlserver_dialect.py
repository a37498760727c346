"""
SQL Server Dialect - SQL Server-specific DDL syntax
"""

from typing import Tuple

from .base import DatabaseDialect
from ..models import ColumnDescriptor, Dialect

import logging
logger = logging.getLogger(__name__)


class SQLServerDialect(DatabaseDialect):
    """Dialect for SQL Server databases."""

    dialect = Dialect.SQLSERVER

    @property
    def quote_char(self) -> str:
        # Double quotes, not [brackets]
        return '"'

    def resolve_type(self, column: ColumnDescriptor) -> Tuple[str, bool]:
        type_upper = column.type_upper
        if type_upper == "DATETIME":
            return "DATETIME2", False
        return type_upper, False

    def auto_increment_clause(self, column: ColumnDescriptor) -> str:
        return "IDENTITY(1,1)"

    def supports_auto_increment(self) -> bool:
        return True
