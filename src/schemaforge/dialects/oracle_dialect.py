"""
Oracle Dialect - Oracle-specific DDL syntax
"""

from typing import Tuple

from .base import DatabaseDialect
from ..models import ColumnDescriptor, Dialect

import logging
logger = logging.getLogger(__name__)

# (rewritten type, rewrite carries its own precision)
_TYPE_MAP = {
    "VARCHAR": ("VARCHAR2", False),
    "DATETIME": ("DATE", False),
    "BIGINT": ("NUMBER(19)", True),
    "INT": ("NUMBER(10)", True),
}


class OracleDialect(DatabaseDialect):
    """Dialect for Oracle databases. No inline auto-increment, comments are deferred."""

    dialect = Dialect.ORACLE

    @property
    def quote_char(self) -> str:
        return '"'

    def resolve_type(self, column: ColumnDescriptor) -> Tuple[str, bool]:
        type_upper = column.type_upper
        return _TYPE_MAP.get(type_upper, (type_upper, False))

    def translate_default(self, value: str) -> str:
        """CURRENT_TIMESTAMP -> SYSDATE."""
        if value.strip().upper() == "CURRENT_TIMESTAMP":
            return "SYSDATE"
        return value
