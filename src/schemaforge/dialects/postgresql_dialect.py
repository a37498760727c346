"""
PostgreSQL Dialect - PostgreSQL-specific DDL syntax
"""

import re
from typing import Tuple

from .base import DatabaseDialect
from ..constants import NO_LENGTH_TYPES
from ..models import ColumnDescriptor, Dialect

import logging
logger = logging.getLogger(__name__)

# INT, INTEGER, SMALLINT, TINYINT, MEDIUMINT, BIGINT, INT2/INT4/INT8
_INTEGER_TYPE = re.compile(r"^(TINY|SMALL|MEDIUM|BIG)?INT(EGER|[248])?$")

_TYPE_MAP = {
    "DATETIME": "TIMESTAMP",
    "TINYINT": "SMALLINT",
}


class PostgreSQLDialect(DatabaseDialect):
    """Dialect for PostgreSQL databases."""

    dialect = Dialect.POSTGRESQL

    @property
    def quote_char(self) -> str:
        return '"'

    def resolve_type(self, column: ColumnDescriptor) -> Tuple[str, bool]:
        """Integer keys become SERIAL; DATETIME and TINYINT are renamed."""
        type_upper = column.type_upper
        if column.is_primary_key and _INTEGER_TYPE.match(type_upper):
            return "SERIAL", True
        return _TYPE_MAP.get(type_upper, type_upper), False

    def length_clause(self, column: ColumnDescriptor, type_token: str) -> str:
        """Only VARCHAR keeps its length; scale is never emitted."""
        if type_token != "VARCHAR" or not column.length:
            return ""
        if column.type_lower in NO_LENGTH_TYPES:
            return ""
        return f"({column.length})"
