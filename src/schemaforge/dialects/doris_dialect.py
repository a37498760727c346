"""
Doris Dialect - Apache Doris-specific DDL syntax

Doris speaks the MySQL protocol and quotes with backticks, but its tables
are OLAP tables: key columns must be declared first and contiguously, and
the statement ends with key, distribution and PROPERTIES clauses.
"""

from typing import List, Optional, Sequence

from .base import DatabaseDialect
from ..constants import DORIS_BUCKETS, DORIS_ENGINE, DORIS_KEY_COLUMN, DORIS_REPLICATION_NUM
from ..models import ColumnDescriptor, Dialect, TableSchema

import logging
logger = logging.getLogger(__name__)


class DorisDialect(DatabaseDialect):
    """Dialect for Apache Doris."""

    dialect = Dialect.DORIS
    supports_inline_comments = True

    @property
    def quote_char(self) -> str:
        return '`'

    def order_columns(self, columns: Sequence[ColumnDescriptor]) -> List[ColumnDescriptor]:
        """Key columns first, relative order preserved on both sides."""
        keys = [c for c in columns if c.is_primary_key]
        others = [c for c in columns if not c.is_primary_key]
        return keys + others

    def primary_key_line(self, schema: TableSchema) -> Optional[str]:
        # Expressed by UNIQUE KEY(...) in the table suffix
        return None

    def table_suffix(self, schema: TableSchema) -> str:
        # Key column is always `id`, whatever the schema flags as primary key
        key = self.quote_identifier(DORIS_KEY_COLUMN)
        return (
            f"\nENGINE={DORIS_ENGINE}"
            f"\nUNIQUE KEY({key})"
            f"\nDISTRIBUTED BY HASH({key}) BUCKETS {DORIS_BUCKETS}"
            f"\nPROPERTIES (\n  \"replication_num\" = \"{DORIS_REPLICATION_NUM}\"\n)"
        )
