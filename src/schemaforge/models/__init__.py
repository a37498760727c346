"""
Models - Immutable dataclasses describing tables, dialects and import layouts

All models are re-exported here for convenience:
    from schemaforge.models import ColumnDescriptor, TableSchema, Dialect, ...
"""

from .column import ColumnDescriptor
from .table_schema import TableSchema
from .dialect import Dialect
from .import_mapping import ImportMapping
from .spreadsheet_template import SpreadsheetTemplate

__all__ = [
    "ColumnDescriptor",
    "TableSchema",
    "Dialect",
    "ImportMapping",
    "SpreadsheetTemplate",
]
