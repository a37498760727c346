"""
SchemaForge - Cross-dialect schema, DDL and DML synthesis engine

Turns a normalized table description (from database introspection or from a
spreadsheet data dictionary) into SQL text for MySQL, PostgreSQL, Oracle,
SQL Server and Apache Doris.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("schemaforge")
except PackageNotFoundError:
    # Package not installed (running from a source checkout)
    __version__ = "0.3.0"

from .errors import (
    SchemaForgeError,
    InvalidAddress,
    EmptySchema,
    UnresolvedMapping,
    UnsupportedDialectFeature,
    SpreadsheetLoadError,
)
from .models import (
    ColumnDescriptor,
    TableSchema,
    Dialect,
    ImportMapping,
    SpreadsheetTemplate,
)
from .dialects import DialectFactory
from .spreadsheet import letter_to_index, index_to_letter, extract_schema
from .synthesis import (
    synthesize_create_table,
    synthesize_ddl,
    synthesize_select,
    synthesize_insert,
    synthesize_update,
    synthesize_delete,
    synthesize_dml,
    synthesize_batch_insert,
    auto_match_mappings,
)

__all__ = [
    "__version__",
    # Errors
    "SchemaForgeError",
    "InvalidAddress",
    "EmptySchema",
    "UnresolvedMapping",
    "UnsupportedDialectFeature",
    "SpreadsheetLoadError",
    # Models
    "ColumnDescriptor",
    "TableSchema",
    "Dialect",
    "ImportMapping",
    "SpreadsheetTemplate",
    # Dialects
    "DialectFactory",
    # Spreadsheet
    "letter_to_index",
    "index_to_letter",
    "extract_schema",
    # Synthesis
    "synthesize_create_table",
    "synthesize_ddl",
    "synthesize_select",
    "synthesize_insert",
    "synthesize_update",
    "synthesize_delete",
    "synthesize_dml",
    "synthesize_batch_insert",
    "auto_match_mappings",
]
