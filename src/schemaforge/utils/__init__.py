"""
Utils - SQL formatting and MySQL/Doris DDL conversion
"""

from .sql_formatter import format_sql, split_statements, FORMAT_STYLES
from .ddl_converter import (
    convert_ddl,
    convert_mysql_to_doris,
    convert_doris_to_mysql,
    detect_dialect_from_ddl,
    extract_table_comment,
    format_column_type,
)

__all__ = [
    "format_sql",
    "split_statements",
    "FORMAT_STYLES",
    "convert_ddl",
    "convert_mysql_to_doris",
    "convert_doris_to_mysql",
    "detect_dialect_from_ddl",
    "extract_table_comment",
    "format_column_type",
]
