"""
Base Database Dialect - Abstract base class for dialect-specific SQL synthesis

Dialects handle the syntax differences between target engines such as:
- Identifier quoting (`backticks` vs "quotes")
- Type translation (VARCHAR -> VARCHAR2, DATETIME -> TIMESTAMP, ...)
- Auto-increment / identity syntax
- Default value translation (CURRENT_TIMESTAMP -> SYSDATE)
- Inline vs. deferred (COMMENT ON) comments
- Table-level options (ENGINE=..., DISTRIBUTED BY HASH ...)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from ..constants import NO_LENGTH_TYPES
from ..models import ColumnDescriptor, Dialect, TableSchema

logger = logging.getLogger(__name__)


def escape_literal(value: str) -> str:
    """Escape a string literal by doubling single quotes. Nothing else is touched."""
    return str(value).replace("'", "''")


def quote_literal(value: str) -> str:
    """Escape and wrap a value in single quotes."""
    return f"'{escape_literal(value)}'"


@dataclass(frozen=True)
class ColumnMapping:
    """
    A column resolved for one dialect.

    Each clause is either empty or the bare SQL fragment without surrounding
    spaces; ``render()`` joins them into one column definition.
    """
    quoted_name: str
    type_token: str
    length_clause: str = ""
    null_clause: str = ""
    pk_inline_clause: str = ""
    default_clause: str = ""
    comment_clause: str = ""
    quote: str = '"'

    def render(self) -> str:
        parts = [f"{self.quoted_name} {self.type_token}{self.length_clause}"]
        for clause in (self.null_clause, self.pk_inline_clause,
                       self.default_clause, self.comment_clause):
            if clause:
                parts.append(clause)
        return " ".join(parts)


class DatabaseDialect(ABC):
    """
    Abstract base class for target dialects.

    Each dialect knows how to:
    1. Quote identifiers
    2. Translate a column type, default and nullability into its own syntax
    3. Emit its table-level clauses and post-create statements

    Usage:
        dialect = DialectFactory.create(Dialect.ORACLE)
        line = dialect.map_column(column).render()
    """

    dialect: Dialect

    # Whether COMMENT '...' may follow a column definition
    supports_inline_comments = False

    # ==================== Identifier Quoting ====================

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to quote identifiers (e.g., '`' or '"')."""
        pass

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for every supported engine)."""
        return self.quote_char

    def quote_identifier(self, identifier: str) -> str:
        """Quote a single identifier (table, column name)."""
        return f"{self.quote_char}{identifier}{self.quote_char_end}"

    def quote_identifiers(self, identifiers: Sequence[str]) -> str:
        """Quote and comma-join a list of identifiers."""
        return ", ".join(self.quote_identifier(i) for i in identifiers)

    # ==================== Column Mapping ====================

    def resolve_type(self, column: ColumnDescriptor) -> Tuple[str, bool]:
        """
        Translate the source type token.

        Returns:
            (type_token, suppress_length) - suppress_length is True when the
            rewrite already carries its own precision, e.g. NUMBER(19)
        """
        return column.type_upper, False

    def length_clause(self, column: ColumnDescriptor, type_token: str) -> str:
        """Build "(length[,scale])" or an empty string."""
        if not column.length:
            return ""
        if column.type_lower in NO_LENGTH_TYPES or type_token == "SERIAL":
            return ""
        scale = f",{column.scale}" if column.scale else ""
        return f"({column.length}{scale})"

    def auto_increment_clause(self, column: ColumnDescriptor) -> str:
        """Inline auto-generation syntax for a primary-key column."""
        return ""

    def translate_default(self, value: str) -> str:
        """Rewrite a source default expression into this dialect."""
        return value

    def map_column(self, column: ColumnDescriptor) -> ColumnMapping:
        """
        Resolve a column into dialect-specific clauses.

        Args:
            column: Source column descriptor

        Returns:
            ColumnMapping ready to render
        """
        type_token, suppress_length = self.resolve_type(column)
        is_serial = type_token == "SERIAL"

        length = "" if suppress_length else self.length_clause(column, type_token)
        null_clause = "NOT NULL" if not column.nullable and not is_serial else ""
        pk_inline = (
            self.auto_increment_clause(column)
            if column.is_primary_key and self.supports_auto_increment() else ""
        )

        default_clause = ""
        if column.default_value and not is_serial:
            default_clause = f"DEFAULT {self.translate_default(column.default_value)}"

        comment_clause = ""
        if self.supports_inline_comments and column.comment:
            comment_clause = f"COMMENT {quote_literal(column.comment)}"

        return ColumnMapping(
            quoted_name=self.quote_identifier(column.name),
            type_token=type_token,
            length_clause=length,
            null_clause=null_clause,
            pk_inline_clause=pk_inline,
            default_clause=default_clause,
            comment_clause=comment_clause,
            quote=self.quote_char,
        )

    # ==================== Table-Level Clauses ====================

    def order_columns(self, columns: Sequence[ColumnDescriptor]) -> List[ColumnDescriptor]:
        """Order in which column definitions are emitted."""
        return list(columns)

    def primary_key_line(self, schema: TableSchema) -> Optional[str]:
        """Trailing key line inside the column list, or None."""
        pk_columns = [c.name for c in schema.primary_key_columns]
        if not pk_columns:
            return None
        return f"CONSTRAINT pk_{schema.name} PRIMARY KEY ({self.quote_identifiers(pk_columns)})"

    def table_suffix(self, schema: TableSchema) -> str:
        """Text between the closing parenthesis and the terminating semicolon."""
        return ""

    def deferred_comments(self, schema: TableSchema) -> List[str]:
        """
        COMMENT ON statements issued after CREATE TABLE.

        Empty for dialects with inline comments.
        """
        if self.supports_inline_comments:
            return []

        table = self.quote_identifier(schema.name)
        statements = [
            f"COMMENT ON COLUMN {table}.{self.quote_identifier(c.name)} IS {quote_literal(c.comment)};"
            for c in schema.columns
            if c.comment
        ]
        if schema.comment:
            statements.append(f"COMMENT ON TABLE {table} IS {quote_literal(schema.comment)};")
        return statements

    # ==================== Capability Checks ====================

    def supports_auto_increment(self) -> bool:
        """Whether key columns get an inline auto-generation clause."""
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.dialect.value}>"
