"""
Mapped-Value Import Synthesizer - Multi-row INSERT from spreadsheet rows

Given a target table, a column mapping (spreadsheet header or fixed literal
per target column) and raw rows, builds batched INSERT ... VALUES text.

Dirty data never raises: a missing header or an empty cell becomes an
unquoted NULL. Rows are written into a single output buffer.
"""

import io
import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Union

import pandas as pd

from ..constants import NO_DATA_COMMENT, NO_MAPPINGS_COMMENT
from ..dialects import DatabaseDialect, DialectFactory, quote_literal
from ..errors import EmptySchema, UnresolvedMapping
from ..models import Dialect, ImportMapping, TableSchema

logger = logging.getLogger(__name__)

DialectLike = Union[DatabaseDialect, Dialect, str]
RawRow = Union[Mapping[str, Any], Sequence[Any]]
MappingsLike = Union[Iterable[ImportMapping], Mapping[str, ImportMapping]]


def _normalize_header(value: str) -> str:
    return str(value).strip().lower()


def auto_match_mappings(schema: TableSchema, headers: Sequence[str]) -> List[ImportMapping]:
    """
    Bind each target column to a spreadsheet header.

    A column matches the first header equal to its name case-insensitively,
    or equal once underscores are removed from both sides. Unmatched
    columns get an empty mapping (left out of the INSERT).

    Args:
        schema: Target table
        headers: Header cells of the source sheet

    Returns:
        One ImportMapping per schema column, in schema order
    """
    mappings = []
    for column in schema.columns:
        name = column.name.lower()
        bare_name = name.replace("_", "")
        match = next(
            (
                h for h in headers
                if h is not None and (
                    _normalize_header(h) == name
                    or _normalize_header(h).replace("_", "") == bare_name
                )
            ),
            None,
        )
        mappings.append(ImportMapping(column=column.name, source_header=match))

    matched = sum(1 for m in mappings if m.source_header)
    logger.info(f"Auto-matched {matched}/{len(mappings)} columns of {schema.name}")
    return mappings


def _collect_mappings(schema: TableSchema, mappings: MappingsLike) -> List[ImportMapping]:
    """Configured mappings in schema column order."""
    if isinstance(mappings, MappingABC):
        by_column: Dict[str, ImportMapping] = {}
        for column, mapping in mappings.items():
            if isinstance(mapping, MappingABC):
                mapping = ImportMapping(column, mapping.get("source_header"), mapping.get("literal"))
            elif mapping.column != column:
                mapping = ImportMapping(column, mapping.source_header, mapping.literal)
            by_column[column] = mapping
    else:
        by_column = {m.column: m for m in mappings}

    known = set(schema.column_names)
    for column in by_column:
        if column not in known:
            logger.warning(f"Ignoring mapping for unknown column '{column}' in {schema.name}")

    return [
        by_column[name] for name in schema.column_names
        if name in by_column and by_column[name].is_configured
    ]


def _is_missing(value: Any) -> bool:
    # CSV keeps empty cells as "", Excel reads them as NaN
    if value is None or (isinstance(value, str) and value == ""):
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Containers: pd.isna returns an array
        return False


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return quote_literal(str(value))


class _RowReader:
    """Resolves mapping values out of dict rows or positional rows."""

    def __init__(self, headers: Optional[Sequence[str]], strict: bool):
        self.header_index = (
            {h: i for i, h in reversed(list(enumerate(headers)))} if headers is not None else None
        )
        self.strict = strict
        self._reported: Set[str] = set()

    def _unresolved(self, mapping: ImportMapping) -> str:
        if self.strict:
            raise UnresolvedMapping(mapping.column, mapping.source_header)
        if mapping.source_header not in self._reported:
            self._reported.add(mapping.source_header)
            logger.warning(str(UnresolvedMapping(mapping.column, mapping.source_header)))
        return "NULL"

    def value(self, row: RawRow, mapping: ImportMapping) -> str:
        if mapping.literal:
            return quote_literal(mapping.literal)

        header = mapping.source_header
        if isinstance(row, MappingABC):
            if header not in row:
                return self._unresolved(mapping)
            cell = row[header]
        else:
            if self.header_index is None or header not in self.header_index:
                return self._unresolved(mapping)
            idx = self.header_index[header]
            if idx >= len(row):
                return "NULL"
            cell = row[idx]

        if _is_missing(cell):
            return "NULL"
        return _format_value(cell)


def _is_empty_row(row: RawRow) -> bool:
    return row is None or len(row) == 0


def synthesize_batch_insert(
    schema: TableSchema,
    mappings: MappingsLike,
    rows: Iterable[RawRow],
    headers: Optional[Sequence[str]] = None,
    dialect: DialectLike = Dialect.MYSQL,
    batch_size: Optional[int] = None,
    strict: bool = False,
) -> str:
    """
    Build a multi-row INSERT from mapped spreadsheet values.

    Args:
        schema: Target table
        mappings: ImportMapping list, or dict of target column -> ImportMapping
        rows: Dict rows (header -> value) or positional rows resolved via ``headers``
        headers: Header cells for positional rows
        dialect: Target dialect (quoting only)
        batch_size: Rows per INSERT statement (None = one statement)
        strict: Raise UnresolvedMapping instead of writing NULL for a missing header

    Returns:
        SQL text, or a comment line when nothing is mapped

    Raises:
        EmptySchema: if the schema has no columns
    """
    if schema.is_empty:
        raise EmptySchema(schema.name)
    if batch_size is not None and batch_size < 1:
        raise ValueError(f"batch_size must be >= 1 (got {batch_size})")

    keys = _collect_mappings(schema, mappings)
    if not keys:
        return NO_MAPPINGS_COMMENT

    strategy = DialectFactory.resolve(dialect)
    table = strategy.quote_identifier(schema.name)
    columns = strategy.quote_identifiers([m.column for m in keys])
    insert_head = f"INSERT INTO {table} ({columns}) VALUES\n"
    reader = _RowReader(headers, strict)

    out = io.StringIO()
    out.write(f"-- Import to {schema.name}\n")

    written = 0
    in_batch = 0
    for row in rows:
        if _is_empty_row(row):
            continue

        if in_batch == 0:
            if written:
                out.write("\n")
            out.write(insert_head)
        else:
            out.write(",\n")

        out.write("(")
        for i, mapping in enumerate(keys):
            if i:
                out.write(", ")
            out.write(reader.value(row, mapping))
        out.write(")")

        written += 1
        in_batch += 1
        if batch_size is not None and in_batch >= batch_size:
            out.write(";")
            in_batch = 0

    if written == 0:
        out.write(NO_DATA_COMMENT)
    elif in_batch:
        out.write(";")

    logger.info(f"Synthesized import of {written} rows into {schema.name}")
    return out.getvalue()
