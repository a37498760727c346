"""
Spreadsheet Schema Extractor - data dictionary sheet -> TableSchema

Walks a grid of cells using a SpreadsheetTemplate (start row plus the
letters of the name / type / comment / primary-key columns) and builds one
ColumnDescriptor per non-blank row.

Blank separator rows (name or type missing) are skipped silently; duplicate
column names are passed through unchanged.
"""

import logging
import re
from typing import Any, List, Optional, Sequence, Tuple, Union

import pandas as pd

from .addressing import index_to_letter, letter_to_index
from ..constants import PRIMARY_KEY_MARKERS
from ..models import ColumnDescriptor, SpreadsheetTemplate, TableSchema

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[Any]]

# "VARCHAR(50)", "decimal(10, 2)", "datetime"
_TYPE_PATTERN = re.compile(r"^\s*([A-Za-z][\w ]*?)\s*(?:\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\))?\s*$")


def cell_text(value: Any) -> str:
    """
    Coerce a raw cell value to its display string.

    None and NaN become "", integral floats lose their ".0".
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    elif value is pd.NaT:
        return ""
    return str(value).strip()


def parse_type(text: str) -> Tuple[str, Optional[int], Optional[int]]:
    """
    Split a type cell into (type, length, scale).

    Args:
        text: Cell text, e.g. "VARCHAR(50)" or "DECIMAL(10,2)"

    Returns:
        Tuple of the bare type and optional length/scale. Text that does not
        look like "name(n[,m])" is returned unchanged as the type.
    """
    match = _TYPE_PATTERN.match(text)
    if not match:
        return text.strip(), None, None
    type_name, length, scale = match.groups()
    return (
        type_name.strip(),
        int(length) if length is not None else None,
        int(scale) if scale is not None else None,
    )


def dataframe_to_grid(df: pd.DataFrame) -> List[List[Any]]:
    """Convert a DataFrame (read with header=None) to a list of rows, NaN -> None."""
    return df.astype(object).where(pd.notna(df), None).values.tolist()


def _cell(row: Sequence[Any], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    return cell_text(row[index])


def is_primary_key_marker(text: str) -> bool:
    """True when a pk cell says y / yes / 1 / 是 (case-insensitive)."""
    return text.strip().lower() in PRIMARY_KEY_MARKERS


def extract_columns(grid: Union[Grid, pd.DataFrame],
                    template: SpreadsheetTemplate) -> List[ColumnDescriptor]:
    """
    Extract column descriptors from a grid.

    Args:
        grid: Rows of raw cells, or a DataFrame read without a header row
        template: Column layout

    Returns:
        Columns in row order

    Raises:
        InvalidAddress: if a template letter is malformed (checked before reading)
    """
    name_idx = letter_to_index(template.name_col)
    type_idx = letter_to_index(template.type_col)
    comment_idx = letter_to_index(template.comment_col) if template.comment_col else None
    pk_idx = letter_to_index(template.pk_col) if template.pk_col else None

    if isinstance(grid, pd.DataFrame):
        grid = dataframe_to_grid(grid)

    columns: List[ColumnDescriptor] = []
    skipped = 0
    for row_no in range(template.data_start_row - 1, len(grid)):
        row = grid[row_no]
        if not row:
            skipped += 1
            continue

        name = _cell(row, name_idx)
        type_text = _cell(row, type_idx)
        if not name or not type_text:
            skipped += 1
            continue

        native_type, length, scale = parse_type(type_text)
        is_pk = pk_idx is not None and is_primary_key_marker(_cell(row, pk_idx))
        comment = _cell(row, comment_idx) or None

        columns.append(ColumnDescriptor(
            name=name,
            native_type=native_type,
            length=length,
            scale=scale,
            nullable=not is_pk,
            is_primary_key=is_pk,
            comment=comment,
        ))

    if skipped:
        logger.debug(f"Skipped {skipped} blank rows")
    logger.debug(
        f"Extracted {len(columns)} columns with template '{template.name}' "
        f"(name={index_to_letter(name_idx)}, type={index_to_letter(type_idx)})"
    )
    return columns


def extract_schema(
    grid: Union[Grid, pd.DataFrame],
    template: SpreadsheetTemplate,
    table_name: str,
    comment: Optional[str] = None,
    engine_hint: Optional[str] = None,
) -> TableSchema:
    """
    Build a TableSchema from a data dictionary grid.

    Args:
        grid: Rows of raw cells, or a DataFrame read without a header row
        template: Column layout
        table_name: Name of the table to describe
        comment: Optional table comment
        engine_hint: Optional storage engine (MySQL)

    Returns:
        TableSchema with one column per non-blank row
    """
    columns = extract_columns(grid, template)
    if not any(c.is_primary_key for c in columns):
        logger.debug(f"No primary key flagged in sheet for {table_name}")
    return TableSchema(
        name=table_name,
        columns=tuple(columns),
        engine_hint=engine_hint,
        comment=comment,
    )
