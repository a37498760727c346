"""
Spreadsheet Loader - Read sheets into the shapes the synthesizers consume.

Two views of a sheet are provided:
- a raw cell grid (no header row), fed to the schema extractor together
  with a letter-addressed SpreadsheetTemplate
- headers + data rows, fed to the batch INSERT synthesizer

Supported sources:
- Excel files (.xlsx via openpyxl, .xls via xlrd)
- CSV files (separator sniffed from the first lines)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

import pandas as pd

from ..constants import LARGE_SHEET_THRESHOLD
from ..errors import SpreadsheetLoadError
from .extractor import cell_text, dataframe_to_grid

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")
CSV_SUFFIXES = (".csv", ".txt")


class LoadWarningLevel(Enum):
    """Warning levels for loading operations."""
    NONE = "none"
    INFO = "info"
    WARNING = "warning"


@dataclass
class SheetData:
    """
    A loaded sheet.

    Attributes:
        grid: All rows as raw cells (NaN replaced by None)
        sheet_name: Sheet that was read (None for CSV)
        available_sheets: Sheet names in the workbook
        warning_level: NONE, INFO or WARNING
        warning_message: Human-readable warning
    """
    grid: List[List[Any]]
    sheet_name: Optional[Union[str, int]] = None
    available_sheets: List[str] = field(default_factory=list)
    warning_level: LoadWarningLevel = LoadWarningLevel.NONE
    warning_message: str = ""

    @property
    def row_count(self) -> int:
        return len(self.grid)

    def headers(self, header_row: int = 1) -> List[str]:
        """Display text of a 1-based header row."""
        if header_row < 1 or header_row > len(self.grid):
            return []
        return [cell_text(v) for v in self.grid[header_row - 1]]

    def data_rows(self, header_row: int = 1) -> List[List[Any]]:
        """Rows after the header row."""
        return self.grid[header_row:]


def _excel_engine(path: Path) -> str:
    return "xlrd" if path.suffix.lower() == ".xls" else "openpyxl"


def _detect_csv_separator(path: Path, encoding: str) -> str:
    """Pick the most frequent of , ; TAB | in the first five lines."""
    separators = [",", ";", "\t", "|"]
    with open(path, "r", encoding=encoding) as f:
        sample = "".join(f.readline() for _ in range(5))
    counts = {sep: sample.count(sep) for sep in separators}
    best = max(counts, key=counts.get)
    return best if counts[best] > 0 else ","


def list_sheets(path: Union[str, Path]) -> List[str]:
    """Sheet names of a workbook (empty for CSV)."""
    path = Path(path)
    if path.suffix.lower() in CSV_SUFFIXES:
        return []
    try:
        with pd.ExcelFile(path, engine=_excel_engine(path)) as workbook:
            return list(workbook.sheet_names)
    except Exception as e:
        logger.error(f"Error reading workbook {path}: {e}")
        raise SpreadsheetLoadError(f"Failed to read workbook {path.name}: {e}") from e


def load_sheet(
    path: Union[str, Path],
    sheet_name: Optional[Union[str, int]] = 0,
    nrows: Optional[int] = None,
    encoding: str = "utf-8",
    on_large_sheet: Optional[Callable[[int], None]] = None,
) -> SheetData:
    """
    Load a sheet as a raw grid, without interpreting any header row.

    Args:
        path: .xlsx / .xls / .csv file
        sheet_name: Sheet name or 0-based index (ignored for CSV)
        nrows: Maximum number of rows to read (None = all)
        encoding: Text encoding for CSV files
        on_large_sheet: Called with the row count when it exceeds the threshold

    Returns:
        SheetData

    Raises:
        SpreadsheetLoadError: if the file is missing, unsupported or unreadable
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if not path.is_file():
        raise SpreadsheetLoadError(f"File not found: {path}")
    if suffix not in EXCEL_SUFFIXES + CSV_SUFFIXES:
        raise SpreadsheetLoadError(f"Unsupported file format: {suffix}")

    sheets: List[str] = []
    try:
        if suffix in CSV_SUFFIXES:
            sep = _detect_csv_separator(path, encoding)
            df = pd.read_csv(
                path, sep=sep, header=None, dtype=object, nrows=nrows,
                encoding=encoding, keep_default_na=False, skip_blank_lines=False,
            )
            sheet_name = None
        else:
            engine = _excel_engine(path)
            if sheet_name is None:
                sheet_name = 0
            with pd.ExcelFile(path, engine=engine) as workbook:
                sheets = list(workbook.sheet_names)
                df = pd.read_excel(workbook, sheet_name=sheet_name, header=None, nrows=nrows)
    except Exception as e:
        logger.error(f"Error loading sheet {path}: {e}")
        raise SpreadsheetLoadError(f"Failed to load {path.name}: {e}") from e

    result = SheetData(grid=dataframe_to_grid(df), sheet_name=sheet_name, available_sheets=sheets)

    if result.row_count > LARGE_SHEET_THRESHOLD:
        result.warning_level = LoadWarningLevel.WARNING
        result.warning_message = (
            f"Large sheet detected: {result.row_count:,} rows "
            f"(threshold: {LARGE_SHEET_THRESHOLD:,})."
        )
        logger.warning(result.warning_message)
        if on_large_sheet is not None:
            on_large_sheet(result.row_count)
    elif nrows is not None and result.row_count >= nrows:
        result.warning_level = LoadWarningLevel.INFO
        result.warning_message = f"Read capped at {nrows} rows."

    logger.info(f"Loaded sheet: {path.name} ({result.row_count} rows)")
    return result
