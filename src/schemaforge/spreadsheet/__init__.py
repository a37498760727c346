"""
Spreadsheet - Column addressing, sheet loading and schema extraction
"""

from .addressing import letter_to_index, index_to_letter
from .extractor import extract_schema, extract_columns, parse_type, cell_text
from .loader import load_sheet, list_sheets, SheetData, LoadWarningLevel
from .template_loader import SpreadsheetTemplateLoader, template_from_dict, template_to_dict

__all__ = [
    "letter_to_index",
    "index_to_letter",
    "extract_schema",
    "extract_columns",
    "parse_type",
    "cell_text",
    "load_sheet",
    "list_sheets",
    "SheetData",
    "LoadWarningLevel",
    "SpreadsheetTemplateLoader",
    "template_from_dict",
    "template_to_dict",
]
