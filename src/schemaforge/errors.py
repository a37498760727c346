"""
Errors raised by the synthesis engine.

Malformed *configuration* (bad column letters, empty schema, unknown
dialect) raises one of these. Malformed *data* never does: the synthesizers
degrade to NULL or skip the row instead.
"""


class SchemaForgeError(Exception):
    """Base class for all SchemaForge errors."""


class InvalidAddress(SchemaForgeError, ValueError):
    """Spreadsheet column letters are empty or contain non-letters."""

    def __init__(self, letters):
        self.letters = letters
        super().__init__(f"Invalid column address: {letters!r}")


class EmptySchema(SchemaForgeError):
    """A synthesizer was given a table schema without columns."""

    def __init__(self, table_name: str = ""):
        self.table_name = table_name
        super().__init__(f"Table schema '{table_name}' has no columns")


class UnresolvedMapping(SchemaForgeError):
    """An import mapping points at a source header missing from the data."""

    def __init__(self, column: str, source_header: str):
        self.column = column
        self.source_header = source_header
        super().__init__(
            f"Column '{column}' is mapped to missing source header '{source_header}'"
        )


class UnsupportedDialectFeature(SchemaForgeError):
    """The target dialect is unknown or lacks a required clause."""


class SpreadsheetLoadError(SchemaForgeError):
    """A spreadsheet or CSV file could not be read."""
