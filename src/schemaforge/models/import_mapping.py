"""
ImportMapping model - Binding of a target column to a source header or a literal
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ImportMapping:
    """
    Per-target-column binding used by the batch INSERT synthesizer.

    Either ``source_header`` (value pulled from that spreadsheet column for
    each row) or ``literal`` (same value for every row) may be set, not both.
    With neither set the column is left out of the statement. ``column`` may
    be left empty when the mapping is stored in a dict keyed by column name.
    """
    column: str = ""
    source_header: Optional[str] = None
    literal: Optional[str] = None

    def __post_init__(self):
        if self.source_header and self.literal:
            raise ValueError(
                f"Mapping for '{self.column}' sets both a source header and a literal"
            )

    @property
    def is_configured(self) -> bool:
        return bool(self.source_header) or bool(self.literal)
