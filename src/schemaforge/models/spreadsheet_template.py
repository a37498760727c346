"""
SpreadsheetTemplate model - Letter-addressed layout of a data dictionary sheet
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SpreadsheetTemplate:
    """Where to find column definitions in a sheet"""
    name: str
    data_start_row: int
    name_col: str
    type_col: str
    comment_col: Optional[str] = None
    pk_col: Optional[str] = None
    description: str = ""
    id: str = ""

    def __post_init__(self):
        if int(self.data_start_row) < 1:
            raise ValueError(
                f"data_start_row must be >= 1 (got {self.data_start_row})"
            )
        object.__setattr__(self, "data_start_row", int(self.data_start_row))
        # Empty letters mean "not set"
        if not self.comment_col:
            object.__setattr__(self, "comment_col", None)
        if not self.pk_col:
            object.__setattr__(self, "pk_col", None)
        if not self.id:
            object.__setattr__(self, "id", self.name.lower().replace(" ", "_"))
