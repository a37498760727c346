"""
TableSchema model - Ordered columns plus table-level metadata
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, List

from .column import ColumnDescriptor


@dataclass(frozen=True)
class TableSchema:
    """
    Immutable description of a table, produced once by an extractor or an
    introspector and consumed by the synthesizers.

    Any sequence passed as ``columns`` is frozen into a tuple so that the
    schema is hashable and can key the synthesis cache.
    """
    name: str
    columns: Tuple[ColumnDescriptor, ...] = ()
    engine_hint: Optional[str] = None
    comment: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))

    @classmethod
    def of(cls, name: str, columns: Sequence[ColumnDescriptor], **kwargs) -> "TableSchema":
        """Build a schema from any sequence of columns."""
        return cls(name=name, columns=tuple(columns), **kwargs)

    @property
    def is_empty(self) -> bool:
        return not self.columns

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    @property
    def primary_key_columns(self) -> List[ColumnDescriptor]:
        """Primary-key columns in descriptor order."""
        return [c for c in self.columns if c.is_primary_key]

    def get_column(self, name: str) -> Optional[ColumnDescriptor]:
        """Return the first column with this name, or None."""
        for column in self.columns:
            if column.name == name:
                return column
        return None
