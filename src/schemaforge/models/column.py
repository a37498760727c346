"""
ColumnDescriptor model - One column in a dialect-neutral representation
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    A table column as understood by the source dialect.

    Attributes:
        name: Column name (required, non-empty)
        native_type: Source type token, e.g. "varchar", "bigint" (case-insensitive)
        length: Length or precision, None when meaningless for the type
        scale: Decimal scale
        nullable: Whether NULL is allowed
        is_primary_key: Whether the column belongs to the primary key
        default_value: Raw default expression, e.g. "CURRENT_TIMESTAMP", "'PENDING'"
        comment: Column description
    """
    name: str
    native_type: str
    length: Optional[int] = None
    scale: Optional[int] = None
    nullable: bool = True
    is_primary_key: bool = False
    default_value: Optional[str] = None
    comment: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Column name must not be empty")
        if self.native_type is None:
            object.__setattr__(self, "native_type", "")

    @property
    def type_lower(self) -> str:
        """Source type token, lower-cased and stripped."""
        return self.native_type.strip().lower()

    @property
    def type_upper(self) -> str:
        """Source type token, upper-cased and stripped."""
        return self.native_type.strip().upper()
