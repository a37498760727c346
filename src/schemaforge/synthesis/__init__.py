"""
Synthesis - SQL text generation from TableSchema values

    synthesize_create_table / synthesize_ddl   CREATE TABLE
    synthesize_select / insert / update / delete   DML skeletons
    synthesize_batch_insert                    multi-row INSERT from sheet rows
"""

from .ddl import synthesize_create_table, synthesize_ddl
from .dml import (
    StatementKind,
    synthesize_select,
    synthesize_insert,
    synthesize_update,
    synthesize_delete,
    synthesize_dml,
)
from .batch_insert import synthesize_batch_insert, auto_match_mappings
from .cache import CachedSynthesizer

__all__ = [
    "synthesize_create_table",
    "synthesize_ddl",
    "StatementKind",
    "synthesize_select",
    "synthesize_insert",
    "synthesize_update",
    "synthesize_delete",
    "synthesize_dml",
    "synthesize_batch_insert",
    "auto_match_mappings",
    "CachedSynthesizer",
]
