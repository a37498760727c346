"""
Centralized constants for SchemaForge.

Eliminates magic numbers and literals scattered across the synthesizers.
Import from here instead of hardcoding values.
"""

# ===========================================================================
# Query / Data limits
# ===========================================================================
QUERY_PREVIEW_LIMIT = 100       # "SELECT ... LIMIT 100" skeleton
LARGE_SHEET_THRESHOLD = 100_000 # Rows before the loader logs a warning
UPDATE_SET_COLUMN_LIMIT = 3     # Columns assigned in an UPDATE skeleton

# ===========================================================================
# Table options
# ===========================================================================
MYSQL_DEFAULT_ENGINE = "InnoDB"
MYSQL_DEFAULT_CHARSET = "utf8mb4"

DORIS_ENGINE = "OLAP"
DORIS_KEY_COLUMN = "id"         # Hard-coded UNIQUE KEY / HASH column
DORIS_BUCKETS = 10
DORIS_REPLICATION_NUM = 1

# ===========================================================================
# Sample values for DML skeletons
# ===========================================================================
SAMPLE_NUMBER = "0"
SAMPLE_DATETIME = "'2024-01-01 12:00:00'"
SAMPLE_STRING = "'test_value'"

UPDATE_SAMPLE_INTEGER = "1"
UPDATE_SAMPLE_DATETIME = "NOW()"
UPDATE_SAMPLE_STRING = "'new_value'"
UPDATE_SKIPPED_COLUMNS = ("created_at",)

WHERE_KEY_SAMPLE = "1"

# ===========================================================================
# Type families (lower-case tokens)
# ===========================================================================
NUMERIC_TYPES = frozenset({
    "int", "integer", "bigint", "smallint", "tinyint", "mediumint",
    "decimal", "numeric", "double", "float", "real",
})
INTEGER_TYPES = frozenset({
    "int", "integer", "bigint", "smallint", "tinyint", "mediumint",
})
DATE_TYPES = frozenset({"datetime", "date"})

# Types that never carry a (length[,scale]) clause
NO_LENGTH_TYPES = frozenset({"datetime", "text", "date", "timestamp", "serial"})

# ===========================================================================
# Spreadsheet extraction
# ===========================================================================
PRIMARY_KEY_MARKERS = frozenset({"y", "yes", "1", "是"})

# ===========================================================================
# Import synthesis messages
# ===========================================================================
NO_MAPPINGS_COMMENT = "-- No mappings configured"
NO_DATA_COMMENT = "-- No data found"
