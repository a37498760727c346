"""
Cached synthesis wrapper.

Synthesis is deterministic, so identical (statement kind, schema, dialect)
inputs can reuse the previous text. Uses an LRUCache bounded by entry count.
"""
from typing import Callable, Hashable, Tuple, Union
import logging
import threading

from cachetools import LRUCache

from .ddl import synthesize_ddl
from .dml import StatementKind, synthesize_dml
from ..dialects import DatabaseDialect, DialectFactory
from ..models import Dialect, TableSchema

logger = logging.getLogger(__name__)

DialectLike = Union[DatabaseDialect, Dialect, str]


class CachedSynthesizer:
    """
    Memoizing front end for the DDL and DML synthesizers.

    Usage:
        synth = CachedSynthesizer()
        ddl = synth.create_table(schema, "mysql")   # computed
        ddl = synth.create_table(schema, "mysql")   # cached
    """

    DEFAULT_MAXSIZE = 256

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE):
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of cached statements
        """
        self._cache = LRUCache(maxsize=maxsize)
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _resolve(dialect: DialectLike) -> Tuple[DatabaseDialect, type]:
        """Strategy to render with, and its class as the cache key."""
        strategy = DialectFactory.resolve(dialect)
        return strategy, type(strategy)

    def _get_cached(self, key: Tuple[Hashable, ...], loader: Callable[[], str]) -> str:
        """Get from cache or synthesize and cache."""
        with self._lock:
            if key in self._cache:
                self.hits += 1
                return self._cache[key]
            self.misses += 1
            result = loader()
            self._cache[key] = result
            return result

    def create_table(self, schema: TableSchema, dialect: DialectLike) -> str:
        """CREATE TABLE text (cached)."""
        strategy, key = self._resolve(dialect)
        return self._get_cached(("ddl", schema, key), lambda: synthesize_ddl(schema, strategy))

    def dml(self, kind: Union[StatementKind, str], schema: TableSchema,
            dialect: DialectLike) -> str:
        """DML skeleton (cached)."""
        if not isinstance(kind, StatementKind):
            kind = StatementKind(str(kind).strip().lower())
        strategy, key = self._resolve(dialect)
        return self._get_cached((kind.value, schema, key), lambda: synthesize_dml(kind, schema, strategy))

    def invalidate_all(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()
            logger.debug("Synthesis cache cleared")

    def __len__(self) -> int:
        return len(self._cache)
