"""
Dialect Factory - Create the dialect strategy for a target engine
"""

from typing import Dict, List, Type, Union

from .base import DatabaseDialect
from ..errors import UnsupportedDialectFeature
from ..models import Dialect

import logging
logger = logging.getLogger(__name__)


class DialectFactory:
    """
    Factory for creating dialect strategies.

    Usage:
        dialect = DialectFactory.create("postgres")
        line = dialect.map_column(column).render()
    """

    # Registry of supported dialects
    _dialects: Dict[Dialect, Type[DatabaseDialect]] = {}

    @classmethod
    def create(cls, dialect: Union[Dialect, str]) -> DatabaseDialect:
        """
        Create the strategy for a dialect.

        Args:
            dialect: Dialect enum member or name/alias ("mysql", "SQL Server", ...)

        Returns:
            DatabaseDialect instance

        Raises:
            UnsupportedDialectFeature: if the dialect is unknown or not registered
        """
        resolved = Dialect.from_name(dialect)

        dialect_class = cls._dialects.get(resolved)
        if dialect_class is None:
            logger.warning(f"No dialect registered for: {resolved.value}")
            raise UnsupportedDialectFeature(f"No dialect registered for {resolved.display_name}")

        return dialect_class()

    @classmethod
    def resolve(cls, dialect: Union[DatabaseDialect, Dialect, str]) -> DatabaseDialect:
        """Return ``dialect`` unchanged if it is already a strategy, else create one."""
        if isinstance(dialect, DatabaseDialect):
            return dialect
        return cls.create(dialect)

    @classmethod
    def is_supported(cls, dialect: Union[Dialect, str]) -> bool:
        """Check if a dialect is supported."""
        try:
            return Dialect.from_name(dialect) in cls._dialects
        except UnsupportedDialectFeature:
            return False

    @classmethod
    def supported_dialects(cls) -> List[Dialect]:
        """Get list of registered dialects."""
        return list(cls._dialects.keys())

    @classmethod
    def register(cls, dialect: Dialect, dialect_class: Type[DatabaseDialect]):
        """
        Register a dialect strategy.

        Args:
            dialect: Dialect enum member
            dialect_class: DatabaseDialect subclass
        """
        cls._dialects[dialect] = dialect_class
        logger.debug(f"Registered dialect for: {dialect.value}")


def _register_default_dialects():
    """Register built-in dialects. Called on module import."""
    from .mysql_dialect import MySQLDialect
    from .postgresql_dialect import PostgreSQLDialect
    from .doris_dialect import DorisDialect
    from .oracle_dialect import OracleDialect
    from .sqlserver_dialect import SQLServerDialect

    DialectFactory.register(Dialect.MYSQL, MySQLDialect)
    DialectFactory.register(Dialect.POSTGRESQL, PostgreSQLDialect)
    DialectFactory.register(Dialect.DORIS, DorisDialect)
    DialectFactory.register(Dialect.ORACLE, OracleDialect)
    DialectFactory.register(Dialect.SQLSERVER, SQLServerDialect)


# Register on module import
_register_default_dialects()
