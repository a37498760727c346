"""
Dialect model - Closed set of target SQL engines
"""
from enum import Enum
from typing import Union

from ..errors import UnsupportedDialectFeature


class Dialect(Enum):
    """Target SQL engine. Always an explicit input, never inferred from a schema."""
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    DORIS = "doris"
    ORACLE = "oracle"
    SQLSERVER = "sqlserver"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: Union[str, "Dialect"]) -> "Dialect":
        """
        Resolve a dialect from a user-facing name or alias.

        Args:
            name: Dialect instance, or a name such as "MySQL", "postgres", "SQL Server"

        Returns:
            The matching Dialect

        Raises:
            UnsupportedDialectFeature: if the name is unknown
        """
        if isinstance(name, Dialect):
            return name
        key = str(name).strip().lower()
        dialect = _ALIASES.get(key)
        if dialect is None:
            raise UnsupportedDialectFeature(f"Unsupported dialect: {name}")
        return dialect


_DISPLAY_NAMES = {
    Dialect.MYSQL: "MySQL",
    Dialect.POSTGRESQL: "PostgreSQL",
    Dialect.DORIS: "Doris",
    Dialect.ORACLE: "Oracle",
    Dialect.SQLSERVER: "SQL Server",
}

_ALIASES = {
    "mysql": Dialect.MYSQL,
    "mariadb": Dialect.MYSQL,
    "postgresql": Dialect.POSTGRESQL,
    "postgres": Dialect.POSTGRESQL,
    "pg": Dialect.POSTGRESQL,
    "doris": Dialect.DORIS,
    "apache doris": Dialect.DORIS,
    "oracle": Dialect.ORACLE,
    "sqlserver": Dialect.SQLSERVER,
    "sql server": Dialect.SQLSERVER,
    "mssql": Dialect.SQLSERVER,
}
