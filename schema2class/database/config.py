from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from .connection import DBConnectionError

# db_type -> SQLAlchemy driver name
_DRIVERS = {
    "postgres": "postgresql+psycopg2",
    "postgresql": "postgresql+psycopg2",
    "mysql": "mysql+pymysql",
    "mssql": "mssql+pyodbc",
    "sqlserver": "mssql+pyodbc",
    "oracle": "oracle+cx_oracle",
}


@dataclass
class DBConfig:
    db_type: str = "sqlite"  # sqlite | postgres | mysql | mssql | oracle | any dialect
    url: Optional[str] = None  # Full SQLAlchemy URL; wins over the parts below
    host: str = "localhost"
    port: Optional[int] = None
    database: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    schema_name: Optional[str] = None
    connect_retries: int = 1

    def sqlalchemy_url(self) -> URL:
        """
        Returns the SQLAlchemy URL for this configuration.
        """
        if self.url:
            try:
                return make_url(self.url)
            except ArgumentError as e:
                raise DBConnectionError(f"Invalid database URL: {e}") from e

        db = (self.db_type or "").lower().strip()

        # sqlite special case
        if db == "sqlite":
            if not self.database:
                raise DBConnectionError(
                    "SQLite requires database file path in database field"
                )
            return URL.create("sqlite", database=self.database)

        # default for network DBs
        for name in ("database", "username", "host"):
            if not getattr(self, name):
                raise DBConnectionError(f"{name} is required for {db or 'database'}")

        return URL.create(
            _DRIVERS.get(db, db),
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DBConfig":
        return cls(
            db_type=data.get("db_type", "sqlite"),
            url=data.get("url"),
            host=data.get("host", "localhost"),
            port=data.get("port"),
            database=data.get("database"),
            username=data.get("username"),
            password=data.get("password"),
            schema_name=data.get("schema_name"),
            connect_retries=int(data.get("connect_retries", 1)),
        )
