"""
Explicit database connection lifecycle.

The caller owns the handle: it connects (with bounded retries), hands the
handle to introspection calls, and closes it when done.
"""

import time
from typing import TYPE_CHECKING, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from ..logging_config import get_logger

if TYPE_CHECKING:
    from .config import DBConfig

logger = get_logger(__name__)


class DBConnectionError(Exception):
    """Raised when the database cannot be reached or queried."""

    pass


class DatabaseHandle:
    """Owns one SQLAlchemy engine for the duration of a generation run."""

    def __init__(
        self,
        config: "DBConfig",
        retries: Optional[int] = None,
        retry_delay: float = 0.5,
    ):
        """
        Args:
            config: Connection settings
            retries: Connection attempts before giving up (defaults to config)
            retry_delay: Seconds to wait between attempts
        """
        self.config = config
        self.retries = max(1, retries if retries is not None else config.connect_retries)
        self.retry_delay = retry_delay
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        """The connected engine."""
        if self._engine is None:
            raise DBConnectionError("Database handle is not connected")
        return self._engine

    @property
    def schema_name(self) -> Optional[str]:
        return self.config.schema_name

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> "DatabaseHandle":
        """
        Create the engine and prove it with a live connection.

        Raises:
            DBConnectionError: If every attempt fails
        """
        if self._engine is not None:
            return self

        url = self.config.sqlalchemy_url()
        last_error: Optional[Exception] = None

        for attempt in range(1, self.retries + 1):
            engine = None
            try:
                engine = create_engine(url)
                with engine.connect():
                    pass
                self._engine = engine
                logger.info("Connected to %s", url.render_as_string(hide_password=True))
                return self
            except ArgumentError as e:
                # Bad URL or missing driver; retrying cannot help
                raise DBConnectionError(f"Failed to create engine: {e}") from e
            except SQLAlchemyError as e:
                last_error = e
                if engine is not None:
                    engine.dispose()
                logger.warning(
                    "Connection attempt %d/%d failed: %s", attempt, self.retries, e
                )
                if attempt < self.retries:
                    time.sleep(self.retry_delay)

        raise DBConnectionError(
            f"The connection could not be made after {self.retries} attempt(s): "
            f"{last_error}"
        )

    def close(self):
        """Dispose of the engine; safe to call more than once."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.debug("Database connection closed")

    def __enter__(self) -> "DatabaseHandle":
        return self.connect()

    def __exit__(self, exc_type, exc, tb):
        self.close()
