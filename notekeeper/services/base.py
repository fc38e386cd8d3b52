"""
Base Service.

Base class for all services providing common patterns for business logic.
Services own the unit of work: each public operation opens its own
session through session_scope(), hands it to repositories, and lets the
scope commit or roll back.

Usage:
    from notekeeper.services.base import BaseService

    class TagService(BaseService):
        async def create_tag(self, name: str) -> Tag:
            self._validate_required({"name": name}, ["name"])
            return await self._execute_db_operation(
                "create_tag", self._insert_tag(name),
            )

        async def _insert_tag(self, name: str) -> Tag:
            async with self.session_scope() as session:
                return await TagRepository(session).create(name=name)
"""

from collections.abc import Awaitable
from contextlib import AbstractAsyncContextManager
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notekeeper.core.database import session_scope
from notekeeper.core.exceptions import DatabaseError, ValidationError
from notekeeper.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Per-operation session scopes
    - Logging context
    - Error wrapping for database operations
    - Common validation patterns
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize the service with a session factory.

        Args:
            session_factory: Factory producing one AsyncSession per operation
        """
        self._session_factory = session_factory
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get the session factory."""
        return self._session_factory

    def session_scope(self) -> AbstractAsyncContextManager[AsyncSession]:
        """Open a fresh session that commits on success and rolls back on error."""
        return session_scope(self._session_factory)

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Awaitable[T],
    ) -> T:
        """
        Execute a database operation with error handling.

        Wraps database operations to convert SQLAlchemy exceptions and
        raw driver connection failures (refused connections, connect
        timeouts) to application-specific exceptions.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            DatabaseError: For any database error
        """
        try:
            return await coro
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str],
    ) -> None:
        """
        Validate that required fields are present and not empty.

        Whitespace-only strings count as empty.

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                f"{' and '.join(missing)} cannot be empty",
                details={"missing_fields": missing},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
