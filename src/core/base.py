from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterable, Iterator
from uuid import UUID

from fastapi import status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import Session
from src.utils.logger import get_logger


class BaseService:
    """Base service class with database dependency injection."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Commit everything written inside the block, or roll it all back."""
        try:
            yield self.db
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise


class BaseRepository:
    """Tenant-scoped data access bound to one session.

    Repositories flush but never commit; services own the transaction.
    """

    def __init__(self, db: AsyncSession, session: Session | None):
        self.db = db
        self.session = session
        self.logger = get_logger(self.__class__.__name__)

    @property
    def organization_id(self) -> UUID:
        organization_id = getattr(self.session, "organization_id", None)
        if organization_id is None:
            self.logger.error(
                "Repository used without organization context",
                session_kind=getattr(self.session, "kind", None),
            )
            raise DonorHubException(
                MessageCode.TENANT_CONTEXT_MISSING,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return organization_id

    def translate_errors(
        self,
        action: str,
        conflict_code: MessageCode = MessageCode.CONFLICT,
    ):
        return translate_errors(self.logger, action, conflict_code)


@contextmanager
def translate_errors(
    logger,
    action: str,
    conflict_code: MessageCode = MessageCode.CONFLICT,
) -> Iterator[None]:
    """Map persistence failures to typed API errors.

    Typed errors pass through untouched; the driver error is kept as the
    cause and never reaches the response.
    """
    try:
        yield
    except DonorHubException:
        raise
    except IntegrityError as e:
        logger.warning(f"Constraint violation while trying to {action}")
        raise DonorHubException(
            conflict_code,
            status.HTTP_409_CONFLICT,
            {"description": f"Could not {action}: resource already exists"},
        ) from e
    except SQLAlchemyError as e:
        logger.error(
            f"Database error while trying to {action}",
            exception_type=type(e).__name__,
        )
        raise DonorHubException(
            MessageCode.INTERNAL_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"description": f"Failed to {action}"},
        ) from e


def drop_nulls(changes: dict, required_fields: Iterable[str]) -> dict:
    """Leave out explicit ``None`` for columns that cannot be cleared."""
    required = set(required_fields)
    return {
        key: value
        for key, value in changes.items()
        if value is not None or key not in required
    }
