"""Base factory for async SQLAlchemy models."""

from typing import Any, TypeVar, Generic
from uuid import uuid4

import factory
from sqlalchemy.ext.asyncio import AsyncSession


T = TypeVar("T")


class AsyncSQLAlchemyModelFactory(factory.Factory, Generic[T]):
    """Base factory for async SQLAlchemy models.

    Rows are committed so requests served by the app, which use their own
    sessions, can see them.
    """

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class: type[T], *args: Any, **kwargs: Any) -> T:
        """Create model instance without persisting to database."""
        return model_class(**kwargs)

    @classmethod
    async def create_async(cls, session: AsyncSession, **kwargs: Any) -> T:
        """Create and persist model instance to database."""
        instance = cls.build(**kwargs)
        session.add(instance)
        await session.commit()
        return instance

    @classmethod
    async def create_batch_async(
        cls, session: AsyncSession, size: int, **kwargs: Any
    ) -> list[T]:
        """Create and persist multiple model instances to database."""
        instances = cls.build_batch(size, **kwargs)
        session.add_all(instances)
        await session.commit()
        return instances


class UUIDFactory(factory.LazyFunction):
    """Factory for generating UUIDs."""

    def __init__(self) -> None:
        super().__init__(uuid4)
