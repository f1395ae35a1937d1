from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.utils.settings.database import DatabaseSettings

_settings = DatabaseSettings()

async_engine = create_async_engine(
    _settings.DATABASE_URL_ASYNC,
    echo=_settings.DATABASE_ECHO,
    pool_size=_settings.DATABASE_POOL_SIZE,
    max_overflow=0,
    pool_pre_ping=True,
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)
