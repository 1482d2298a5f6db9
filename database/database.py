
import contextlib
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (AsyncConnection, AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from config import settings
from database.models import Base


def get_db_url(user: str, password: str, host: str, port: int, name: str) -> str:
    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{name}"


class DatabaseSessionManager:
    def __init__(self, url: str, engine_kwargs: dict[str, Any] | None = None):
        self._engine = create_async_engine(url, **(engine_kwargs or {}))
        self._sessionmaker = async_sessionmaker(bind=self._engine,
                                                expire_on_commit=False)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def close(self) -> None:
        await self._engine.dispose()

    @contextlib.asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        async with self._engine.begin() as connection:
            yield connection

    async def create_tables(self) -> None:
        async with self.connect() as connection:
            await connection.run_sync(Base.metadata.create_all)

    @contextlib.asynccontextmanager
    async def context_session(self) -> AsyncIterator[AsyncSession]:
        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.context_session() as session:
            yield session


session_manager = DatabaseSessionManager(get_db_url(settings.db_user,
                                                    settings.db_password,
                                                    settings.db_ip,
                                                    settings.db_port,
                                                    settings.db_name),
                                         {"echo": settings.db_echo})
