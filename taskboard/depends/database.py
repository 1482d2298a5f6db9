
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database.database import session_manager
from database.repositories import (LocationRepository, ProjectRepository,
                                   TaskRepository, UserRepository)
from taskboard.config import Config


async def get_user_repo(session: AsyncSession = Depends(session_manager.session)
                        ) -> UserRepository:
    return UserRepository(session, Config.bcrypt_rounds)


async def get_project_repo(session: AsyncSession = Depends(session_manager.session)
                           ) -> ProjectRepository:
    return ProjectRepository(session)


async def get_task_repo(session: AsyncSession = Depends(session_manager.session)
                        ) -> TaskRepository:
    return TaskRepository(session)


async def get_location_repo(session: AsyncSession = Depends(session_manager.session)
                            ) -> LocationRepository:
    return LocationRepository(session)


LocationRepoScope = Callable[[], AbstractAsyncContextManager[LocationRepository]]


@asynccontextmanager
async def location_repo_scope() -> AsyncIterator[LocationRepository]:
    async with session_manager.context_session() as session:
        yield LocationRepository(session)


async def get_location_repo_scope() -> LocationRepoScope:
    """Per-frame repository for long-lived sockets, so no session outlives a single write."""
    return location_repo_scope
