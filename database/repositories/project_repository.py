
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Project, User


class ProjectRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, owner: User, name: str, description: str | None) -> Project | None:
        project = Project(owner_id=owner.id,
                          name=name,
                          description=description)
        self.session.add(project)
        await self.session.commit()
        return await self.get_by_id(project.id)

    async def get_by_id(self, project_id: UUID) -> Project | None:
        return await self.session.get(Project, project_id)

    async def get_by_owner(self, owner: User, offset: int, limit: int) -> tuple[list[Project], int]:
        total = await self.session.scalar(
            select(func.count()).select_from(Project).where(Project.owner_id == owner.id))
        stmt = select(Project) \
            .where(Project.owner_id == owner.id) \
            .order_by(Project.created_date.desc()) \
            .offset(offset) \
            .limit(limit)
        projects = await self.session.scalars(stmt)
        return list(projects), total or 0

    async def update(self, project: Project, name: str | None, description: str | None) -> Project:
        if name is not None:
            project.name = name
        if description is not None:
            project.description = description
        await self.session.commit()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.commit()
