
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.enums import TaskStatus
from database.models import Project, Task, User
from database.models.base import utcnow


class TaskRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self,
                     project: Project,
                     title: str,
                     status: TaskStatus,
                     description: str | None = None,
                     due_date: datetime | None = None
                     ) -> Task | None:
        task = Task(project=project,
                    title=title,
                    description=description,
                    status=status,
                    due_date=due_date)
        self.session.add(task)
        await self.session.commit()
        return await self.get_by_id(task.id)

    async def get_by_id(self, task_id: UUID) -> Task | None:
        return await self.session.get(Task, task_id)

    async def get_by_project(self,
                             project: Project,
                             offset: int,
                             limit: int,
                             status: TaskStatus | None = None,
                             due_date: datetime | None = None
                             ) -> tuple[list[Task], int]:
        conditions = [Task.project_id == project.id, Task.deleted_at.is_(None)]
        if status is not None:
            conditions.append(Task.status == status)
        if due_date is not None:
            conditions.append(Task.due_date <= due_date)
        total = await self.session.scalar(
            select(func.count()).select_from(Task).where(*conditions))
        stmt = select(Task) \
            .where(*conditions) \
            .order_by(Task.created_date) \
            .offset(offset) \
            .limit(limit)
        tasks = await self.session.scalars(stmt)
        return list(tasks), total or 0

    async def update(self, task: Task, fields: dict[str, Any]) -> Task:
        for key, value in fields.items():
            setattr(task, key, value)
        await self.session.commit()
        await self.session.refresh(task)
        return task

    async def bulk_update_status(self, owner: User, task_ids: list[UUID], status: TaskStatus) -> list[Task]:
        stmt = select(Task) \
            .join(Project, Task.project_id == Project.id) \
            .where(Task.id.in_(task_ids),
                   Task.deleted_at.is_(None),
                   Project.owner_id == owner.id)
        tasks = list(await self.session.scalars(stmt))
        for task in tasks:
            task.status = status
        await self.session.commit()
        for task in tasks:
            await self.session.refresh(task)
        return tasks

    async def soft_delete(self, task: Task) -> None:
        task.deleted_at = utcnow()
        await self.session.commit()
