
from uuid import UUID

from fastapi import Depends, Request

from database.models import Task, User
from database.repositories import TaskRepository
from taskboard.exceptions import NotTaskOwnerException, TaskNotFoundException

from .database import get_task_repo
from .get_project import owner_action
from .get_user import get_user_db


async def get_task(task_id: UUID,
                   tr: TaskRepository = Depends(get_task_repo)
                   ) -> Task:
    task = await tr.get_by_id(task_id)
    if task is None:
        raise TaskNotFoundException(task_id)
    return task


async def get_task_owner(request: Request,
                         task: Task = Depends(get_task),
                         user: User = Depends(get_user_db)
                         ) -> User:
    if task.project.owner_id != user.id:
        raise NotTaskOwnerException(owner_action(request))
    return user


async def get_active_task(task: Task = Depends(get_task),
                          user: User = Depends(get_task_owner)
                          ) -> Task:
    # owner check runs before the deleted check
    if task.deleted_at is not None:
        raise TaskNotFoundException(task.id)
    return task
