
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from database.enums import TaskStatus
from database.models import Project, Task, User
from database.repositories import TaskRepository
from taskboard.depends import (get_active_task, get_project,
                               get_project_owner, get_task, get_task_owner,
                               get_task_repo, get_user_db)
from taskboard.exceptions import *
from taskboard.schemas import (BulkUpdateResultSchema, BulkUpdateTaskSchema,
                               Pagination, TaskCreateSchema, TaskPageSchema,
                               TaskSchema, TaskUpdateSchema, total_pages)
from taskboard.schemas.base import naive_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/project/tasks", tags=["task"])


@router.patch("/bulk-update-status")
async def bulk_update_status(update_data: BulkUpdateTaskSchema,
                             user: User = Depends(get_user_db),
                             tr: TaskRepository = Depends(get_task_repo)
                             ) -> BulkUpdateResultSchema:
    tasks = await tr.bulk_update_status(user, update_data.task_ids, update_data.status)
    logger.info("User %s set status %s on %d of %d tasks",
                user.id, update_data.status.value, len(tasks), len(update_data.task_ids))
    return BulkUpdateResultSchema(message="Tasks updated successfully",
                                  updated_tasks=[TaskSchema.from_db(t) for t in tasks])


@router.get("/task/{task_id}")
async def get_by_id(task: Task = Depends(get_task),
                    user: User = Depends(get_task_owner)
                    ) -> TaskSchema:
    return TaskSchema.from_db(task)


@router.post("/{project_id}", status_code=status.HTTP_201_CREATED)
async def create_task(new_task: TaskCreateSchema,
                      project: Project = Depends(get_project),
                      user: User = Depends(get_project_owner),
                      tr: TaskRepository = Depends(get_task_repo)
                      ) -> TaskSchema:
    task = await tr.create(project=project,
                           title=new_task.title,
                           description=new_task.description,
                           status=new_task.status,
                           due_date=new_task.due_date)
    if task is None:
        raise SendFeedbackToAdminException()
    logger.info("User %s created task %s in project %s", user.id, task.id, project.id)
    return TaskSchema.from_db(task)


@router.get("/{project_id}")
async def list_tasks(task_status: TaskStatus | None = Query(None, alias="status"),
                     due_date: datetime | None = Query(None, alias="dueDate"),
                     pagination: Pagination = Depends(),
                     project: Project = Depends(get_project),
                     user: User = Depends(get_project_owner),
                     tr: TaskRepository = Depends(get_task_repo)
                     ) -> TaskPageSchema:
    tasks, total = await tr.get_by_project(project,
                                           pagination.offset,
                                           pagination.limit,
                                           status=task_status,
                                           due_date=naive_utc(due_date))
    return TaskPageSchema(tasks=[TaskSchema.from_db(t) for t in tasks],
                          total=total,
                          page=pagination.page,
                          total_pages=total_pages(total, pagination.limit))


@router.put("/{task_id}")
async def update_task(update_data: TaskUpdateSchema,
                      task: Task = Depends(get_active_task),
                      user: User = Depends(get_task_owner),
                      tr: TaskRepository = Depends(get_task_repo)
                      ) -> TaskSchema:
    task = await tr.update(task, update_data.changes())
    logger.info("User %s updated task %s", user.id, task.id)
    return TaskSchema.from_db(task)


@router.delete("/{task_id}")
async def soft_delete(task: Task = Depends(get_active_task),
                      user: User = Depends(get_task_owner),
                      tr: TaskRepository = Depends(get_task_repo)
                      ):
    await tr.soft_delete(task)
    logger.info("User %s deleted task %s", user.id, task.id)
    return {"message": "Task deleted successfully"}
