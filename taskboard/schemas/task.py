
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from database.enums import TaskStatus
from database.models import Task

from .base import CamelSchema, naive_utc

NULLABLE_TASK_FIELDS = ("description", "due_date")


class TaskCreateSchema(CamelSchema):
    title: str = Field(min_length=1)
    description: str | None = None
    status: TaskStatus
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return naive_utc(value)


class TaskUpdateSchema(CamelSchema):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return naive_utc(value)

    def changes(self) -> dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        return {key: value for key, value in fields.items()
                if value is not None or key in NULLABLE_TASK_FIELDS}


class BulkUpdateTaskSchema(CamelSchema):
    task_ids: list[UUID] = Field(min_length=1)
    status: TaskStatus


class TaskSchema(CamelSchema):
    id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: datetime | None = None
    project_id: UUID
    deleted_at: datetime | None = None
    created_date: datetime
    last_modified_date: datetime

    @classmethod
    def from_db(cls, task: Task) -> "TaskSchema":
        return cls(id=task.id,
                   title=task.title,
                   description=task.description,
                   status=task.status,
                   due_date=task.due_date,
                   project_id=task.project_id,
                   deleted_at=task.deleted_at,
                   created_date=task.created_date,
                   last_modified_date=task.last_modified_date)


class TaskPageSchema(CamelSchema):
    tasks: list[TaskSchema]
    total: int
    page: int
    total_pages: int


class BulkUpdateResultSchema(CamelSchema):
    message: str
    updated_tasks: list[TaskSchema]
