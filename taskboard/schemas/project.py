
from datetime import datetime
from uuid import UUID

from pydantic import Field

from database.models import Project

from .base import CamelSchema


class CreateProjectSchema(CamelSchema):
    name: str = Field(min_length=1)
    description: str | None = None


class EditProjectSchema(CamelSchema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class ProjectSchema(CamelSchema):
    id: UUID
    name: str
    description: str | None = None
    owner_id: UUID
    created_date: datetime
    last_modified_date: datetime

    @classmethod
    def from_db(cls, project: Project) -> "ProjectSchema":
        return cls(**project.__dict__)


class ProjectPageSchema(CamelSchema):
    projects: list[ProjectSchema]
    total: int
    page: int
    total_pages: int
