

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database.enums.task_status import TaskStatus
from database.models.base import Base, utcnow
from database.models.project import Project


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    title: Mapped[str]
    description: Mapped[str | None]
    status: Mapped[TaskStatus] = mapped_column(Enum(TaskStatus,
                                                    native_enum=False,
                                                    values_callable=lambda e: [_.value for _ in e]))
    due_date: Mapped[datetime | None]
    project_id: Mapped[UUID] = mapped_column(ForeignKey("projects.id", ondelete="CASCADE"), index=True)
    deleted_at: Mapped[datetime | None] = mapped_column(default=None)
    created_date: Mapped[datetime] = mapped_column(default=utcnow)
    last_modified_date: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    project: Mapped[Project] = relationship(lazy="selectin", foreign_keys=[project_id])
