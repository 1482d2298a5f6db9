
from uuid import UUID

from fastapi import Depends, Request

from database.models import Project, User
from database.repositories import ProjectRepository
from taskboard.exceptions import NotProjectOwnerException, ProjectNotFoundException

from .database import get_project_repo
from .get_user import get_user_db

OWNER_ACTIONS = {
    "GET": "access",
    "POST": "modify",
    "PUT": "update",
    "PATCH": "update",
    "DELETE": "delete",
}


def owner_action(request: Request) -> str:
    return OWNER_ACTIONS.get(request.method, "access")


async def get_project(project_id: UUID,
                      pr: ProjectRepository = Depends(get_project_repo)
                      ) -> Project:
    project = await pr.get_by_id(project_id)
    if project is None:
        raise ProjectNotFoundException(project_id)
    return project


async def get_project_owner(request: Request,
                            project: Project = Depends(get_project),
                            user: User = Depends(get_user_db)
                            ) -> User:
    if user.id != project.owner_id:
        raise NotProjectOwnerException(owner_action(request))
    return user
