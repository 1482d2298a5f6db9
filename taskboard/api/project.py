
import logging

from fastapi import APIRouter, Depends, status

from database.models import Project, User
from database.repositories import ProjectRepository
from taskboard.depends import (get_project, get_project_owner,
                               get_project_repo, get_user_db)
from taskboard.exceptions import *
from taskboard.schemas import (CreateProjectSchema, EditProjectSchema,
                               Pagination, ProjectPageSchema, ProjectSchema,
                               total_pages)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/project", tags=["project"])


@router.post("/create-project", status_code=status.HTTP_201_CREATED)
async def create(create_data: CreateProjectSchema,
                 user: User = Depends(get_user_db),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> ProjectSchema:
    project = await pr.create(
        owner=user,
        name=create_data.name,
        description=create_data.description,
    )
    if project is None:
        raise SendFeedbackToAdminException()
    logger.info("User %s created project %s", user.id, project.id)
    return ProjectSchema.from_db(project)


@router.get("/all-projects")
async def list_projects(pagination: Pagination = Depends(),
                        user: User = Depends(get_user_db),
                        pr: ProjectRepository = Depends(get_project_repo)
                        ) -> ProjectPageSchema:
    projects, total = await pr.get_by_owner(user, pagination.offset, pagination.limit)
    return ProjectPageSchema(projects=[ProjectSchema.from_db(p) for p in projects],
                             total=total,
                             page=pagination.page,
                             total_pages=total_pages(total, pagination.limit))


@router.get("/{project_id}")
async def get_by_id(project: Project = Depends(get_project),
                    user: User = Depends(get_project_owner)
                    ) -> ProjectSchema:
    return ProjectSchema.from_db(project)


@router.put("/{project_id}")
async def update(update_data: EditProjectSchema,
                 project: Project = Depends(get_project),
                 user: User = Depends(get_project_owner),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> ProjectSchema:
    project = await pr.update(project,
                              update_data.name,
                              update_data.description)
    logger.info("User %s updated project %s", user.id, project.id)
    return ProjectSchema.from_db(project)


@router.delete("/{project_id}")
async def delete(project: Project = Depends(get_project),
                 user: User = Depends(get_project_owner),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ):
    await pr.delete(project)
    logger.info("User %s deleted project %s", user.id, project.id)
    return {"message": "Project deleted successfully"}
