

from fastapi import APIRouter

from .auth import router as auth_router
from .location import router as location_router
from .project import router as project_router
from .task import router as task_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(location_router)
router.include_router(task_router)
router.include_router(project_router)
