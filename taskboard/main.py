from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import settings
from database.database import session_manager
from taskboard.api import router
from taskboard.logging_setup import setup_logging
from taskboard.middleware import ExceptionMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables:
        await session_manager.create_tables()
    yield
    await session_manager.close()


setup_logging(settings.log_level)

app = FastAPI(title="Project and Task API",
              version="1.0.0",
              lifespan=lifespan,
              docs_url="/api/docs", redoc_url="/api/redoc",
              openapi_url="/api/openapi.json")
app.include_router(router)
app.add_middleware(ExceptionMiddleware)
