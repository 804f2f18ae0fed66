"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from core.utils.config import get_settings

# Configure logging
LOG_LEVEL_NAME = get_settings().log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from core.api.swimlanes import router as swimlanes_router
from core.api.projects import router as projects_router
from core.api.tasks import router as tasks_router
from core.api.calendar import router as calendar_router

# PostgreSQL schema is managed by Alembic migrations; SQLite is created on first use.

app = FastAPI(
    title="Taskboard Service",
    description="API for personal swimlanes, projects and nested tasks.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception: %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        {"detail": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


app.include_router(swimlanes_router)
app.include_router(projects_router)
app.include_router(tasks_router)
app.include_router(calendar_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "taskboard-service"}
