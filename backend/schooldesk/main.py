"""
Main entry point of the SchoolDesk API.
Run: uvicorn schooldesk.main:app --reload  (from the backend/ directory)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import schooldesk.models  # noqa: F401 (registers every model on Base.metadata)
from schooldesk.config import settings
from schooldesk.database import init_db
from schooldesk.exceptions import SchoolDeskError
from schooldesk.middleware import AuthMiddleware, RequestLoggingMiddleware
from schooldesk.routers import (
    attendances,
    auth,
    courses,
    enrollments,
    grades,
    schedules,
    students,
    teachers,
    users,
)
from schooldesk.validation import format_errors

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Creates the tables at startup when AUTO_CREATE_TABLES is set."""
    if settings.AUTO_CREATE_TABLES:
        init_db()
        logger.info("Database tables created")
    yield


app = FastAPI(
    title="SchoolDesk API",
    description="School management API: students, teachers, courses, schedules, enrollments, grades and attendance",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Last added runs first: CORS, then logging, then the token check.
app.add_middleware(AuthMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(students.router)
app.include_router(teachers.router)
app.include_router(courses.router)
app.include_router(schedules.router)
app.include_router(enrollments.router)
app.include_router(grades.router)
app.include_router(attendances.router)


@app.exception_handler(SchoolDeskError)
async def domain_error_handler(request: Request, exc: SchoolDeskError) -> JSONResponse:
    content = {"detail": exc.message}
    if exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures answer 400 with one entry per offending field."""
    errors = format_errors(exc.errors())
    detail = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"detail": detail, "errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any unexpected error answers a generic 500; the traceback only goes to the log."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred."},
    )


@app.get("/api/health", tags=["Health"])
def health_check():
    """Checks that the API is up."""
    return {"status": "ok", "service": "SchoolDesk API", "version": "0.1.0"}
