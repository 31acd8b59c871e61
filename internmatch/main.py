"""
InternMatch - Main Application

FastAPI backend with:
- PostgreSQL for accounts
- MongoDB for intern profiles and organization roles
- JWT authentication
- Skill-overlap matching between roles and interns
- Frontend served from /frontend/public when present

Run: uvicorn internmatch.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from pymongo.errors import DuplicateKeyError
from sqlalchemy.exc import IntegrityError

from internmatch import __version__
from internmatch.api.routes import api_router
from internmatch.core.config import get_settings
from internmatch.core.errors import AppError, ConflictError, InternalError
from internmatch.core.logging_config import setup_logging
from internmatch.db.mongodb import init_mongo_indexes, test_mongo_connection
from internmatch.db.postgres import init_postgres_schema, test_postgres_connection

logger = logging.getLogger(__name__)

settings = get_settings()

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging and storage on startup."""
    setup_logging()
    logger.info("InternMatch starting up")

    try:
        init_postgres_schema()
    except Exception:
        logger.exception("PostgreSQL schema initialization failed")
    try:
        init_mongo_indexes()
    except Exception:
        logger.exception("MongoDB index initialization failed")

    yield

    logger.info("InternMatch shutting down")


# Create FastAPI app
app = FastAPI(
    title="InternMatch",
    description="""
    Internship matching between interns and organizations.

    ## Features
    - **Authentication**: JWT-based signup/signin for interns and organizations
    - **Interns**: Profile submission with CV upload
    - **Organizations**: Role posting, CV access
    - **Jobs**: Public job board with search and pagination
    - **Matching**: Skill-overlap ranking of interns against required skills
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# EXCEPTION HANDLERS
# Every failure leaves as {"error": ..., "details": [...]}
# ============================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _field_name(loc) -> str:
    # loc looks like ("body", "skills", 0) or ("query", "limit")
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": details},
    )


@app.exception_handler(DuplicateKeyError)
@app.exception_handler(IntegrityError)
async def duplicate_key_handler(request: Request, exc: Exception):
    logger.warning("Duplicate key on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=409, content=ConflictError().to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything unexpected: log it here, tell the client nothing."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=InternalError().to_dict())


# Include API routes
app.include_router(api_router)

# Serve static files (for any additional assets)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


# Serve frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": "InternMatch", "message": "Frontend not found. API is running."}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
