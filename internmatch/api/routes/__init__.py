"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internmatch.schemas.schemas import ErrorResponse

from internmatch.api.routes.auth_routes import router as auth_router
from internmatch.api.routes.intern_routes import router as intern_router
from internmatch.api.routes.organization_routes import router as organization_router
from internmatch.api.routes.job_routes import router as job_router
from internmatch.api.routes.matching_routes import router as matching_router

# Every handler can fail with the shared error envelope
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    403: {"model": ErrorResponse, "description": "Wrong account type"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}

# Main API router
api_router = APIRouter(responses=ERROR_RESPONSES)

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(intern_router)
api_router.include_router(organization_router)
api_router.include_router(job_router)
api_router.include_router(matching_router)
