"""
Intern Routes

POST /intern/profile - Create intern profile (intern only, once)
GET /intern/profile - Get own profile
GET /intern/cv/{user_id} - Download an intern's CV (organization only)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from internmatch.core.auth import TokenPayload, get_token_payload, require_user_type, ensure_user_type
from internmatch.core.errors import ConflictError, NotFoundError
from internmatch.services.mongo_service import get_intern_profile_service
from internmatch.utils.cv_files import DEFAULT_CV_FILENAME, content_disposition, cv_content_type, read_cv
from internmatch.schemas.schemas import (
    InternProfileCreate, InternProfileEnvelope, InternProfileResponse, UserType
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intern", tags=["Interns"])

require_intern = require_user_type(UserType.intern, "Only interns can create intern profiles")


def to_profile_response(doc: dict) -> InternProfileResponse:
    """Profile document -> API shape. The encoded CV itself is never echoed back."""
    fields = {k: v for k, v in doc.items() if k != "cv_base64"}
    return InternProfileResponse(**fields, has_cv=bool(doc.get("cv_base64")))


@router.post("/profile", response_model=InternProfileEnvelope, status_code=201)
async def create_profile(data: InternProfileCreate, user: TokenPayload = Depends(require_intern)):
    """Create the intern profile for the calling account. One per account."""
    service = get_intern_profile_service()

    # Check profile exists (the unique index on user_id catches the race)
    if service.exists_for_user(user.user_id):
        raise ConflictError("Profile already exists for this user")

    doc = service.insert(user.user_id, data.model_dump(mode="json"))
    logger.info("Created intern profile %s for account %s", doc["id"], user.user_id)

    return InternProfileEnvelope(
        message="Intern profile created successfully",
        profile=to_profile_response(doc)
    )


@router.get("/profile", response_model=InternProfileEnvelope)
async def get_profile(user: TokenPayload = Depends(get_token_payload)):
    """Get the calling account's profile."""
    doc = get_intern_profile_service().get_by_user(user.user_id, include_cv=True)
    if not doc:
        raise NotFoundError("Profile not found")

    return InternProfileEnvelope(profile=to_profile_response(doc))


@router.get("/cv/{user_id}")
async def get_cv(user_id: int, user: TokenPayload = Depends(get_token_payload)):
    """
    Serve an intern's CV inline. Organizations only.

    A missing profile or CV is a 404 for every authenticated caller.
    Content-Type follows the stored filename (.pdf, .doc, .docx);
    anything else is served as PDF.
    """
    doc = get_intern_profile_service().get_by_user(user_id, include_cv=True)
    if not doc:
        raise NotFoundError("Profile not found")
    if not doc.get("cv_base64"):
        raise NotFoundError("CV not found")

    ensure_user_type(user, UserType.organization, "Only organizations can view CVs")

    file_name = doc.get("cv_file_name") or DEFAULT_CV_FILENAME
    return Response(
        content=read_cv(doc["cv_base64"]),
        media_type=cv_content_type(file_name),
        headers={
            "Content-Disposition": content_disposition(file_name),
            "Cache-Control": "no-cache",
        },
    )
