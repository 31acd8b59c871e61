"""
Organization Routes

POST /organization/role - Post an internship role (organization only)
GET /organization/role - Get own roles, newest first
GET /organization/role/{role_id}/matches - Interns matching a posted role
"""

import logging

from fastapi import APIRouter, Depends, Query

from internmatch.core.auth import TokenPayload, get_token_payload, require_user_type
from internmatch.core.errors import AuthorizationError, NotFoundError
from internmatch.services.matching_service import DEFAULT_LIMIT, match_interns
from internmatch.services.mongo_service import (
    get_intern_profile_service, get_organization_role_service
)
from internmatch.api.routes.matching_routes import to_matching_response
from internmatch.schemas.schemas import (
    OrganizationRoleCreate, OrganizationRoleEnvelope, OrganizationRoleListResponse,
    OrganizationRoleResponse, MatchingResponse, UserType
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organization", tags=["Organizations"])


@router.post("/role", response_model=OrganizationRoleEnvelope, status_code=201)
async def create_role(
    data: OrganizationRoleCreate,
    user: TokenPayload = Depends(require_user_type(UserType.organization, "Only organizations can post roles"))
):
    """Post a new internship role."""
    doc = get_organization_role_service().insert(user.user_id, data.model_dump(mode="json"))
    logger.info("Account %s posted role %s (%s)", user.user_id, doc["id"], doc["role_title"])

    return OrganizationRoleEnvelope(
        message="Role posted successfully",
        role=OrganizationRoleResponse(**doc)
    )


@router.get("/role", response_model=OrganizationRoleListResponse)
async def list_roles(user: TokenPayload = Depends(get_token_payload)):
    """Get roles posted by the calling account."""
    docs = get_organization_role_service().list_by_user(user.user_id)
    return OrganizationRoleListResponse(roles=[OrganizationRoleResponse(**doc) for doc in docs])


@router.get("/role/{role_id}/matches", response_model=MatchingResponse)
async def role_matches(
    role_id: str,
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    user: TokenPayload = Depends(require_user_type(UserType.organization, "Only organizations can access matching"))
):
    """
    Interns whose skills overlap a posted role's required skills.

    Same scoring as GET /matching/interns, fed from the stored role.
    """
    role = get_organization_role_service().get_by_id(role_id)
    if not role:
        raise NotFoundError("Role not found")
    if role["user_id"] != user.user_id:
        raise AuthorizationError("Role belongs to another organization")

    required_skills = role["required_skills"]
    matches = match_interns(
        required_skills,
        get_intern_profile_service().list_all(),
        limit=limit
    )
    return to_matching_response(matches, required_skills)
