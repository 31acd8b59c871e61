"""
Matching Routes

GET /matching/interns?skills=a,b,c&limit= - Rank interns by skill overlap (organization only)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from internmatch.core.auth import TokenPayload, require_user_type
from internmatch.core.errors import ValidationError
from internmatch.services.matching_service import (
    DEFAULT_LIMIT, InternMatch, match_interns, parse_skills_param
)
from internmatch.services.mongo_service import get_intern_profile_service
from internmatch.schemas.schemas import MatchedIntern, MatchingResponse, UserType

router = APIRouter(prefix="/matching", tags=["Matching"])


def to_matching_response(matches: List[InternMatch], required_skills: List[str]) -> MatchingResponse:
    interns = [MatchedIntern.model_validate(m.to_dict()) for m in matches]
    return MatchingResponse(interns=interns, total=len(interns), required_skills=required_skills)


@router.get("/interns", response_model=MatchingResponse)
async def match_interns_by_skills(
    skills: Optional[str] = Query(None, description="Comma-separated required skills"),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    user: TokenPayload = Depends(require_user_type(UserType.organization, "Only organizations can access matching"))
):
    """
    Rank intern profiles against the required skills.

    A profile skill counts when it contains, or is contained in, a
    required skill (case-insensitive). Interns with no overlap are
    left out; ties keep newest-first order.
    """
    required_skills = parse_skills_param(skills)
    if not required_skills:
        raise ValidationError(
            "Required skills parameter is needed",
            details=[{"field": "skills", "message": "At least one skill is required"}]
        )

    profiles = get_intern_profile_service().list_all()
    matches = match_interns(required_skills, profiles, limit=limit)
    return to_matching_response(matches, required_skills)
