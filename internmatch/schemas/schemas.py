"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Annotated
from datetime import datetime
from enum import Enum

from internmatch.utils.cv_files import has_control_chars, is_allowed_cv_filename, normalize_cv_base64


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


SkillName = Annotated[str, Field(min_length=1)]


def _lower_email(value: str) -> str:
    return value.strip().lower()


# ============================================================
# ENUMS
# ============================================================

class UserType(str, Enum):
    intern = "intern"
    organization = "organization"


class EducationLevel(str, Enum):
    high_school = "high-school"
    undergraduate = "undergraduate"
    graduate = "graduate"
    postgraduate = "postgraduate"


class OpenTo(str, Enum):
    paid = "paid"
    unpaid = "unpaid"
    both = "both"


class InternshipType(str, Enum):
    paid = "paid"
    unpaid = "unpaid"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    user_type: UserType

    normalize_email = field_validator("email")(_lower_email)


class SigninRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    normalize_email = field_validator("email")(_lower_email)


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    user_type: UserType
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    message: str
    user: UserResponse
    token: str


class MeResponse(CamelModel):
    user: UserResponse


# ============================================================
# INTERN SCHEMAS
# ============================================================

class InternProfileCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    education: EducationLevel
    skills: List[SkillName] = Field(..., min_length=1)
    desired_role: str = Field(..., min_length=1)
    open_to: OpenTo
    cv_base64: Optional[str] = None
    cv_file_name: Optional[str] = None

    normalize_email = field_validator("email")(_lower_email)

    @field_validator("cv_base64")
    @classmethod
    def validate_cv(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        return normalize_cv_base64(value)

    @field_validator("cv_file_name")
    @classmethod
    def validate_cv_file_name(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if has_control_chars(value):
            raise ValueError("CV file name contains control characters")
        if not is_allowed_cv_filename(value):
            raise ValueError("CV must be a .pdf, .doc or .docx file")
        return value


class InternProfileResponse(CamelModel):
    id: str
    user_id: int
    name: str
    email: str
    education: EducationLevel
    skills: List[str]
    desired_role: str
    open_to: OpenTo
    has_cv: bool = False
    cv_file_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class InternProfileEnvelope(CamelModel):
    message: Optional[str] = None
    profile: InternProfileResponse


# ============================================================
# ORGANIZATION SCHEMAS
# ============================================================

class OrganizationRoleCreate(CamelModel):
    org_name: str = Field(..., min_length=2, max_length=200)
    org_email: EmailStr
    role_title: str = Field(..., min_length=1, max_length=200)
    job_description: str = Field(..., min_length=10)
    required_skills: List[SkillName] = Field(..., min_length=1)
    internship_type: InternshipType
    location: Optional[str] = None
    duration: Optional[str] = None

    normalize_email = field_validator("org_email")(_lower_email)


class OrganizationRoleResponse(CamelModel):
    id: str
    user_id: int
    org_name: str
    org_email: str
    role_title: str
    job_description: str
    required_skills: List[str]
    internship_type: InternshipType
    location: Optional[str] = None
    duration: Optional[str] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class OrganizationRoleEnvelope(CamelModel):
    message: str
    role: OrganizationRoleResponse


class OrganizationRoleListResponse(CamelModel):
    roles: List[OrganizationRoleResponse]


# ============================================================
# JOB BOARD SCHEMAS
# ============================================================

class JobPosting(CamelModel):
    id: str
    title: str
    company: str
    location: str
    type: OpenTo
    description: str
    full_description: str
    skills: List[str]
    posted_date: str
    duration: str
    applicants: int


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class JobListResponse(CamelModel):
    jobs: List[JobPosting]
    pagination: Pagination


# ============================================================
# MATCHING SCHEMAS
# ============================================================

class MatchedIntern(CamelModel):
    id: str
    user_id: int
    name: str
    email: str
    education: EducationLevel
    skills: List[str]
    desired_role: str
    open_to: OpenTo
    match_score: int
    matching_skills: List[str]
    created_at: datetime


class MatchingResponse(CamelModel):
    interns: List[MatchedIntern]
    total: int
    required_skills: List[str]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[List[FieldError]] = None
