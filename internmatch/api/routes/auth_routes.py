"""
Authentication Routes

POST /auth/signup - Create account, returns token
POST /auth/signin - Login and get JWT token
GET /auth/me - Get current user info
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text

from internmatch.db.postgres import get_db_session
from internmatch.core.auth import (
    TokenPayload, hash_password, verify_password, create_access_token, get_token_payload
)
from internmatch.core.errors import AuthenticationError, ConflictError, NotFoundError
from internmatch.schemas.schemas import (
    SignupRequest, SigninRequest, AuthResponse, MeResponse, UserResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

USER_COLUMNS = "user_id, name, email, user_type, created_at, updated_at"


def _user_from_row(row) -> UserResponse:
    return UserResponse(
        id=row.user_id, name=row.name, email=row.email, user_type=row.user_type,
        created_at=row.created_at, updated_at=row.updated_at
    )


def _issue_token(user: UserResponse) -> str:
    return create_access_token(user.id, user.email, user.user_type.value)


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(request: SignupRequest):
    """
    Register a new intern or organization account.

    The response carries a token, so no separate signin is needed.
    """
    with get_db_session() as db:
        # Check email exists (emails are stored lowercase)
        result = db.execute(
            text("SELECT user_id FROM users WHERE email = :email"),
            {"email": request.email}
        )
        if result.fetchone():
            raise ConflictError("User with this email already exists")

        # Create user
        result = db.execute(
            text(f"""
                INSERT INTO users (name, email, password_hash, user_type)
                VALUES (:name, :email, :password_hash, :user_type)
                RETURNING {USER_COLUMNS}
            """),
            {
                "name": request.name,
                "email": request.email,
                "password_hash": hash_password(request.password),
                "user_type": request.user_type.value
            }
        )
        user = _user_from_row(result.fetchone())

    logger.info("Created %s account %s", user.user_type.value, user.id)
    return AuthResponse(message="User created successfully", user=user, token=_issue_token(user))


@router.post("/signin", response_model=AuthResponse)
async def signin(request: SigninRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    with get_db_session() as db:
        result = db.execute(
            text(f"SELECT {USER_COLUMNS}, password_hash FROM users WHERE email = :email"),
            {"email": request.email}
        )
        row = result.fetchone()

    if not row or not verify_password(request.password, row.password_hash):
        raise AuthenticationError("Invalid email or password")

    user = _user_from_row(row)
    return AuthResponse(message="Login successful", user=user, token=_issue_token(user))


@router.get("/me", response_model=MeResponse)
async def get_me(payload: TokenPayload = Depends(get_token_payload)):
    """Get current authenticated user's info."""
    with get_db_session() as db:
        result = db.execute(
            text(f"SELECT {USER_COLUMNS} FROM users WHERE user_id = :id"),
            {"id": payload.user_id}
        )
        row = result.fetchone()

    if not row:
        raise NotFoundError("User not found")

    return MeResponse(user=_user_from_row(row))
