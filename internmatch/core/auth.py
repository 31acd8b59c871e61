"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError as PydanticValidationError

from internmatch.core.config import get_settings
from internmatch.core.errors import AuthenticationError, AuthorizationError
from internmatch.schemas.schemas import UserType

settings = get_settings()

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# Declared for the OpenAPI docs; the header itself is parsed by extract_bearer_token
bearer_scheme = HTTPBearer(auto_error=False)


class TokenPayload(BaseModel):
    """Claims carried by a verified access token."""
    user_id: int
    email: str
    user_type: UserType


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash. Unrecognised hashes never verify."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(user_id: int, email: str, user_type: str,
                        expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token for an account (7 days by default)."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "user_type": user_type,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[TokenPayload]:
    """
    Decode and verify JWT token.

    Returns None for any failure: bad signature, expired, malformed,
    or missing claims.
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return TokenPayload(
            user_id=claims.get("sub"),
            email=claims.get("email"),
            user_type=claims.get("user_type"),
        )
    except (JWTError, PydanticValidationError):
        return None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an `Authorization: Bearer <token>` header."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None


async def get_token_payload(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> TokenPayload:
    """
    FastAPI dependency - Get the verified token claims.

    Usage:
        @router.get("/protected")
        async def route(user: TokenPayload = Depends(get_token_payload)):
            return user
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise AuthenticationError("No token provided")

    payload = decode_token(token)
    if payload is None:
        raise AuthenticationError("Invalid token")
    return payload


def require_user_type(user_type: UserType, message: str = "Forbidden"):
    """
    Dependency factory - Require a given account type.

    Usage:
        @router.post("/role")
        async def route(user: TokenPayload = Depends(require_user_type(UserType.organization))):
            ...
    """
    async def dependency(user: TokenPayload = Depends(get_token_payload)) -> TokenPayload:
        if user.user_type != user_type:
            raise AuthorizationError(message)
        return user
    return dependency


def ensure_user_type(user: TokenPayload, user_type: UserType, message: str = "Forbidden") -> None:
    """Inline variant of require_user_type for checks that must run later in a handler."""
    if user.user_type != user_type:
        raise AuthorizationError(message)
