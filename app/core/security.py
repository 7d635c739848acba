# app/core/security.py
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.config import Settings, get_db, get_settings
from app.crud.user_auth import crud_user_auth
from app.models.user_auth import UserAuth, Status


# =====================================================================
# JWT TOKEN CONFIGURATION
# =====================================================================

security = HTTPBearer()


# =====================================================================
# TOKEN CREATION
# =====================================================================

def _create_token(
    data: dict, secret_key: str, algorithm: str, expires: timedelta, token_type: str
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + expires
    to_encode.update({"exp": expire, "type": token_type})
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def create_access_token(data: dict, app_settings: Settings) -> str:
    """
    Create JWT access token.

    Args:
        data: Dictionary containing user data (typically {"sub": user_id})
        app_settings: Settings holding the signing key and lifetime

    Returns:
        Encoded JWT access token
    """
    return _create_token(
        data,
        app_settings.SECRET_KEY,
        app_settings.ALGORITHM,
        timedelta(minutes=app_settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        "access",
    )


def create_refresh_token(data: dict, app_settings: Settings) -> str:
    """Create JWT refresh token."""
    return _create_token(
        data,
        app_settings.REFRESH_SECRET_KEY,
        app_settings.ALGORITHM,
        timedelta(days=app_settings.REFRESH_TOKEN_EXPIRE_DAYS),
        "refresh",
    )


# =====================================================================
# TOKEN VERIFICATION
# =====================================================================

def verify_token(token: str, secret_key: str, algorithm: str, token_type: str = "access") -> str:
    """
    Verify JWT token and return user_id.

    Args:
        token: JWT token string
        secret_key: Secret key for decoding
        algorithm: Signing algorithm
        token_type: Type of token ("access" or "refresh")

    Returns:
        User ID from token

    Raises:
        HTTPException: If token is invalid, expired or of the wrong type
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        raise credentials_exception

    user_id = payload.get("sub")
    if user_id is None:
        raise credentials_exception

    if payload.get("type") != token_type:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token type. Expected {token_type}",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user_id


def verify_access_token(token: str, app_settings: Settings) -> str:
    return verify_token(token, app_settings.SECRET_KEY, app_settings.ALGORITHM, "access")


def verify_refresh_token(token: str, app_settings: Settings) -> str:
    return verify_token(token, app_settings.REFRESH_SECRET_KEY, app_settings.ALGORITHM, "refresh")


def parse_user_id(user_id: str) -> UUID:
    try:
        return UUID(user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


# =====================================================================
# USER AUTHENTICATION DEPENDENCIES
# =====================================================================

async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
) -> UserAuth:
    """
    Get current authenticated user from JWT token.

    Raises:
        HTTPException: If token is invalid, the user is gone or the account is not active
    """
    user_id = verify_access_token(credentials.credentials, app_settings)

    user = crud_user_auth.get(db, id=parse_user_id(user_id))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.status != Status.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Account is {user.status.value}",
        )

    return user
