# app/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_db, get_settings
from app.core.security import (
    create_access_token,
    create_refresh_token,
    get_current_user,
    parse_user_id,
    verify_refresh_token,
)
from app.services.user_auth import user_auth_service
from app.models.user_auth import UserAuth
from app.schemas.user_auth import (
    LoginRequest,
    TokenResponse,
    RefreshTokenRequest,
    UserAuthCreate,
    UserAuthOut,
)

router = APIRouter(prefix="/auth", tags=["User Authentication"])


def _issue_tokens(user: UserAuth, app_settings: Settings) -> TokenResponse:
    claims = {"sub": str(user.id)}
    return TokenResponse(
        access_token=create_access_token(claims, app_settings),
        refresh_token=create_refresh_token(claims, app_settings),
        user=UserAuthOut.model_validate(user),
    )


# =====================================================================
# PUBLIC ENDPOINTS - No authentication required
# =====================================================================

@router.post(
    "/register",
    response_model=UserAuthOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account"
)
def register(
    user_data: UserAuthCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    - **email**: Valid email address (required)
    - **password**: At least 8 characters with a letter and a digit (required)
    - **username**: Optional display name
    """
    return user_auth_service.register_user(db, user_data)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login to get access token"
)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings)
):
    """
    Authenticate user and receive access and refresh tokens.

    **Note**: Account will be locked for 30 minutes after 5 failed attempts.
    """
    user = user_auth_service.authenticate_user(db, login_data)
    return _issue_tokens(user, app_settings)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    summary="Exchange a refresh token for a new token pair"
)
def refresh(
    token_data: RefreshTokenRequest,
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings)
):
    user_id = verify_refresh_token(token_data.refresh_token, app_settings)
    user = user_auth_service.get_active_user(db, parse_user_id(user_id))
    return _issue_tokens(user, app_settings)


# =====================================================================
# AUTHENTICATED ENDPOINTS
# =====================================================================

@router.get(
    "/me",
    response_model=UserAuthOut,
    summary="Get current user"
)
def get_me(current_user: UserAuth = Depends(get_current_user)):
    return current_user
