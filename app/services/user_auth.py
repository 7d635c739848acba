# services/user_auth.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import (
    AccountLockedError,
    ConflictError,
    ForbiddenError,
    UnauthorizedError,
)
from app.models.user_auth import UserAuth, Status
from app.schemas.user_auth import UserAuthCreate, LoginRequest
from app.crud.user_auth import crud_user_auth

logger = logging.getLogger(__name__)


# =====================================================================
# SERVICE CLASS
# =====================================================================


class UserAuthService:
    """Service layer for registration and login."""

    def __init__(self):
        self.crud = crud_user_auth

    # =====================================================================
    # USER REGISTRATION
    # =====================================================================

    def register_user(self, db: Session, user_data: UserAuthCreate) -> UserAuth:
        """
        Public user registration.

        Raises:
            ConflictError: If the email is already registered
        """
        if self.crud.get_by_email(db, email=user_data.email):
            raise ConflictError("Email already registered")

        user = self.crud.create(db, obj_in=user_data)
        logger.info("Registered user %s", user.id)
        return user

    # =====================================================================
    # AUTHENTICATION & LOGIN
    # =====================================================================

    def authenticate_user(self, db: Session, login_data: LoginRequest) -> UserAuth:
        """
        Authenticate user with email and password.

        Args:
            db: Database session
            login_data: Login credentials

        Returns:
            Authenticated UserAuth instance

        Raises:
            UnauthorizedError: If credentials are invalid
            AccountLockedError: If account is locked
            ForbiddenError: If account is not active
        """
        user = self.crud.get_by_email(db, email=login_data.email)
        if not user:
            raise UnauthorizedError("Invalid email or password")

        if self.crud.is_account_locked(user):
            raise AccountLockedError(f"Account is locked until {user.lockout_until}")

        if user.status != Status.active:
            raise ForbiddenError(f"Account is {user.status.value}")

        if not self.crud.verify_password(login_data.password, user.password_hash):
            self.crud.increment_failed_attempts(db, user)
            logger.warning(
                "Failed login for user %s (%s attempts)", user.id, user.failed_login_attempts
            )
            raise UnauthorizedError("Invalid email or password")

        self.crud.reset_failed_attempts(db, user)
        return user

    def get_active_user(self, db: Session, user_id) -> UserAuth:
        """Resolve a refresh-token subject to an active account."""
        user = self.crud.get(db, id=user_id)
        if not user:
            raise UnauthorizedError("User not found")
        if user.status != Status.active:
            raise ForbiddenError(f"Account is {user.status.value}")
        return user


# =====================================================================
# SINGLETON INSTANCE
# =====================================================================

user_auth_service = UserAuthService()
