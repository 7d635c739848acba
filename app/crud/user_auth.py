# crud/user_auth.py
from typing import Optional
from uuid import UUID
from datetime import datetime, timezone, timedelta
from sqlalchemy.orm import Session
from passlib.context import CryptContext

from app.models.user_auth import UserAuth, Status
from app.schemas.user_auth import UserAuthCreate

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

MAX_FAILED_ATTEMPTS = 5
LOCKOUT_DURATION = timedelta(minutes=30)


class UserAuthCRUD:
    """CRUD operations for UserAuth model."""

    # =====================================================================
    # HELPER METHODS
    # =====================================================================

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def is_account_locked(user: UserAuth) -> bool:
        """Check if account is locked."""
        if not user.lockout_until:
            return False
        lockout_until = user.lockout_until
        if lockout_until.tzinfo is None:
            lockout_until = lockout_until.replace(tzinfo=timezone.utc)
        return lockout_until > datetime.now(timezone.utc)

    @staticmethod
    def reset_failed_attempts(db: Session, user: UserAuth) -> None:
        """Reset failed login attempts and stamp the login time."""
        user.failed_login_attempts = 0
        user.lockout_until = None
        user.last_login_at = datetime.now(timezone.utc)
        db.commit()

    @staticmethod
    def increment_failed_attempts(
        db: Session, user: UserAuth, max_attempts: int = MAX_FAILED_ATTEMPTS
    ) -> None:
        """Increment failed login attempts and lock account if needed."""
        user.failed_login_attempts = (user.failed_login_attempts or 0) + 1

        if user.failed_login_attempts >= max_attempts:
            user.lockout_until = datetime.now(timezone.utc) + LOCKOUT_DURATION

        db.commit()

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, obj_in: UserAuthCreate) -> UserAuth:
        """
        Create a new user.

        Args:
            db: Database session
            obj_in: UserAuthCreate schema with the plain password

        Returns:
            Created UserAuth instance
        """
        db_obj = UserAuth(
            username=obj_in.username,
            email=obj_in.email.lower(),
            password_hash=self.hash_password(obj_in.password),
            status=Status.active,
        )

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: UUID) -> Optional[UserAuth]:
        """Get user by ID."""
        return db.query(UserAuth).filter(UserAuth.id == id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[UserAuth]:
        """Get user by email (case-insensitive)."""
        return db.query(UserAuth).filter(UserAuth.email == email.lower()).first()


# Create singleton instance
crud_user_auth = UserAuthCRUD()
