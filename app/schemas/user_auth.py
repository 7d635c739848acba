# schemas/user_auth.py
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID
import enum


# =====================================================================
# ENUMS
# =====================================================================

class Status(str, enum.Enum):
    active = "active"
    suspended = "suspended"
    deactivated = "deactivated"


# =====================================================================
# 1. BASE SCHEMAS
# =====================================================================

class UserAuthBase(BaseModel):
    """Base read schema with common public fields."""
    username: Optional[str] = Field(None, max_length=50)
    email: EmailStr


# =====================================================================
# 2. CREATE SCHEMAS
# =====================================================================

class UserAuthCreate(UserAuthBase):
    """Public registration payload."""
    password: str = Field(..., min_length=8, max_length=72)

    @field_validator('password')
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not any(c.isalpha() for c in v):
            raise ValueError('Password must contain at least one letter')
        if not any(c.isdigit() for c in v):
            raise ValueError('Password must contain at least one digit')
        return v


# =====================================================================
# 3. READ SCHEMAS
# =====================================================================

class UserAuthOut(UserAuthBase):
    """Public view of an account."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    status: Status
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


# =====================================================================
# 4. AUTH SCHEMAS
# =====================================================================

class LoginRequest(BaseModel):
    """User login request."""
    email: EmailStr
    password: str = Field(..., min_length=1)

class TokenResponse(BaseModel):
    """Authentication token response."""
    access_token: str
    token_type: str = "bearer"
    refresh_token: str
    user: UserAuthOut

class RefreshTokenRequest(BaseModel):
    """Refresh token request."""
    refresh_token: str

# =====================================================================
# RESPONSE WRAPPERS
# =====================================================================

class SuccessResponse(BaseModel):
    """Generic success response."""
    success: bool = True
    message: str
