from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from recuerdamed.helpers.enums import UserRole
from recuerdamed.schemas.sche_caregiver_invite import normalize_invite_code


class UserItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    full_name: Optional[str] = None
    email: EmailStr
    role: UserRole
    is_active: bool


class UserRegisterRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    full_name: Optional[str] = Field(None, max_length=255)
    role: UserRole = UserRole.PATIENT

    # Caregivers may join a patient while registering
    invite_code: Optional[str] = None

    @field_validator('invite_code')
    @classmethod
    def validate_invite_code(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return normalize_invite_code(value)


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'
    user: UserItemResponse
    profile_id: Optional[int] = None
