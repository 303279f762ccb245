import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recuerdamed.core.config import settings


def invite_code_pattern(length: int) -> re.Pattern:
    return re.compile(rf'^[A-Z0-9]{{{length}}}$')


def normalize_invite_code(value: str) -> str:
    code = value.strip().upper()
    if not invite_code_pattern(settings.INVITE_CODE_LENGTH).match(code):
        raise ValueError(f'invite code must be {settings.INVITE_CODE_LENGTH} letters or digits')
    return code


class CaregiverInviteCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)


class CaregiverInviteAcceptRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    code: str

    @field_validator('code')
    @classmethod
    def validate_code(cls, value: str) -> str:
        return normalize_invite_code(value)


class CaregiverInviteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    invite_id: int
    code: str
    profile_id: int
    expires_at: datetime
    used: bool
    created_at: datetime
