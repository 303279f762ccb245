from typing import Optional

from pydantic import BaseModel

from recuerdamed.helpers.enums import UserRole


class Token(BaseModel):
    access_token: str
    token_type: str = 'bearer'
    role: UserRole
    profile_id: Optional[int] = None


class TokenPayload(BaseModel):
    sub: str
    role: UserRole
    profile_id: Optional[int] = None
    exp: int


class CurrentUser(BaseModel):
    """Authenticated caller identity handed to every service operation."""
    user_id: int
    email: str
    role: UserRole
    profile_id: Optional[int] = None

    @property
    def is_patient(self) -> bool:
        return self.role == UserRole.PATIENT

    @property
    def is_caregiver(self) -> bool:
        return self.role == UserRole.CAREGIVER
