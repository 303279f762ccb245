from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recuerdamed.helpers.enums import PermissionLevel


class PermissionCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)
    caregiver_id: int = Field(..., gt=0)
    level: PermissionLevel = PermissionLevel.READ


class PermissionUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    level: PermissionLevel


class PermissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    permission_id: int
    profile_id: int
    caregiver_id: int
    level: PermissionLevel
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CaregiverPatientResponse(BaseModel):
    """A patient profile as seen from the caregiver side."""
    profile_id: int
    name: Optional[str] = None
    level: PermissionLevel
