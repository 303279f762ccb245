from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recuerdamed.helpers.enums import AppointmentStatus
from recuerdamed.schemas.sche_base import UtcDatetime


class AppointmentCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    date_time: UtcDatetime
    location: Optional[str] = Field(None, max_length=255)
    status: AppointmentStatus = AppointmentStatus.SCHEDULED


class AppointmentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    date_time: Optional[UtcDatetime] = None
    location: Optional[str] = Field(None, max_length=255)
    status: Optional[AppointmentStatus] = None


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    appointment_id: int
    profile_id: int
    caregiver_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    date_time: datetime
    location: Optional[str] = None
    status: AppointmentStatus
    created_at: Optional[datetime] = None
