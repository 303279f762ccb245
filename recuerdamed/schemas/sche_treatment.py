from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TreatmentCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    progress: Optional[str] = None


class TreatmentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    progress: Optional[str] = None


class TreatmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    treatment_id: int
    profile_id: int
    title: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    progress: Optional[str] = None
    created_at: Optional[datetime] = None
