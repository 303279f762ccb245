from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recuerdamed.helpers.enums import MedicationFrequency
from recuerdamed.schemas.sche_base import UtcDatetime


class MedicationCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    dosage: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    frequency: MedicationFrequency
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    notes: Optional[str] = None


class MedicationUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    dosage: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    frequency: Optional[MedicationFrequency] = None
    start_date: Optional[UtcDatetime] = None
    end_date: Optional[UtcDatetime] = None
    notes: Optional[str] = None


class MedicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    medication_id: int
    profile_id: int
    name: str
    dosage: str
    type: str
    frequency: MedicationFrequency
    start_date: datetime
    end_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
