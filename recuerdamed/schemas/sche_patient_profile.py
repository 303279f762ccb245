from datetime import date, datetime
from typing import Optional, List, Dict

from pydantic import BaseModel, ConfigDict, Field

from recuerdamed.helpers.enums import Gender


class PatientProfileBase(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[int] = Field(None, ge=0)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    blood_type: Optional[str] = Field(None, max_length=10)
    conditions: Optional[str] = None
    allergies: Optional[str] = None
    contraindications: Optional[str] = None
    doctor_name: Optional[str] = None
    doctor_contact: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=1024)


class PatientProfileSaveRequest(PatientProfileBase):
    model_config = ConfigDict(extra='forbid')


class PatientProfileUpdateRequest(PatientProfileBase):
    model_config = ConfigDict(extra='forbid')


class PatientProfileResponse(PatientProfileBase):
    model_config = ConfigDict(from_attributes=True)

    profile_id: int
    patient_id: int
    updated_at: Optional[datetime] = None


class CalendarMedicationItem(BaseModel):
    medication_id: int
    name: str
    time: str
    dosage: str
    type: str


class CalendarAppointmentItem(BaseModel):
    appointment_id: int
    title: str
    time: str
    location: Optional[str] = None
    status: str


class CalendarDay(BaseModel):
    medications: List[CalendarMedicationItem] = []
    appointments: List[CalendarAppointmentItem] = []


class CalendarResponse(BaseModel):
    profile_id: int
    year: int
    month: int
    days: Dict[str, CalendarDay] = {}
