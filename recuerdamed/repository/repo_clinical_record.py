from typing import Any, Dict, Optional, Type
from fastapi import Depends
from sqlalchemy.orm import Session, Query
from recuerdamed.db.base import get_db
from recuerdamed.models.model_base import Base
from recuerdamed.models.model_medication import Medication
from recuerdamed.models.model_appointment import Appointment
from recuerdamed.models.model_treatment import Treatment
from recuerdamed.models.model_note import Note


class ClinicalRecordRepository:
    """CRUD over one clinical entity type, always scoped by patient profile."""
    model: Type[Base]
    id_field: str

    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    def query_by_profile(self, profile_id: int) -> Query:
        return self.db.query(self.model).filter(self.model.profile_id == profile_id)

    def get_by_id(self, record_id: int) -> Optional[Any]:
        return self.db.query(self.model).filter(self.id_column == record_id).first()

    def create(self, values: Dict[str, Any]) -> Any:
        record = self.model(**values)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def update(self, record: Any, values: Dict[str, Any]) -> Any:
        for field, value in values.items():
            setattr(record, field, value)
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete(self, record: Any) -> None:
        self.db.delete(record)
        self.db.commit()


class MedicationRepository(ClinicalRecordRepository):
    model = Medication
    id_field = 'medication_id'

    def list_starting_between(self, profile_id: int, start, end):
        return self.query_by_profile(profile_id).filter(
            Medication.start_date >= start,
            Medication.start_date < end
        ).order_by(Medication.start_date).all()


class AppointmentRepository(ClinicalRecordRepository):
    model = Appointment
    id_field = 'appointment_id'

    def list_between(self, profile_id: int, start, end):
        return self.query_by_profile(profile_id).filter(
            Appointment.date_time >= start,
            Appointment.date_time < end
        ).order_by(Appointment.date_time).all()


class TreatmentRepository(ClinicalRecordRepository):
    model = Treatment
    id_field = 'treatment_id'


class NoteRepository(ClinicalRecordRepository):
    model = Note
    id_field = 'note_id'
