from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from recuerdamed.db.base import get_db
from recuerdamed.models.model_patient_profile import PatientProfile


class PatientProfileRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def create_profile(self, profile_data: PatientProfile) -> PatientProfile:
        self.db.add(profile_data)
        self.db.commit()
        self.db.refresh(profile_data)
        return profile_data

    def get_by_id(self, profile_id: int) -> Optional[PatientProfile]:
        return self.db.query(PatientProfile).filter(PatientProfile.profile_id == profile_id).first()

    def get_profile_by_patient_id(self, patient_id: int) -> Optional[PatientProfile]:
        return self.db.query(PatientProfile).filter(PatientProfile.patient_id == patient_id).first()

    def update_profile(self, profile: PatientProfile) -> PatientProfile:
        self.db.commit()
        self.db.refresh(profile)
        return profile
