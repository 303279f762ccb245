from sqlalchemy import Column, String, Integer, Date, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from recuerdamed.models.model_base import Base


class PatientProfile(Base):
    __tablename__ = "patient_profile"

    profile_id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False)
    name = Column(String(255))
    age = Column(Integer)
    date_of_birth = Column(Date)
    gender = Column(String(20))
    blood_type = Column(String(10))
    conditions = Column(Text)
    allergies = Column(Text)
    contraindications = Column(Text)
    doctor_name = Column(String(255))
    doctor_contact = Column(String(255))
    photo_url = Column(String(1024))
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    patient = relationship("User", foreign_keys=[patient_id], lazy="joined")
