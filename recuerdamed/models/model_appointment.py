from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, func
from recuerdamed.models.model_base import Base


class Appointment(Base):
    __tablename__ = "appointment"

    appointment_id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("patient_profile.profile_id", ondelete="CASCADE"), nullable=False, index=True)
    caregiver_id = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"))
    title = Column(String(255), nullable=False)
    description = Column(Text)
    date_time = Column(DateTime, nullable=False)
    location = Column(String(255))
    status = Column(String(20), nullable=False, default='SCHEDULED')
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
