from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text, func
from recuerdamed.models.model_base import Base


class Treatment(Base):
    __tablename__ = "treatment"

    treatment_id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("patient_profile.profile_id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)
    progress = Column(Text)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
