from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from recuerdamed.models.model_base import Base


class CaregiverInvite(Base):
    __tablename__ = "caregiver_invite"

    invite_id = Column(Integer, primary_key=True, index=True)
    code = Column(String(16), unique=True, nullable=False, index=True)
    profile_id = Column(Integer, ForeignKey("patient_profile.profile_id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    used = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=func.now())
