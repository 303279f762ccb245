from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from recuerdamed.models.model_base import Base


class Permission(Base):
    __tablename__ = "permission"
    __table_args__ = (
        UniqueConstraint("profile_id", "caregiver_id", name="uq_permission_profile_caregiver"),
    )

    permission_id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("patient_profile.profile_id", ondelete="CASCADE"), nullable=False)
    caregiver_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    level = Column(String(10), nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    profile = relationship("PatientProfile", foreign_keys=[profile_id], lazy="joined")
