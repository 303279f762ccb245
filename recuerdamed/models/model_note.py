from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, func
from recuerdamed.models.model_base import Base


class Note(Base):
    __tablename__ = "note"

    note_id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("patient_profile.profile_id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"))
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
