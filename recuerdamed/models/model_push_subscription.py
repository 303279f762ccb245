from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from recuerdamed.models.model_base import Base


class PushSubscription(Base):
    __tablename__ = "push_subscription"

    subscription_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    endpoint = Column(String(2048), unique=True, nullable=False)
    p256dh = Column(String(255), nullable=False)
    auth = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=func.now())
