from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from recuerdamed.db.base import get_db
from recuerdamed.models.model_push_subscription import PushSubscription


class PushSubscriptionRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_by_endpoint(self, endpoint: str) -> Optional[PushSubscription]:
        return self.db.query(PushSubscription).filter(PushSubscription.endpoint == endpoint).first()

    def upsert(self, user_id: int, endpoint: str, p256dh: str, auth: str) -> PushSubscription:
        subscription = self.get_by_endpoint(endpoint)
        if subscription:
            subscription.p256dh = p256dh
            subscription.auth = auth
        else:
            subscription = PushSubscription(user_id=user_id, endpoint=endpoint, p256dh=p256dh, auth=auth)
            self.db.add(subscription)
        self.db.commit()
        self.db.refresh(subscription)
        return subscription

    def delete(self, subscription: PushSubscription) -> None:
        self.db.delete(subscription)
        self.db.commit()
