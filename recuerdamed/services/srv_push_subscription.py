import logging
from fastapi import Depends

from recuerdamed.helpers.exception_handler import ConflictException, NotFoundException
from recuerdamed.models.model_push_subscription import PushSubscription
from recuerdamed.repository.repo_push_subscription import PushSubscriptionRepository
from recuerdamed.schemas.sche_push_subscription import PushSubscriptionRequest
from recuerdamed.schemas.sche_token import CurrentUser

logger = logging.getLogger(__name__)


class PushSubscriptionService:
    def __init__(self, subscription_repo: PushSubscriptionRepository = Depends()):
        self.subscription_repo = subscription_repo

    def subscribe(self, data: PushSubscriptionRequest, current_user: CurrentUser) -> PushSubscription:
        """Store the caller's subscription; re-posting an endpoint the caller already owns refreshes its keys."""
        existing = self.subscription_repo.get_by_endpoint(data.endpoint)
        if existing and existing.user_id != current_user.user_id:
            logger.warning(f"user_id={current_user.user_id} tried to register an endpoint owned by another user")
            raise ConflictException(message="Subscription endpoint is already registered")

        subscription = self.subscription_repo.upsert(
            user_id=current_user.user_id,
            endpoint=data.endpoint,
            p256dh=data.keys.p256dh,
            auth=data.keys.auth,
        )
        logger.info(f"Push subscription {subscription.subscription_id} stored for user_id={current_user.user_id}")
        return subscription

    def unsubscribe(self, endpoint: str, current_user: CurrentUser) -> None:
        subscription = self.subscription_repo.get_by_endpoint(endpoint)
        if not subscription or subscription.user_id != current_user.user_id:
            raise NotFoundException(message="Subscription not found")
        self.subscription_repo.delete(subscription)
