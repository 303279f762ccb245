from typing import Any

from fastapi import APIRouter, Depends, Query

from recuerdamed.helpers.login_manager import login_required
from recuerdamed.schemas.sche_base import DataResponse
from recuerdamed.schemas.sche_push_subscription import PushSubscriptionRequest, PushSubscriptionResponse
from recuerdamed.schemas.sche_token import CurrentUser
from recuerdamed.services.srv_push_subscription import PushSubscriptionService

router = APIRouter()


@router.post('', status_code=201, response_model=DataResponse[PushSubscriptionResponse])
def subscribe(
    subscription_data: PushSubscriptionRequest,
    subscription_service: PushSubscriptionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    return DataResponse().success_response(data=subscription_service.subscribe(subscription_data, current_user))


@router.delete('', response_model=DataResponse[None])
def unsubscribe(
    endpoint: str = Query(..., min_length=1),
    subscription_service: PushSubscriptionService = Depends(),
    current_user: CurrentUser = Depends(login_required)
) -> Any:
    subscription_service.unsubscribe(endpoint, current_user)
    return DataResponse().success_response(data=None)
