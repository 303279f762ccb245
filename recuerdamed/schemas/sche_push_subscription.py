from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PushSubscriptionKeys(BaseModel):
    model_config = ConfigDict(extra='forbid')

    p256dh: str = Field(..., min_length=1)
    auth: str = Field(..., min_length=1)


class PushSubscriptionRequest(BaseModel):
    """Body produced by the browser's PushSubscription.toJSON()."""
    model_config = ConfigDict(extra='forbid')

    endpoint: str = Field(..., min_length=1, max_length=2048)
    expiration_time: Optional[float] = Field(None, alias='expirationTime')
    keys: PushSubscriptionKeys


class PushSubscriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subscription_id: int
    user_id: int
    endpoint: str
    created_at: datetime
