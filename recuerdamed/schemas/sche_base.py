from datetime import datetime, timezone
from typing import Annotated, Optional, TypeVar, Generic

from pydantic import AfterValidator, BaseModel

T = TypeVar("T")


def to_naive_utc(value: datetime) -> datetime:
    """Timestamps are stored as naive UTC; aware input is converted, naive input is taken as UTC."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


class ResponseSchemaBase(BaseModel):
    success: bool = True
    code: str = ''
    message: str = ''

    def custom_response(self, code: str, message: str):
        self.success = code.startswith('2')
        self.code = code
        self.message = message
        return self

    def success_response(self):
        self.success = True
        self.code = '200'
        self.message = 'Success'
        return self


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = ''
    data: Optional[T] = None

    def custom_response(self, success: bool, message: str, data: T):
        self.success = success
        self.message = message
        self.data = data
        return self

    def success_response(self, data: T):
        self.success = True
        self.message = 'Success'
        self.data = data
        return self


class MetadataSchema(BaseModel):
    current_page: int
    page_size: int
    total_items: int
