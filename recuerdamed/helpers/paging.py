import logging
from pydantic import BaseModel, Field
from typing import Optional, Generic, TypeVar, List

from sqlalchemy import asc, desc, inspect
from sqlalchemy.orm import Query

from recuerdamed.helpers.exception_handler import ValidationException
from recuerdamed.schemas.sche_base import MetadataSchema

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PaginationParams(BaseModel):
    page_size: int = Field(10, gt=0, lt=1001)
    page: int = Field(1, gt=0)
    sort_by: Optional[str] = 'created_at'
    order: Optional[str] = 'desc'


class Page(BaseModel, Generic[T]):
    success: bool = True
    message: str = ''
    data: List[T]
    metadata: MetadataSchema

    @classmethod
    def create(cls, message: str, data: List[T], metadata: MetadataSchema) -> "Page[T]":
        return cls(
            success=True,
            message=message,
            data=data,
            metadata=metadata
        )


def paginate(model, query: Query, params: PaginationParams) -> Page:
    total = query.count()

    if params.order:
        direction = desc if params.order == 'desc' else asc
        mapper = inspect(model)
        if params.sort_by:
            if params.sort_by not in mapper.columns.keys():
                logger.debug(f"Rejecting unknown sort field {params.sort_by} for {model.__name__}")
                raise ValidationException(message=f"Cannot sort by '{params.sort_by}'")
            query = query.order_by(direction(mapper.columns[params.sort_by]), direction(mapper.primary_key[0]))

    data = query.limit(params.page_size).offset(params.page_size * (params.page - 1)).all()

    metadata = MetadataSchema(
        current_page=params.page,
        page_size=params.page_size,
        total_items=total
    )

    return Page.create('Success', data, metadata)
