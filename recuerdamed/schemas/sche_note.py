from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    profile_id: int = Field(..., gt=0)
    content: str = Field(..., min_length=1)


class NoteUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    content: Optional[str] = Field(None, min_length=1)


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    note_id: int
    profile_id: int
    author_id: Optional[int] = None
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
