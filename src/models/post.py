"""
Post-related Pydantic models

The author reference travels as "userId" on the wire.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    title: str

class PostCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    title: str

class PostUpdateRequest(BaseModel):
    # userId is fixed at creation; unknown keys are ignored
    title: Optional[str] = None
