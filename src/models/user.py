"""
User-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel

class User(BaseModel):
    id: int
    name: str
    username: str
    email: str

class UserCreateRequest(BaseModel):
    name: str
    username: str
    email: str

class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
