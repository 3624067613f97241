"""User domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel


class UserUpsert(BaseModel):
    """
    Profile fields accepted on upsert.
    Unknown keys (including "role") are ignored, so callers cannot grant themselves admin.
    """

    name: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    role: Optional[str] = None

    class Config:
        from_attributes = True


class UpdateResult(BaseModel):
    """Acknowledgement of a single-record update or upsert"""

    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedCount: int = 0


class UpsertUserResponse(BaseModel):
    result: UpdateResult
    token: str


class AdminStatusResponse(BaseModel):
    admin: bool
