"""Service catalog schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_non_blank


class ServiceCreate(BaseModel):
    """Schema for loading a treatment into the catalog"""

    name: str
    slots: list[str] = []
    price: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_non_blank(v)


class ServiceName(BaseModel):
    """Name projection of a catalog entry"""

    id: int
    name: str

    class Config:
        from_attributes = True


class AvailableService(BaseModel):
    """A treatment with the slots still open on the requested date"""

    id: int
    name: str
    slots: list[str]
    price: Optional[int] = None
