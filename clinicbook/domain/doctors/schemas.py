"""Doctor domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_non_blank


class DoctorCreate(BaseModel):
    """Schema for creating a doctor"""

    name: str
    email: str
    specialty: Optional[str] = None
    img: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v: str) -> str:
        return validate_email(validate_non_blank(v))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_non_blank(v)


class DoctorResponse(BaseModel):
    id: int
    name: str
    email: str
    specialty: Optional[str] = None
    img: Optional[str] = None

    class Config:
        from_attributes = True


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: int


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0
