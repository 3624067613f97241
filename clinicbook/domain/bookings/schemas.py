"""Booking domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_non_blank


class BookingCreate(BaseModel):
    """Schema for placing a booking"""

    patient: str
    patientName: Optional[str] = None
    treatment: str
    date: str
    slot: str
    phone: Optional[str] = None

    @field_validator("patient")
    @classmethod
    def validate_patient(cls, v: str) -> str:
        return validate_email(validate_non_blank(v))

    @field_validator("treatment", "date", "slot")
    @classmethod
    def validate_labels(cls, v: str) -> str:
        return validate_non_blank(v)


class BookingResponse(BaseModel):
    id: int
    patient: str
    patientName: Optional[str] = None
    treatment: str
    date: str
    slot: str
    phone: Optional[str] = None


class BookingResult(BaseModel):
    """
    Outcome of a booking attempt.
    On conflict nothing is inserted and the existing booking is returned in "exist".
    """

    success: bool
    booking: Optional[BookingResponse] = None
    exist: Optional[BookingResponse] = None
