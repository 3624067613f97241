from sqlalchemy import JSON, Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from .database import Base

ADMIN_ROLE = "admin"


class Service(Base):
    """A treatment and its template of bookable slot labels"""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    slots = Column(JSON, default=list, nullable=False)  # ordered template, never rewritten per day
    price = Column(Integer, nullable=True)


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("treatment", "date", "patient", name="uq_booking_patient_treatment_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    patient = Column(String(255), index=True, nullable=False)  # patient email
    patient_name = Column(String(255), nullable=True)
    treatment = Column(String(255), nullable=False)
    date = Column(String(64), index=True, nullable=False)  # opaque date label
    slot = Column(String(64), nullable=False)
    phone = Column(String(50), nullable=True)
    # "<treatment>|<date>|<slot>" in strict slot mode, NULL otherwise
    slot_key = Column(String(400), unique=True, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=True)
    role = Column(String(50), nullable=True)  # "admin" or NULL
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    specialty = Column(String(255), nullable=True)
    img = Column(String(500), nullable=True)  # profile image URL
    created_at = Column(DateTime(timezone=True), server_default=func.now())
