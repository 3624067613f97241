"""Booking repository - Database operations for bookings"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking


def make_slot_key(treatment: str, date: str, slot: str) -> str:
    return f"{treatment}|{date}|{slot}"


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def find_patient_booking(
        db: Session, treatment: str, date: str, patient: str
    ) -> Optional[Booking]:
        """Get the patient's booking for a treatment on a date"""
        return (
            db.query(Booking)
            .filter(
                Booking.treatment == treatment,
                Booking.date == date,
                Booking.patient == patient,
            )
            .first()
        )

    @staticmethod
    def find_slot_holder(db: Session, treatment: str, date: str, slot: str) -> Optional[Booking]:
        """Get any booking that holds a treatment slot on a date"""
        return (
            db.query(Booking)
            .filter(Booking.treatment == treatment, Booking.date == date, Booking.slot == slot)
            .first()
        )

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_bookings_for_patient(db: Session, patient: str) -> list[Booking]:
        return db.query(Booking).filter(Booking.patient == patient).order_by(Booking.id).all()

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Insert a booking in a single commit"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking
