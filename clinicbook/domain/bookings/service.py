"""Booking service - Business logic for the booking ledger"""

import logging
from typing import Callable, Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...auth import Identity
from ...config import BOOKING_STRICT_SLOT
from ...models import Booking
from ...shared.validators import validate_email
from .repository import BookingRepository, make_slot_key
from .schemas import BookingCreate, BookingResponse, BookingResult

logger = logging.getLogger(__name__)

NotificationDispatch = Callable[[dict], None]


def booking_to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        patient=booking.patient,
        patientName=booking.patient_name,
        treatment=booking.treatment,
        date=booking.date,
        slot=booking.slot,
        phone=booking.phone,
    )


class BookingService:
    """
    Service layer for booking logic.

    ``dispatch`` receives the stored booking payload after a successful insert.
    It must only schedule the notification; the router hands it a background task.
    """

    def __init__(
        self,
        db: Session,
        dispatch: Optional[NotificationDispatch] = None,
        strict_slot: bool = BOOKING_STRICT_SLOT,
    ):
        self.db = db
        self.repo = BookingRepository()
        self.dispatch = dispatch
        self.strict_slot = strict_slot

    def find_conflict(self, data: BookingCreate) -> Optional[Booking]:
        """Get the booking that blocks a new one, if any"""
        existing = self.repo.find_patient_booking(self.db, data.treatment, data.date, data.patient)
        if existing is None and self.strict_slot:
            existing = self.repo.find_slot_holder(self.db, data.treatment, data.date, data.slot)
        return existing

    def create_booking(self, data: BookingCreate) -> BookingResult:
        """Insert a booking unless a conflicting one exists"""
        logger.info(f"📥 Booking {data.treatment} on {data.date} at {data.slot} for {data.patient}")

        existing = self.find_conflict(data)
        if existing is not None:
            logger.info(f"⚠️ Booking conflict for {data.patient}: existing booking {existing.id}")
            return BookingResult(success=False, exist=booking_to_response(existing))

        try:
            booking = self.repo.create_booking(
                self.db,
                patient=data.patient,
                patient_name=data.patientName,
                treatment=data.treatment,
                date=data.date,
                slot=data.slot,
                phone=data.phone,
                slot_key=(
                    make_slot_key(data.treatment, data.date, data.slot) if self.strict_slot else None
                ),
            )
        except IntegrityError as e:
            # A concurrent request inserted the same key after our check
            self.db.rollback()
            existing = self.find_conflict(data)
            if existing is None:
                logger.error(f"❌ Booking insert failed for {data.patient}: {e}")
                raise HTTPException(status_code=500, detail="Failed to create booking") from e
            logger.info(f"⚠️ Booking race lost for {data.patient}: existing booking {existing.id}")
            return BookingResult(success=False, exist=booking_to_response(existing))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Booking insert failed for {data.patient}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create booking") from e

        result = booking_to_response(booking)
        logger.info(f"✅ Booking {booking.id} created for {booking.patient}")
        self._dispatch_notification(result)
        return BookingResult(success=True, booking=result)

    def _dispatch_notification(self, booking: BookingResponse) -> None:
        if self.dispatch is None:
            return
        try:
            self.dispatch(booking.model_dump())
        except Exception as e:
            logger.error(f"❌ Failed to schedule notification for booking {booking.id}: {e}")

    def list_patient_bookings(self, patient: str, identity: Identity) -> list[BookingResponse]:
        """Get a patient's bookings; callers may only read their own"""
        try:
            patient = validate_email(patient)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        if patient != identity.email:
            logger.warning(f"🚫 {identity.email} tried to read bookings of {patient}")
            raise HTTPException(status_code=403, detail="forbidden access")

        return [booking_to_response(b) for b in self.repo.get_bookings_for_patient(self.db, patient)]

    def get_booking(self, booking_id: int, identity: Identity) -> BookingResponse:
        """Get one booking owned by the caller"""
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        if booking.patient != identity.email:
            logger.warning(f"🚫 {identity.email} tried to read booking {booking_id}")
            raise HTTPException(status_code=403, detail="forbidden access")
        return booking_to_response(booking)
