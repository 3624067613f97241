"""Booking router - FastAPI endpoints for placing and reading bookings"""

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from ...auth import Identity, get_current_identity
from ...database import get_db
from ...notifications import BookingNotifier, get_booking_notifier
from .schemas import BookingCreate, BookingResponse, BookingResult
from .service import BookingService

router = APIRouter(tags=["Bookings"])


def get_booking_service(
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    notifier: BookingNotifier = Depends(get_booking_notifier),
) -> BookingService:
    """Dependency injection for BookingService; notifications run after the response"""

    def dispatch(payload: dict) -> None:
        background_tasks.add_task(notifier.notify_booking, payload)

    return BookingService(db, dispatch=dispatch)


@router.post("/service", response_model=BookingResult)
async def create_booking(
    data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Place a booking; a conflicting booking is returned instead of inserting"""
    return service.create_booking(data)


@router.get("/booking", response_model=list[BookingResponse])
async def list_patient_bookings(
    patient: str = Query(...),
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
):
    """Get the caller's own bookings"""
    return service.list_patient_bookings(patient, identity)


@router.get("/booking/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    identity: Identity = Depends(get_current_identity),
    service: BookingService = Depends(get_booking_service),
):
    """Get one of the caller's bookings"""
    return service.get_booking(booking_id, identity)
