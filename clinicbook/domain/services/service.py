"""Service catalog logic - treatment listing and slot availability"""

import logging
from collections import defaultdict

from sqlalchemy.orm import Session

from ...models import Booking, Service
from .repository import ServiceRepository
from .schemas import AvailableService, ServiceCreate

logger = logging.getLogger(__name__)


def subtract_booked_slots(
    services: list[Service], bookings: list[Booking]
) -> list[AvailableService]:
    """
    Remove booked slots from each service's template.

    Bookings are matched to a service by treatment name. Template order is kept
    and every service is returned, even when no slot is left.
    """
    booked: dict[str, set[str]] = defaultdict(set)
    for booking in bookings:
        booked[booking.treatment].add(booking.slot)

    available = []
    for service in services:
        taken = booked.get(service.name, set())
        available.append(
            AvailableService(
                id=service.id,
                name=service.name,
                slots=[slot for slot in (service.slots or []) if slot not in taken],
                price=service.price,
            )
        )
    return available


class ServiceCatalog:
    """Service layer for the treatment catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository()

    def list_services(self) -> list[Service]:
        """Get every treatment"""
        return self.repo.get_services(self.db)

    def list_available(self, date: str) -> list[AvailableService]:
        """Get every treatment with the slots still open on a date"""
        services = self.repo.get_services(self.db)
        bookings = self.repo.get_bookings_for_date(self.db, date)
        logger.debug(
            f"Computing availability for {date}: {len(services)} services, {len(bookings)} bookings"
        )
        return subtract_booked_slots(services, bookings)

    def create_service(self, data: ServiceCreate) -> Service:
        """Add a treatment to the catalog"""
        logger.info(f"📥 Adding service {data.name} with {len(data.slots)} slots")
        return self.repo.create_service(
            self.db, name=data.name, slots=list(data.slots), price=data.price
        )
