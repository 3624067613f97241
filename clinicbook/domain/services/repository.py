"""Service catalog repository - Database operations for treatments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, Service


class ServiceRepository:
    """Repository for service catalog database operations"""

    @staticmethod
    def get_services(db: Session) -> list[Service]:
        """Get the full catalog in insertion order"""
        return db.query(Service).order_by(Service.id).all()

    @staticmethod
    def get_service_by_name(db: Session, name: str) -> Optional[Service]:
        return db.query(Service).filter(Service.name == name).first()

    @staticmethod
    def get_bookings_for_date(db: Session, date: str) -> list[Booking]:
        """Get every booking on a date, across all treatments"""
        return db.query(Booking).filter(Booking.date == date).all()

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        """Create a new catalog entry"""
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service
