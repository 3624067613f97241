"""Doctor service - Business logic for the doctor registry"""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import Doctor
from .repository import DoctorRepository
from .schemas import DeleteResult, DoctorCreate, InsertResult

logger = logging.getLogger(__name__)


class DoctorService:
    """Service layer for doctor registry logic (callers are already admin-checked)"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = DoctorRepository()

    def list_doctors(self) -> list[Doctor]:
        return self.repo.get_doctors(self.db)

    def create_doctor(self, data: DoctorCreate) -> InsertResult:
        """Create a new doctor"""
        logger.info(f"📥 Creating doctor {data.email}")
        try:
            doctor = self.repo.create_doctor(self.db, **data.model_dump())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create doctor {data.email}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create doctor") from e

        logger.info(f"✅ Doctor {doctor.id} created")
        return InsertResult(insertedId=doctor.id)

    def delete_doctor(self, email: str) -> DeleteResult:
        """Delete a doctor by email; a missing doctor yields deletedCount 0"""
        email = email.strip().lower()
        try:
            deleted = self.repo.delete_doctor_by_email(self.db, email)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete doctor {email}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete doctor") from e

        if deleted:
            logger.info(f"🗑️ Doctor {email} deleted")
        else:
            logger.info(f"ℹ️ No doctor found for {email}, nothing deleted")
        return DeleteResult(deletedCount=deleted)
