"""Doctor repository - Database operations for doctors"""

from sqlalchemy.orm import Session

from ...models import Doctor


class DoctorRepository:
    """Repository for doctor database operations"""

    @staticmethod
    def get_doctors(db: Session) -> list[Doctor]:
        return db.query(Doctor).order_by(Doctor.id).all()

    @staticmethod
    def create_doctor(db: Session, **doctor_data) -> Doctor:
        doctor = Doctor(**doctor_data)
        db.add(doctor)
        db.commit()
        db.refresh(doctor)
        return doctor

    @staticmethod
    def delete_doctor_by_email(db: Session, email: str) -> int:
        """Delete the first doctor with an email. Returns the number of rows removed."""
        doctor = db.query(Doctor).filter(Doctor.email == email).order_by(Doctor.id).first()
        if doctor is None:
            return 0
        db.delete(doctor)
        db.commit()
        return 1
