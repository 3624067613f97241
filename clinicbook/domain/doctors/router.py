"""Doctor router - admin-only endpoints for the doctor registry"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import Identity, require_admin
from ...database import get_db
from .schemas import DeleteResult, DoctorCreate, DoctorResponse, InsertResult
from .service import DoctorService

router = APIRouter(tags=["Doctors"])


def get_doctor_service(db: Session = Depends(get_db)) -> DoctorService:
    """Dependency injection for DoctorService"""
    return DoctorService(db)


@router.post("/doctor", response_model=InsertResult)
async def create_doctor(
    data: DoctorCreate,
    _admin: Identity = Depends(require_admin),
    service: DoctorService = Depends(get_doctor_service),
):
    return service.create_doctor(data)


@router.get("/doctors", response_model=list[DoctorResponse])
async def list_doctors(
    _admin: Identity = Depends(require_admin),
    service: DoctorService = Depends(get_doctor_service),
):
    return service.list_doctors()


@router.delete("/doctors/{email}", response_model=DeleteResult)
async def delete_doctor(
    email: str,
    _admin: Identity = Depends(require_admin),
    service: DoctorService = Depends(get_doctor_service),
):
    return service.delete_doctor(email)
