"""Service catalog router - treatment listing and availability endpoints"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import AvailableService, ServiceName
from .service import ServiceCatalog

router = APIRouter(tags=["Services"])


def get_service_catalog(db: Session = Depends(get_db)) -> ServiceCatalog:
    """Dependency injection for ServiceCatalog"""
    return ServiceCatalog(db)


@router.get("/services", response_model=list[ServiceName])
async def list_services(catalog: ServiceCatalog = Depends(get_service_catalog)):
    """List treatment names"""
    return catalog.list_services()


@router.get("/available", response_model=list[AvailableService])
async def list_available(
    date: str = Query(..., min_length=1),
    catalog: ServiceCatalog = Depends(get_service_catalog),
):
    """List every treatment with its open slots on a date"""
    return catalog.list_available(date)
