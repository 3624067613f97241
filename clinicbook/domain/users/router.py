"""User router - FastAPI endpoints for the user directory"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import Identity, require_admin
from ...database import get_db
from .schemas import AdminStatusResponse, UpdateResult, UpsertUserResponse, UserResponse, UserUpsert
from .service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@router.get("/user", response_model=list[UserResponse])
async def list_users(
    identity: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    """Get every user (admin only)"""
    logger.info(f"📋 User list requested by {identity.email}")
    return service.list_users()


@router.put("/user/admin/{email}", response_model=UpdateResult)
async def make_admin(
    email: str,
    identity: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    """Grant the admin role (admin only)"""
    logger.info(f"🔐 Admin grant for {email} requested by {identity.email}")
    return service.make_admin(email)


@router.put("/user/{email}", response_model=UpsertUserResponse)
async def upsert_user(
    email: str,
    data: UserUpsert,
    service: UserService = Depends(get_user_service),
):
    """Create or update a user and issue a fresh access token"""
    return service.upsert_user(email, data)


@router.get("/admin/{email}", response_model=AdminStatusResponse)
async def check_admin(email: str, service: UserService = Depends(get_user_service)):
    """Check whether an email holds the admin role"""
    return AdminStatusResponse(admin=service.is_admin(email))
