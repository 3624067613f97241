import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from .database import get_db
from .domain.users.repository import UserRepository
from .models import ADMIN_ROLE
from .security_utils import verify_jwt_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """Decoded identity claim of a verified credential"""

    email: str


def verify_credential(token: str) -> Identity:
    """Validate a bearer token and return its identity claim"""
    decoded = verify_jwt_token(token)
    if not decoded or not decoded.get("email"):
        logger.warning("🚫 Rejected bearer token: invalid, expired or missing email claim")
        raise HTTPException(status_code=403, detail="Forbidden access")
    return Identity(email=decoded["email"])


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """Get the caller identity from the Authorization header"""
    if not credentials or not credentials.credentials:
        logger.warning("⚠️ Request without bearer credentials")
        raise HTTPException(status_code=401, detail="UnAuthorized access")

    return verify_credential(credentials.credentials)


def require_admin_role(db: Session, identity: Identity) -> Identity:
    """Check the stored role of an already verified identity"""
    user = UserRepository.get_user_by_email(db, identity.email)
    if user is None:
        logger.warning(f"🚫 Admin check for unknown user {identity.email}")
        raise HTTPException(status_code=403, detail="Forbidden access")
    if user.role != ADMIN_ROLE:
        logger.warning(f"🚫 User {identity.email} is not an admin")
        raise HTTPException(status_code=403, detail="Forbidden access")
    return identity


async def require_admin(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> Identity:
    """
    Require an authenticated admin.
    The role is re-read on every request so grants and revocations apply immediately.
    """
    return require_admin_role(db, identity)
