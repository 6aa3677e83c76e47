from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from app.core.errors import NotAuthenticatedError
from app.models.account import Manager
from app.services.account_service import manager_from_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_manager(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Manager:
    """Resolves the manager behind the ``Authorization: Bearer <token>`` header."""
    if credentials is None:
        raise NotAuthenticatedError("Authentication required")
    return await manager_from_token(credentials.credentials)
