# src/auth/dependencies.py

import secrets
from typing import Optional

from fastapi import Header, HTTPException, status

from src.common.config import settings
from src.common.utils.global_messages import GlobalMessages

async def require_admin(x_admin_password: Optional[str] = Header(None)) -> None:
    """
    Dependency guarding admin-only writes.
    The front end sends the shared admin password in the `x-admin-password` header.
    """
    if not x_admin_password or not secrets.compare_digest(
        x_admin_password.encode(), settings.ADMIN_PASSWORD.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=GlobalMessages.UNAUTHORIZED,
        )
