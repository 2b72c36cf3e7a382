from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from app.core.config import settings
from app.core.security import decode_admin_token
from app.db.session import get_db
from app.models.admin_user import AdminUser
from fastapi import Depends, HTTPException, Request, status
from jose import JWTError  # type: ignore[import-untyped]
from sqlalchemy.orm import Session


def get_today() -> date:
    """Evaluation date for availability checks; override in tests to pin it."""
    return datetime.now(timezone.utc).date()


def _extract_bearer_token(request: Request) -> Optional[str]:
    auth = request.headers.get("Authorization")
    if not auth:
        return None
    parts = auth.split(" ", 1)
    if len(parts) != 2:
        return None
    scheme, token = parts
    if scheme.lower() != "bearer":
        return None
    return token


def get_current_admin(request: Request, db: Session = Depends(get_db)) -> AdminUser:
    # Authorization: Bearer <token> OR the session cookie
    token = _extract_bearer_token(request) or request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    try:
        admin_id = decode_admin_token(token)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    admin = db.get(AdminUser, admin_id)
    if not admin or not admin.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Admin not found")

    return admin
