from __future__ import annotations

import logging
from datetime import timedelta

from app.api.deps import get_current_admin
from app.api.rate_limit import enforce_rate_limit, rate_limiter
from app.core.config import settings
from app.core.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from app.db.session import get_db
from app.models.admin_user import AdminUser
from app.schemas.auth import AdminLoginIn, AdminOut
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/admin/auth", tags=["admin-auth"])


def _get_admin_by_username(db: Session, username: str) -> AdminUser | None:
    return db.execute(
        select(AdminUser).where(AdminUser.username == username)
    ).scalar_one_or_none()


def _create_admin(db: Session, *, username: str, password: str) -> AdminUser:
    a = AdminUser(username=username, password_hash=hash_password(password))
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def _set_auth_cookie(response: Response, *, subject: str) -> None:
    token = create_access_token(
        subject=subject,
        expires_delta=timedelta(minutes=settings.auth_access_token_ttl_minutes),
    )
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,
        path="/",
    )


@router.post(
    "/login",
    response_model=AdminOut,
    dependencies=[
        Depends(
            rate_limiter(
                "admin_login",
                limit=settings.rate_limit_login_per_window,
                window_seconds=settings.rate_limit_window_seconds,
            )
        )
    ],
)
def login(
    payload: AdminLoginIn,
    response: Response,
    db: Session = Depends(get_db),
):
    # Per-username bucket on top of the per-address dependency.
    enforce_rate_limit(
        "admin_login_user",
        payload.username.strip().casefold(),
        limit=settings.rate_limit_login_per_window,
        window_seconds=settings.rate_limit_window_seconds,
    )

    a = _get_admin_by_username(db, payload.username)

    # Demo admin is created on first login in dev environments only
    if (
        a is None
        and settings.demo_login_enabled
        and settings.is_dev
        and payload.username == settings.demo_admin_username
        and payload.password == settings.demo_admin_password
    ):
        a = _create_admin(db, username=payload.username, password=payload.password)
        logger.info("created demo admin %s", a.username)

    if a is None or not a.is_active or not verify_password(payload.password, a.password_hash):
        logger.warning("failed admin login for %s", payload.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    _set_auth_cookie(response, subject=a.id)
    return AdminOut(id=a.id, username=a.username)


@router.get("/me", response_model=AdminOut)
def me(admin: AdminUser = Depends(get_current_admin)) -> AdminOut:
    return AdminOut(id=admin.id, username=admin.username)


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.auth_cookie_name, path="/")
    return {"ok": True}
