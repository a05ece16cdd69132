"""Teacher authentication routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import JSONResponse

from seiac.auth import SESSION_COOKIE_NAME, teacher_sessions, verify_password
from seiac.config import Settings
from seiac.dependencies import get_optional_teacher, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/session")
async def session_status(session_token: str | None = Depends(get_optional_teacher)):
    """Tell the panel whether the current browser holds a valid teacher session."""
    return {"authenticated": session_token is not None}


@router.post("/login")
async def login_submit(
    password: str = Form(...),
    settings: Settings = Depends(get_settings),
):
    """Validate the teacher password and start a session."""
    teacher_sessions.cleanup_expired()

    if not verify_password(password):
        logger.info("Rejected teacher login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password. Please try again.",
        )

    token = teacher_sessions.create(settings.SESSION_DURATION_HOURS)
    response = JSONResponse({"status": "success"})
    max_age = settings.SESSION_DURATION_HOURS * 3600
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=max_age,
        expires=max_age,
        httponly=True,
        samesite="lax",
        secure=False,
    )
    return response


@router.get("/logout")
async def logout(request: Request):
    """Invalidate the current session."""
    teacher_sessions.invalidate(request.cookies.get(SESSION_COOKIE_NAME))
    response = JSONResponse({"status": "success"})
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response
