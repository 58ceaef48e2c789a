from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.notifications import notification
from shared.security.access import Principal, evaluate_admin_gate
from shared.security.dependencies import get_current_user, get_optional_user, oauth2_scheme

from .schemas import SessionResponse, TokenResponse, UserCreate, UserLogin, UserResponse
from .service import AuthService

router = APIRouter(tags=["Authentication"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "auth", "status": "running"}


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up for a new account",
)
async def register(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    return await AuthService.register(db, payload)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Sign in and receive a JWT access token",
)
async def login(payload: UserLogin, db: AsyncSession = Depends(get_db)):
    return await AuthService.login(db, payload)


@router.post("/logout", summary="Sign out and revoke the presented token")
async def logout(
    principal: Principal = Depends(get_current_user),
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
):
    await AuthService.logout(db, token)
    return notification("Anda telah keluar")


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the current authenticated user's profile",
)
async def get_me(
    principal: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await AuthService.get_user_by_id(db, principal.user_id)


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Describe the current session and whether the admin area is open",
)
async def get_session(principal: Optional[Principal] = Depends(get_optional_user)):
    return SessionResponse(
        authenticated=principal is not None,
        email=principal.email if principal else None,
        role=principal.role if principal else None,
        admin_gate=evaluate_admin_gate(principal),
    )
