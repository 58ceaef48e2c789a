from typing import Optional

from fastapi import Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from services.auth_service.repository import RevokedTokenRepository, UserRepository
from .access import AdminGate, Principal, evaluate_admin_gate
from .jwt_handler import verify_access_token

# Defines the expected header format (Bearer <token>)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

NOT_SIGNED_IN = "Silakan masuk terlebih dahulu"
ADMIN_ONLY = (
    "Anda tidak memiliki akses untuk halaman ini. "
    "Hanya admin yang dapat mengakses dashboard ini."
)


async def resolve_principal(token: Optional[str], db: AsyncSession) -> Optional[Principal]:
    """Turn a bearer token into a Principal, or None when there is no live session."""
    if not token:
        return None

    payload = verify_access_token(token)
    if payload is None or payload.get("sub") is None:
        return None

    jti = payload.get("jti")
    if jti and await RevokedTokenRepository.is_revoked(db, jti):
        return None

    # The role comes from the store, not the token, so role changes apply immediately
    user = await UserRepository.get_by_id(db, int(payload["sub"]))
    if user is None or not user.is_active:
        return None
    return Principal(user_id=user.id, email=user.email, role=user.role)


async def get_optional_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[Principal]:
    """Dependency for endpoints that work with or without a session."""
    principal = await resolve_principal(token, db)
    if principal is not None:
        # Store in request state for downstream use (like rate limiting)
        request.state.user_id = principal.user_id
    return principal


async def get_current_user(
    principal: Optional[Principal] = Depends(get_optional_user),
) -> Principal:
    """Dependency that requires a valid, unrevoked session."""
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_SIGNED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


async def require_admin(
    principal: Optional[Principal] = Depends(get_optional_user),
) -> Principal:
    """Dependency that lets only admin-tagged sessions through."""
    if evaluate_admin_gate(principal) is AdminGate.GRANTED:
        return principal
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_SIGNED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ADMIN_ONLY)
