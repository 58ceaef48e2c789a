from datetime import datetime, timezone

import structlog
from fastapi import HTTPException, status
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.settings import ADMIN_EMAILS
from shared.security.access import ADMIN_ROLE, CUSTOMER_ROLE
from shared.security.jwt_handler import create_access_token, verify_access_token

from .models import User
from .repository import RevokedTokenRepository, UserRepository
from .schemas import TokenResponse, UserCreate, UserLogin

logger = structlog.get_logger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:

    @staticmethod
    def _hash_password(password: str) -> str:
        return _pwd_context.hash(password)

    @staticmethod
    def _verify_password(plain: str, hashed: str) -> bool:
        return _pwd_context.verify(plain, hashed)

    @staticmethod
    def role_for_email(email: str) -> str:
        return ADMIN_ROLE if email.lower() in ADMIN_EMAILS else CUSTOMER_ROLE

    @staticmethod
    async def register(db: AsyncSession, data: UserCreate) -> User:
        email = data.email.lower()
        existing = await UserRepository.get_by_email(db, email)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email sudah terdaftar",
            )
        user = User(
            email=email,
            full_name=data.full_name.strip(),
            hashed_password=AuthService._hash_password(data.password),
            role=AuthService.role_for_email(email),
        )
        user = await UserRepository.create(db, user)
        logger.info("user_signed_up", user_id=user.id, role=user.role)
        return user

    @staticmethod
    async def login(db: AsyncSession, data: UserLogin) -> TokenResponse:
        user = await UserRepository.get_by_email(db, data.email.lower())
        if not user or not AuthService._verify_password(data.password, user.hashed_password):
            logger.info("sign_in_rejected")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Email atau password salah",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Akun dinonaktifkan",
            )
        token = create_access_token(data={"sub": str(user.id), "role": user.role})
        logger.info("user_signed_in", user_id=user.id)
        return TokenResponse(access_token=token, role=user.role)

    @staticmethod
    async def logout(db: AsyncSession, token: str) -> None:
        payload = verify_access_token(token)
        if payload is None or not payload.get("jti"):
            return
        expires_at = None
        if payload.get("exp"):
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        pruned = await RevokedTokenRepository.revoke(db, payload["jti"], expires_at)
        logger.info("user_signed_out", user_id=payload.get("sub"), pruned_revocations=pruned)

    @staticmethod
    async def get_user_by_id(db: AsyncSession, user_id: int) -> User:
        user = await UserRepository.get_by_id(db, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pengguna tidak ditemukan")
        return user
