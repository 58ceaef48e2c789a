from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import RevokedToken, User


class UserRepository:

    @staticmethod
    async def create(db: AsyncSession, user: User) -> User:
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalars().first()


class RevokedTokenRepository:

    @staticmethod
    async def revoke(db: AsyncSession, jti: str, expires_at: Optional[datetime] = None) -> int:
        """Record the jti and drop rows whose tokens have expired. Returns how many were dropped."""
        pruned = await RevokedTokenRepository.prune_expired(db, datetime.now(timezone.utc))
        if await db.get(RevokedToken, jti) is None:
            db.add(RevokedToken(jti=jti, expires_at=expires_at))
        await db.commit()
        return pruned

    @staticmethod
    async def prune_expired(db: AsyncSession, now: datetime) -> int:
        result = await db.execute(
            delete(RevokedToken)
            .where(RevokedToken.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    @staticmethod
    async def is_revoked(db: AsyncSession, jti: str) -> bool:
        return await db.get(RevokedToken, jti) is not None
