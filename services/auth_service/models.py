from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from shared.config.database import Base
from shared.security.access import CUSTOMER_ROLE


def _utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False, default="")
    role = Column(String(32), nullable=False, default=CUSTOMER_ROLE) # customer, admin
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class RevokedToken(Base):
    """A signed-out token. Its jti no longer counts as a session."""
    __tablename__ = "revoked_tokens"

    jti = Column(String(64), primary_key=True)
    revoked_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    # When the token would have expired anyway; after that the row is dead weight
    expires_at = Column(DateTime(timezone=True), nullable=True, index=True)
