from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.security.access import AdminGate


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str


class UserResponse(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    is_active: bool

    class Config:
        from_attributes = True


class SessionResponse(BaseModel):
    authenticated: bool
    email: Optional[str] = None
    role: Optional[str] = None
    admin_gate: AdminGate
