from datetime import datetime

from pydantic import BaseModel, Field

from shared.config.database import MAX_INT


class FruitCreate(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    stock: int = Field(..., ge=0, le=MAX_INT)
    image: str = ""
    description: str = ""


class FruitUpdate(FruitCreate):
    pass


class FruitResponse(BaseModel):
    id: int
    name: str
    price: float
    stock: int
    image: str
    description: str
    created_at: datetime
    stock_status: str
    orderable: bool
    max_orderable: int

    class Config:
        from_attributes = True
