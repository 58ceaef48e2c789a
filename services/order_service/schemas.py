from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field

from shared.config.database import MAX_INT

from .rules import OrderStatus


class OrderCreate(BaseModel):
    fruit_id: int = Field(..., ge=1, le=MAX_INT)
    # Taken as typed by the buyer; the service clamps it against stock
    quantity: Union[int, float, str, None] = 1
    customer_name: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)


class OrderFruit(BaseModel):
    id: int
    name: str
    price: float

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    id: int
    fruit_id: int
    quantity: int
    customer_name: str
    contact: str
    status: OrderStatus
    created_at: datetime
    fruit: OrderFruit
    total_price: float

    class Config:
        from_attributes = True


class StatusUpdate(BaseModel):
    status: OrderStatus


class WhatsAppLink(BaseModel):
    message: str
    url: str
