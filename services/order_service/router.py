from fastapi import APIRouter, Depends, HTTPException, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import MAX_INT, get_db
from shared.notifications import notification
from shared.security import limiter, order_rate_limit
from shared.security.dependencies import require_admin
from .rules import OrderStatus
from .schemas import OrderCreate, OrderResponse, StatusUpdate, WhatsAppLink
from .service import (
    InvalidTransition,
    MessageUnavailable,
    OrderNotFound,
    OrderService,
    OrderedFruitNotFound,
    OutOfStock,
)

# Buyers order without an account; everything else is admin only
router = APIRouter(tags=["Orders"])
admin_router = APIRouter(tags=["Orders admin"], dependencies=[Depends(require_admin)])
public_router = APIRouter()

ORDER_NOT_FOUND = "Pesanan tidak ditemukan"

STATUS_TEXT = {
    OrderStatus.PENDING: "Menunggu",
    OrderStatus.PROCESSING: "Diproses",
    OrderStatus.COMPLETED: "Selesai",
    OrderStatus.CANCELLED: "Dibatalkan",
}

@public_router.get("/health")
async def health_check():
    return {"service": "order", "status": "running"}


@router.post("/", response_model=OrderResponse, status_code=201)
@limiter.limit(order_rate_limit)
async def place_order(
    request: Request,                 # REQUIRED: slowapi reads the client key from it
    order: OrderCreate,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await OrderService.place_order(db, order)
    except OrderedFruitNotFound:
        raise HTTPException(status_code=404, detail="Buah tidak ditemukan")
    except OutOfStock:
        raise HTTPException(
            status_code=409,
            detail="Stok habis. Buah ini tidak dapat dipesan saat ini.",
        )


@admin_router.get("/", response_model=list[OrderResponse])
async def list_orders(db: AsyncSession = Depends(get_db)):
    return await OrderService.list_orders(db)


@admin_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail=ORDER_NOT_FOUND)
    return order


async def _transition(db: AsyncSession, order_id: int, target: OrderStatus):
    try:
        await OrderService.transition(db, order_id, target)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail=ORDER_NOT_FOUND)
    except InvalidTransition:
        raise HTTPException(
            status_code=409,
            detail=f"Status pesanan tidak dapat diubah menjadi {STATUS_TEXT[target]}",
        )
    body = notification("Status pesanan berhasil diupdate")
    body["status"] = target.value
    return body


@admin_router.patch("/{order_id}/status")
async def update_order_status(
    payload: StatusUpdate,
    order_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    return await _transition(db, order_id, payload.status)


@admin_router.patch("/{order_id}/cancel")
async def cancel_order(
    order_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    return await _transition(db, order_id, OrderStatus.CANCELLED)


@admin_router.get("/{order_id}/whatsapp", response_model=WhatsAppLink)
async def whatsapp_payment_link(
    order_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await OrderService.whatsapp_link(db, order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail=ORDER_NOT_FOUND)
    except MessageUnavailable:
        raise HTTPException(
            status_code=409,
            detail="Pesan pembayaran hanya untuk pesanan menunggu dengan nomor WhatsApp",
        )
