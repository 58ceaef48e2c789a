from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INT, get_db
from shared.notifications import notification
from shared.security.dependencies import require_admin
from .schemas import FruitCreate, FruitResponse, FruitUpdate
from .service import FruitInUse, FruitNotFound, FruitService

router = APIRouter(tags=["Catalog"])
admin_router = APIRouter(tags=["Catalog admin"], dependencies=[Depends(require_admin)])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

FRUIT_NOT_FOUND = "Buah tidak ditemukan"

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "catalog", "status": "running"}


@router.get("/", response_model=list[FruitResponse])
async def list_fruits(
    query: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    return await FruitService.list_fruits(db, query)


@router.get("/{fruit_id}", response_model=FruitResponse)
async def get_fruit(
    fruit_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db)
):
    fruit = await FruitService.get_fruit_by_id(db, fruit_id)
    if not fruit:
        raise HTTPException(status_code=404, detail=FRUIT_NOT_FOUND)
    return fruit


@admin_router.post("/", response_model=FruitResponse, status_code=201)
async def create_fruit(
    fruit: FruitCreate,
    db: AsyncSession = Depends(get_db)
):
    return await FruitService.create_fruit(db, fruit)


@admin_router.put("/{fruit_id}", response_model=FruitResponse)
async def update_fruit(
    fruit: FruitUpdate,
    fruit_id: int = Path(..., ge=1, le=MAX_INT),
    db: AsyncSession = Depends(get_db)
):
    try:
        return await FruitService.update_fruit(db, fruit_id, fruit)
    except FruitNotFound:
        raise HTTPException(status_code=404, detail=FRUIT_NOT_FOUND)


@admin_router.delete("/{fruit_id}")
async def delete_fruit(
    fruit_id: int = Path(..., ge=1, le=MAX_INT),
    confirm: bool = Query(default=False),
    db: AsyncSession = Depends(get_db)
):
    if not confirm:
        raise HTTPException(
            status_code=400,
            detail="Konfirmasi diperlukan untuk menghapus buah",
        )
    try:
        await FruitService.delete_fruit(db, fruit_id)
    except FruitNotFound:
        raise HTTPException(status_code=404, detail=FRUIT_NOT_FOUND)
    except FruitInUse:
        raise HTTPException(
            status_code=409,
            detail="Gagal menghapus buah: masih ada pesanan untuk buah ini",
        )
    return notification("Buah berhasil dihapus")
