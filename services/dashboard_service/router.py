from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security.dependencies import require_admin

from .schemas import DashboardStatsResponse
from .service import DashboardService

router = APIRouter(tags=["Dashboard"], dependencies=[Depends(require_admin)])
public_router = APIRouter()

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "dashboard", "status": "running"}


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(db: AsyncSession = Depends(get_db)):
    return await DashboardService.get_stats(db)
