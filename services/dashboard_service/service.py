from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import fruitshop_low_stock_fruits
from services.catalog_service.repository import FruitRepository
from services.order_service.repository import OrderRepository

from .stats import DashboardStats, compute_dashboard_stats


class DashboardService:
    @staticmethod
    async def get_stats(db: AsyncSession) -> DashboardStats:
        fruits = await FruitRepository.get_all_fruits(db)
        orders = await OrderRepository.get_all_orders(db)
        stats = compute_dashboard_stats(fruits, orders)
        fruitshop_low_stock_fruits.set(stats.low_stock_products)
        return stats
