from dataclasses import dataclass
from typing import Iterable

from services.catalog_service.catalog import is_low_stock
from services.order_service.rules import OrderStatus


@dataclass(frozen=True)
class DashboardStats:
    total_revenue: float
    pending_orders: int
    total_products: int
    low_stock_products: int


def compute_dashboard_stats(fruits: Iterable, orders: Iterable) -> DashboardStats:
    """
    Revenue counts only completed orders, priced at the fruit's current price.
    Low stock here includes fruits that have run out.
    """
    fruits, orders = list(fruits), list(orders)
    revenue = sum(
        order.fruit.price * order.quantity
        for order in orders
        if order.status == OrderStatus.COMPLETED.value
    )
    return DashboardStats(
        total_revenue=revenue,
        pending_orders=sum(1 for order in orders if order.status == OrderStatus.PENDING.value),
        total_products=len(fruits),
        low_stock_products=sum(1 for fruit in fruits if is_low_stock(fruit.stock)),
    )
