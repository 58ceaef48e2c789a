from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    total_revenue: float
    pending_orders: int
    total_products: int
    low_stock_products: int

    class Config:
        from_attributes = True
