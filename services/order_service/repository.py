from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from .models import Order

class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order):
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def get_all_orders(db: AsyncSession):
        result = await db.execute(
            select(Order).order_by(Order.created_at.desc(), Order.id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def update_status(db: AsyncSession, order: Order, status: str):
        order.status = status
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def count_for_fruit(db: AsyncSession, fruit_id: int) -> int:
        result = await db.execute(
            select(func.count()).select_from(Order).where(Order.fruit_id == fruit_id)
        )
        return result.scalar_one()
