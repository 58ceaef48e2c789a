from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Fruit

class FruitRepository:

    @staticmethod
    async def create_fruit(db: AsyncSession, fruit: Fruit):
        db.add(fruit)
        await db.commit()
        await db.refresh(fruit)
        return fruit

    @staticmethod
    async def get_all_fruits(db: AsyncSession):
        result = await db.execute(
            select(Fruit).order_by(Fruit.created_at.desc(), Fruit.id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def get_fruit_by_id(db: AsyncSession, fruit_id: int):
        result = await db.execute(select(Fruit).where(Fruit.id == fruit_id))
        return result.scalars().first()

    @staticmethod
    async def update_fruit(db: AsyncSession, fruit: Fruit):
        db.add(fruit)
        await db.commit()
        await db.refresh(fruit)
        return fruit

    @staticmethod
    async def delete_fruit(db: AsyncSession, fruit: Fruit):
        await db.delete(fruit)
        await db.commit()
