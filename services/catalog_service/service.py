import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import fruitshop_catalog_mutations_total
from services.order_service.repository import OrderRepository

from .catalog import filter_fruits
from .models import Fruit
from .repository import FruitRepository
from .schemas import FruitCreate, FruitUpdate

logger = structlog.get_logger(__name__)


class FruitNotFound(ValueError):
    pass


class FruitInUse(ValueError):
    pass


class FruitService:

    @staticmethod
    async def create_fruit(db: AsyncSession, data: FruitCreate):
        fruit = Fruit(
            name=data.name,
            price=data.price,
            stock=data.stock,
            image=data.image,
            description=data.description,
        )
        fruit = await FruitRepository.create_fruit(db, fruit)
        fruitshop_catalog_mutations_total.labels(operation="create").inc()
        logger.info("fruit_created", fruit_id=fruit.id, name=fruit.name)
        return fruit

    @staticmethod
    async def list_fruits(db: AsyncSession, query: str | None = None):
        fruits = await FruitRepository.get_all_fruits(db)
        return filter_fruits(fruits, query)

    @staticmethod
    async def get_fruit_by_id(db: AsyncSession, fruit_id: int):
        return await FruitRepository.get_fruit_by_id(db, fruit_id)

    @staticmethod
    async def update_fruit(db: AsyncSession, fruit_id: int, data: FruitUpdate):
        fruit = await FruitRepository.get_fruit_by_id(db, fruit_id)
        if not fruit:
            raise FruitNotFound(f"Fruit {fruit_id} not found")

        fruit.name = data.name
        fruit.price = data.price
        fruit.stock = data.stock
        fruit.image = data.image
        fruit.description = data.description
        fruit = await FruitRepository.update_fruit(db, fruit)
        fruitshop_catalog_mutations_total.labels(operation="update").inc()
        logger.info("fruit_updated", fruit_id=fruit.id)
        return fruit

    @staticmethod
    async def delete_fruit(db: AsyncSession, fruit_id: int):
        fruit = await FruitRepository.get_fruit_by_id(db, fruit_id)
        if not fruit:
            raise FruitNotFound(f"Fruit {fruit_id} not found")

        # Orders keep pointing at their fruit; refuse rather than orphan them
        if await OrderRepository.count_for_fruit(db, fruit_id):
            raise FruitInUse(f"Fruit {fruit_id} is referenced by orders")

        await FruitRepository.delete_fruit(db, fruit)
        fruitshop_catalog_mutations_total.labels(operation="delete").inc()
        logger.info("fruit_deleted", fruit_id=fruit_id)
