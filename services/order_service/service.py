import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import (
    fruitshop_orders_placed_total,
    fruitshop_order_status_transitions_total,
)
from services.catalog_service.repository import FruitRepository

from .messaging import build_payment_message, build_whatsapp_url, contact_digits
from .models import Order
from .repository import OrderRepository
from .rules import OrderStatus, can_transition, clamp_quantity
from .schemas import OrderCreate, WhatsAppLink

logger = structlog.get_logger(__name__)


class OrderNotFound(ValueError):
    pass


class OrderedFruitNotFound(ValueError):
    pass


class OutOfStock(ValueError):
    pass


class InvalidTransition(ValueError):
    pass


class MessageUnavailable(ValueError):
    pass


class OrderService:
    @staticmethod
    async def place_order(db: AsyncSession, data: OrderCreate):
        fruit = await FruitRepository.get_fruit_by_id(db, data.fruit_id)
        if not fruit:
            fruitshop_orders_placed_total.labels(result="not_found").inc()
            raise OrderedFruitNotFound(f"Fruit {data.fruit_id} not found")

        if fruit.stock <= 0:
            fruitshop_orders_placed_total.labels(result="out_of_stock").inc()
            raise OutOfStock(f"Fruit {fruit.name} is out of stock")

        quantity = clamp_quantity(data.quantity, fruit.stock)
        order = Order(
            fruit=fruit,
            quantity=quantity,
            customer_name=data.customer_name.strip(),
            contact=data.contact.strip(),
            status=OrderStatus.PENDING.value,
        )
        order = await OrderRepository.create_order(db, order)

        fruitshop_orders_placed_total.labels(result="success").inc()
        logger.info(
            "order_placed",
            order_id=order.id,
            fruit_id=fruit.id,
            requested=data.quantity,
            quantity=quantity,
        )
        return order

    @staticmethod
    async def list_orders(db: AsyncSession):
        return await OrderRepository.get_all_orders(db)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        return await OrderRepository.get_order(db, order_id)

    @staticmethod
    async def transition(db: AsyncSession, order_id: int, target: OrderStatus):
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found")

        current = order.status
        if not can_transition(current, target.value):
            raise InvalidTransition(f"{current} -> {target.value}")

        order = await OrderRepository.update_status(db, order, target.value)
        fruitshop_order_status_transitions_total.labels(
            from_status=current, to_status=target.value
        ).inc()
        logger.info("order_status_changed", order_id=order.id, from_status=current, to_status=target.value)
        return order

    @staticmethod
    async def whatsapp_link(db: AsyncSession, order_id: int) -> WhatsAppLink:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found")
        if order.status != OrderStatus.PENDING.value:
            raise MessageUnavailable("Payment messages are only sent for pending orders")
        if not contact_digits(order.contact):
            raise MessageUnavailable("Contact has no phone digits")

        message = build_payment_message(
            customer_name=order.customer_name,
            fruit_name=order.fruit.name,
            quantity=order.quantity,
            total=order.total_price,
        )
        return WhatsAppLink(message=message, url=build_whatsapp_url(order.contact, message))
