from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from shared.config.database import Base
from services.catalog_service.models import Fruit  # noqa: F401 (relationship target)

from .rules import OrderStatus

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    fruit_id = Column(Integer, ForeignKey("fruits.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False) # kg
    customer_name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=False)
    status = Column(String(32), nullable=False, default=OrderStatus.PENDING.value) # pending, processing, completed, cancelled
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    fruit = relationship("Fruit", lazy="selectin")

    @property
    def total_price(self) -> float:
        # Display only: uses the fruit's current price
        return self.fruit.price * self.quantity
