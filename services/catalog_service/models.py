from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, CheckConstraint
from shared.config.database import Base

from .catalog import max_orderable, stock_status


class Fruit(Base):
    __tablename__ = "fruits"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_fruits_stock_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False) # per kg, IDR
    stock = Column(Integer, nullable=False, default=0) # kg
    image = Column(String(1024), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    @property
    def stock_status(self) -> str:
        return stock_status(self.stock).value

    @property
    def orderable(self) -> bool:
        return self.stock > 0

    @property
    def max_orderable(self) -> int:
        return max_orderable(self.stock)
