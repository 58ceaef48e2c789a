"""Pure catalog derivations: search filter and stock badges."""
from enum import Enum
from typing import Iterable, List, Protocol, TypeVar

from shared.config.settings import LOW_STOCK_THRESHOLD, MAX_ORDER_QUANTITY


class StockStatus(str, Enum):
    AVAILABLE = "available"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class Searchable(Protocol):
    name: str
    description: str


T = TypeVar("T", bound=Searchable)


def filter_fruits(fruits: Iterable[T], query: str | None) -> List[T]:
    """
    Keep the fruits whose name or description contains ``query``,
    ignoring case. Only the empty query keeps everything; whitespace is matched like
    any other character. Input order is preserved.
    """
    fruits = list(fruits)
    if not query:
        return fruits

    needle = query.lower()
    return [
        fruit for fruit in fruits
        if needle in (fruit.name or "").lower()
        or needle in (fruit.description or "").lower()
    ]


def stock_status(stock: int) -> StockStatus:
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.AVAILABLE


def is_low_stock(stock: int) -> bool:
    """Dashboard notion of low stock; unlike the badge it includes empty stock."""
    return stock <= LOW_STOCK_THRESHOLD


def max_orderable(stock: int) -> int:
    return max(0, min(stock, MAX_ORDER_QUANTITY))
