"""Order quantity bounds and the status lifecycle."""
import math
import re
from enum import Enum
from typing import Any

from shared.config.settings import MAX_ORDER_QUANTITY


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# completed and cancelled are terminal
ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def can_transition(current: str, target: str) -> bool:
    try:
        current, target = OrderStatus(current), OrderStatus(target)
    except ValueError:
        return False
    return target in ALLOWED_TRANSITIONS[current]


def parse_quantity(raw: Any) -> int:
    """
    Lenient integer parse. Strings yield their leading integer (" 12kg" -> 12,
    "2.9" -> 2); floats truncate; anything without one falls back to 1.
    """
    if isinstance(raw, bool) or raw is None:
        return 1
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 1
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else 1


def clamp_quantity(raw: Any, stock: int, limit: int = MAX_ORDER_QUANTITY) -> int:
    """
    Clamp a requested quantity into [1, min(stock, limit)].

    Callers must refuse out-of-stock products before clamping; with no stock
    the upper bound collapses and the result is still 1.
    """
    upper = max(1, min(stock, limit))
    return max(1, min(upper, parse_quantity(raw)))
