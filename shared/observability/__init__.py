from .setup import setup_observability
from .metrics import (
    fruitshop_orders_placed_total,
    fruitshop_order_status_transitions_total,
    fruitshop_catalog_mutations_total,
    fruitshop_low_stock_fruits
)
