from prometheus_client import Counter, Gauge

# Business Metrics
fruitshop_orders_placed_total = Counter(
    "fruitshop_orders_placed_total",
    "Total order placements attempted",
    ["result"] # Labels: 'success', 'out_of_stock', 'not_found'
)

fruitshop_order_status_transitions_total = Counter(
    "fruitshop_order_status_transitions_total",
    "Order status transitions applied by admins",
    ["from_status", "to_status"]
)

fruitshop_catalog_mutations_total = Counter(
    "fruitshop_catalog_mutations_total",
    "Catalog writes performed by admins",
    ["operation"] # Labels: 'create', 'update', 'delete'
)

fruitshop_low_stock_fruits = Gauge(
    "fruitshop_low_stock_fruits",
    "Fruits at or below the low stock threshold, as of the last dashboard read"
)
