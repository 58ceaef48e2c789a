from .jwt_handler import create_access_token, verify_access_token
from .access import AdminGate, Principal, evaluate_admin_gate, ADMIN_ROLE, CUSTOMER_ROLE
from .rate_limiter import limiter, order_rate_limit, user_id_or_ip

__all__ = [
    "create_access_token",
    "verify_access_token",
    "AdminGate",
    "Principal",
    "evaluate_admin_gate",
    "ADMIN_ROLE",
    "CUSTOMER_ROLE",
    "limiter",
    "order_rate_limit",
    "user_id_or_ip"
]
