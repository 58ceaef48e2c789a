from dataclasses import dataclass
from enum import Enum
from typing import Optional

ADMIN_ROLE = "admin"
CUSTOMER_ROLE = "customer"


@dataclass(frozen=True)
class Principal:
    user_id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class AdminGate(str, Enum):
    LOADING = "loading"
    GRANTED = "granted"
    REDIRECT = "redirect"


def evaluate_admin_gate(principal: Optional[Principal], loading: bool = False) -> AdminGate:
    """
    Decide what the admin area shows for the current session.

    While the session or role is still being resolved the answer is LOADING,
    never a premature REDIRECT. Only an authenticated admin is GRANTED.
    """
    if loading:
        return AdminGate.LOADING
    if principal is not None and principal.is_admin:
        return AdminGate.GRANTED
    return AdminGate.REDIRECT
