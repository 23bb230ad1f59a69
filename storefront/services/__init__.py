from .carts import CartService
from .orders import ALLOWED_TRANSITIONS, OrderWorkflow, can_transition, is_terminal

__all__ = ["CartService", "OrderWorkflow", "ALLOWED_TRANSITIONS", "can_transition", "is_terminal"]
