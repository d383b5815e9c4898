from .controller import router
from .models import Order
from .repository import OrderRepository
from .service import OrderService

__all__ = ["router", "Order", "OrderRepository", "OrderService"]
