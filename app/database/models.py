# Central models file so every table is registered on Base.metadata

from .core import Base

from ..orders.models import Order

# Export all models
__all__ = [
    "Base",
    "Order",
]
