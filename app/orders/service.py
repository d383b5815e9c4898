import logging

from sqlalchemy.orm import sessionmaker

from ..core.exceptions import OrderProcessingError
from ..schemas.orders import OrderRequest, OrderResponse
from ..services.pricing_engine import PricingEngine
from .repository import OrderRepository

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Order saved to DB."

class OrderService:

    @staticmethod
    def place_order(session_factory: sessionmaker, order_data: OrderRequest, pricing: PricingEngine) -> OrderResponse:
        """
        Quote an order and, when `save` is truthy, persist it.

        The session is only opened for saves and is always closed afterwards,
        returning its connection to the pool. Failures are logged and re-raised
        as OrderProcessingError so the caller never sees the cause.
        """
        try:
            quote = pricing.quote(
                material=order_data.material,
                quality=order_data.quality,
                infill=order_data.infill,
                weight=order_data.weight,
            )

            response = OrderResponse(
                weight=quote.weight_display,
                cost_usd=quote.cost_usd_display,
                cost_inr=quote.cost_inr_display,
            )

            if order_data.should_save:
                with session_factory() as db:
                    order = OrderRepository.save(db, order_data, quote)
                    response.order_id = order.id
                response.message = SAVED_MESSAGE

            return response
        except Exception as e:
            logger.exception(
                "Error in /api/order",
                extra={"material": order_data.material, "save": order_data.should_save},
            )
            raise OrderProcessingError(
                technical_details=f"{type(e).__name__}: {e}",
                context={"material": order_data.material, "save": order_data.should_save},
            ) from e
