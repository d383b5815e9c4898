import logging

from sqlalchemy.orm import Session

from ..schemas.orders import OrderRequest
from ..services.pricing_models import PriceQuote
from .models import Order

logger = logging.getLogger(__name__)

class OrderRepository:

    @staticmethod
    def save(db: Session, order_data: OrderRequest, quote: PriceQuote) -> Order:
        """Insert one priced order and return it with its generated id."""
        order = Order(
            file_url=order_data.file_url,
            file_path=order_data.file_path,
            s3_key=order_data.s3_key,
            material=order_data.material,
            color=order_data.color,
            infill=order_data.infill,
            quality=order_data.quality,
            weight=quote.weight,
            cost_usd=quote.cost_usd_rounded,
            cost_inr=quote.cost_inr_rounded,
            customer_name=order_data.name,
            email=order_data.email,
            phone=order_data.number,
        )

        try:
            db.add(order)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(order)

        logger.info(f"Order {order.id} saved", extra={"order_id": order.id, "cost_usd": order.cost_usd})
        return order
