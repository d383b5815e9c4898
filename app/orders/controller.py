from typing import Optional

from fastapi import APIRouter, Body, Depends, Request

from ..database.core import SessionFactory
from ..schemas.orders import OrderRequest, OrderResponse
from ..services.pricing_engine import PricingEngine
from .service import OrderService

router = APIRouter()


def get_pricing_engine(request: Request) -> PricingEngine:
    return request.app.state.pricing_engine


@router.post("/order", response_model=OrderResponse, response_model_exclude_none=True)
def create_order(
    session_factory: SessionFactory,
    order_data: Optional[OrderRequest] = Body(None),
    pricing: PricingEngine = Depends(get_pricing_engine),
):
    """Quote a print order; persist it when `save` is set. A missing body quotes zero."""
    if order_data is None:
        order_data = OrderRequest()
    return OrderService.place_order(session_factory, order_data, pricing)
