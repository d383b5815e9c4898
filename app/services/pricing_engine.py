# app/services/pricing_engine.py

import logging
import math
from typing import Any, Optional

from app.services.pricing_models import (
    DEFAULT_BASE_COST,
    DEFAULT_MULTIPLIER,
    DEFAULT_USD_TO_INR_RATE,
    INFILL_MULTIPLIERS,
    MATERIAL_BASE_COSTS,
    QUALITY_MULTIPLIERS,
    PriceQuote,
)

logger = logging.getLogger(__name__)


def base_cost(material: Optional[str]) -> float:
    """Per-gram USD cost for a material, 0.05 when unrecognized."""
    return MATERIAL_BASE_COSTS.get(material, DEFAULT_BASE_COST)


def quality_multiplier(quality: Optional[str]) -> float:
    return QUALITY_MULTIPLIERS.get(quality, DEFAULT_MULTIPLIER)


def infill_multiplier(infill: Optional[str]) -> float:
    return INFILL_MULTIPLIERS.get(infill, DEFAULT_MULTIPLIER)


def coerce_weight(value: Any) -> float:
    """
    Turn a caller-supplied weight into grams.

    Missing, non-numeric, non-finite and negative values all become 0 so a
    quote degrades to a zero cost instead of failing.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            weight = float(value)
        except OverflowError:
            logger.debug(f"Weight {value!r} is out of float range, treating as 0")
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            weight = float(text)
        except ValueError:
            logger.debug(f"Non-numeric weight {value!r}, treating as 0")
            return 0.0
    else:
        return 0.0

    if not math.isfinite(weight) or weight < 0:
        return 0.0
    return weight


class PricingEngine:
    """
    Stateless price calculator.

    Holds nothing but the USD to INR exchange rate, so one instance can be
    shared by every request.
    """

    def __init__(self, exchange_rate: float = DEFAULT_USD_TO_INR_RATE):
        self.exchange_rate = exchange_rate

    def quote(
        self,
        material: Optional[str],
        quality: Optional[str],
        infill: Optional[str],
        weight: Any,
    ) -> PriceQuote:
        """
        Price a print order.

        Args:
            material: Material label, e.g. "PLA"
            quality: Quality label, e.g. "0.2 mm Standard Quality"
            infill: Infill percentage label, e.g. "30%"
            weight: Weight in grams as supplied by the caller

        Returns:
            PriceQuote with raw USD and INR costs
        """
        grams = coerce_weight(weight)
        material_cost = base_cost(material)
        quality_mult = quality_multiplier(quality)
        infill_mult = infill_multiplier(infill)

        cost_usd = material_cost * grams * quality_mult * infill_mult
        cost_inr = cost_usd * self.exchange_rate

        return PriceQuote(
            weight=grams,
            base_cost=material_cost,
            quality_multiplier=quality_mult,
            infill_multiplier=infill_mult,
            cost_usd=cost_usd,
            cost_inr=cost_inr,
        )
