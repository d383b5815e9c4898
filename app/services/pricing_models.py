# app/services/pricing_models.py

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Per-gram base cost in USD for each print material
MATERIAL_BASE_COSTS: Mapping[str, float] = MappingProxyType({
    "PLA": 0.05,
    "ABS": 0.06,
    "PETG": 0.07,
    "TPU": 0.08,
    "ASA": 0.07,
    "PLA Glass": 0.06,
    "Engineering": 0.12,
    "ePLA": 0.06,
})
DEFAULT_BASE_COST = 0.05

QUALITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "0.2 mm Standard Quality": 1.0,
    "0.15 mm Medium Quality": 1.2,
    "0.1 mm High Quality": 1.5,
    "0.15 Standard Quality + 0.25 mm Nozzle": 1.1,
    "0.2 mm Standard Quality + 0.6mm Nozzle": 1.05,
})

INFILL_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "10%": 0.5,
    "15%": 0.6,
    "20%": 0.8,
    "30%": 1.0,
    "40%": 1.1,
    "50%": 1.2,
    "60%": 1.3,
    "70%": 1.4,
    "80%": 1.5,
    "90%": 1.6,
})
DEFAULT_MULTIPLIER = 1.0

DEFAULT_USD_TO_INR_RATE = 83.0


def format_amount(value: float) -> str:
    """Render a number as a fixed 2-decimal string."""
    return f"{value:.2f}"


@dataclass(frozen=True)
class PriceQuote:
    """Computed price for one print order."""
    weight: float
    base_cost: float
    quality_multiplier: float
    infill_multiplier: float
    cost_usd: float
    cost_inr: float

    @property
    def weight_display(self) -> str:
        return format_amount(self.weight)

    @property
    def cost_usd_display(self) -> str:
        return format_amount(self.cost_usd)

    @property
    def cost_inr_display(self) -> str:
        return format_amount(self.cost_inr)

    @property
    def cost_usd_rounded(self) -> float:
        return round(self.cost_usd, 2)

    @property
    def cost_inr_rounded(self) -> float:
        return round(self.cost_inr, 2)
