"""Pricing result models.

A ``PricingResult`` is recomputed on every call and never mutated. Model
specific breakdowns are attached only for the pricing route that produced
them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from ratecard.domain.models import MonthlyDeliverables
from ratecard.domain.types import (
    BonusMetric,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    PricingRoute,
)
from ratecard.pricing.tables import QUOTE_VALID_DAYS


class PricingLayer(BaseModel):
    """One named adjustment in a price breakdown.

    Attributes:
        name: Layer name, e.g. ``"Base Rate"``.
        description: Human-readable explanation of the layer.
        base_value: The input the layer was resolved from (``"$400"``,
            ``"4.5%"``, ``"reel"``, or a count).
        multiplier: Factor applied by the layer (1 means no change).
        adjustment: Currency change contributed by the layer, or the
            starting amount for base layers.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    base_value: str | int
    multiplier: Decimal
    adjustment: Decimal


class CommissionRange(BaseModel):
    """Typical commission percentage range for a product category."""

    model_config = ConfigDict(frozen=True)

    min: Decimal
    max: Decimal


class AffiliateEarningsBreakdown(BaseModel):
    """Projected commission earnings."""

    model_config = ConfigDict(frozen=True)

    commission_rate: Decimal
    estimated_sales: int
    average_order_value: Decimal
    estimated_earnings: Decimal
    category_rate_range: CommissionRange | None = None


class HybridPricingBreakdown(BaseModel):
    """Guaranteed base fee plus projected commission."""

    model_config = ConfigDict(frozen=True)

    base_fee: Decimal
    full_rate: Decimal
    # Percentage of the full rate given up in exchange for commission
    base_discount: Decimal
    affiliate_earnings: AffiliateEarningsBreakdown
    combined_estimate: Decimal


class PerformanceBonusBreakdown(BaseModel):
    """Guaranteed base fee plus a bonus paid when a threshold is reached."""

    model_config = ConfigDict(frozen=True)

    base_fee: Decimal
    bonus_threshold: int
    bonus_metric: BonusMetric
    bonus_amount: Decimal
    potential_total: Decimal


class DeliverableRates(BaseModel):
    """Per-piece rates for retainer deliverables."""

    model_config = ConfigDict(frozen=True)

    post_rate: Decimal
    story_rate: Decimal
    reel_rate: Decimal
    video_rate: Decimal


class AmbassadorPerksBreakdown(BaseModel):
    """Value of ambassador add-ons over the whole contract."""

    model_config = ConfigDict(frozen=True)

    exclusivity_premium: Decimal
    exclusivity_type: ExclusivityLevel
    product_seeding_value: Decimal
    events_included: int
    event_day_rate: Decimal
    event_appearances_value: Decimal
    total_perks_value: Decimal


class RetainerPricingBreakdown(BaseModel):
    """Monthly and total contract values for a retainer deal."""

    model_config = ConfigDict(frozen=True)

    deal_length: DealLength
    contract_months: int
    # Percentage, e.g. Decimal("15") for a 15% volume discount
    volume_discount: Decimal
    full_rates: DeliverableRates
    discounted_rates: DeliverableRates
    monthly_deliverables: MonthlyDeliverables
    monthly_content_value_full: Decimal
    monthly_content_value_discounted: Decimal
    monthly_savings: Decimal
    monthly_rate: Decimal
    total_contract_value: Decimal
    ambassador_breakdown: AmbassadorPerksBreakdown | None = None


class PricingResult(BaseModel):
    """Complete priced quote with its layer-by-layer breakdown."""

    model_config = ConfigDict(frozen=True)

    price_per_deliverable: Decimal
    quantity: int
    total_price: Decimal
    currency: CurrencyCode
    currency_symbol: str
    valid_days: int = QUOTE_VALID_DAYS
    layers: tuple[PricingLayer, ...]
    formula: str
    pricing_model: PricingRoute = PricingRoute.FLAT_FEE
    affiliate_breakdown: AffiliateEarningsBreakdown | None = None
    hybrid_breakdown: HybridPricingBreakdown | None = None
    performance_breakdown: PerformanceBonusBreakdown | None = None
    retainer_breakdown: RetainerPricingBreakdown | None = None

    def layer(self, name: str) -> PricingLayer:
        """Return the first layer called *name*.

        Raises:
            KeyError: If no layer has that name.
        """
        for candidate in self.layers:
            if candidate.name == name:
                return candidate
        raise KeyError(name)
