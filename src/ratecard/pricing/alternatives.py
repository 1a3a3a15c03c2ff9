"""Affiliate, hybrid and performance pricing.

Affiliate deals pay commission only. Hybrid deals guarantee half the
sponsored rate and add commission on top. Performance deals guarantee the full
sponsored rate and add a bonus paid when a caller-evaluated threshold is met.
Every amount is rounded to the nearest 5 independently.
"""

from decimal import Decimal

from ratecard.domain.models import AffiliateConfig, PerformanceConfig
from ratecard.domain.types import CurrencyCode, PricingRoute
from ratecard.pricing.classifiers import (
    get_affiliate_category_rates,
    round_to_nearest_five,
)
from ratecard.pricing.layers import ONE
from ratecard.pricing.results import (
    AffiliateEarningsBreakdown,
    CommissionRange,
    HybridPricingBreakdown,
    PerformanceBonusBreakdown,
    PricingLayer,
    PricingResult,
)
from ratecard.pricing.tables import HYBRID_BASE_FEE_SHARE

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def calculate_affiliate_earnings(config: AffiliateConfig) -> AffiliateEarningsBreakdown:
    """Estimate commission earnings.

    Formula: estimated_sales x average_order_value x affiliate_rate / 100,
    rounded to the nearest 5. The category only supplies a typical-rate range
    for display.

    Args:
        config: Commission terms.

    Returns:
        AffiliateEarningsBreakdown with the rounded earnings.
    """
    earnings = round_to_nearest_five(
        config.estimated_sales * config.average_order_value * config.affiliate_rate / HUNDRED
    )
    category_rate_range = None
    if config.category:
        rates = get_affiliate_category_rates(config.category)
        category_rate_range = CommissionRange(min=rates.min, max=rates.max)
    return AffiliateEarningsBreakdown(
        commission_rate=config.affiliate_rate,
        estimated_sales=config.estimated_sales,
        average_order_value=config.average_order_value,
        estimated_earnings=earnings,
        category_rate_range=category_rate_range,
    )


def calculate_hybrid_price(full_rate: Decimal, config: AffiliateConfig) -> HybridPricingBreakdown:
    """Split a sponsored rate into a guaranteed base fee plus commission.

    Args:
        full_rate: The undiscounted sponsored price.
        config: Commission terms for the affiliate portion.

    Returns:
        HybridPricingBreakdown where ``base_fee`` is half the full rate and
        ``combined_estimate`` is base fee plus estimated earnings.
    """
    affiliate = calculate_affiliate_earnings(config)
    base_fee = round_to_nearest_five(full_rate * HYBRID_BASE_FEE_SHARE)
    return HybridPricingBreakdown(
        base_fee=base_fee,
        full_rate=round_to_nearest_five(full_rate),
        base_discount=((ONE - HYBRID_BASE_FEE_SHARE) * HUNDRED).quantize(ONE),
        affiliate_earnings=affiliate,
        combined_estimate=round_to_nearest_five(base_fee + affiliate.estimated_earnings),
    )


def calculate_performance_price(
    base_fee: Decimal, config: PerformanceConfig
) -> PerformanceBonusBreakdown:
    """Attach a performance bonus to the full, undiscounted sponsored rate.

    Args:
        base_fee: The sponsored price, guaranteed in full.
        config: Bonus threshold, metric and amount.

    Returns:
        PerformanceBonusBreakdown with ``potential_total`` = base fee + bonus.
    """
    rounded_base = round_to_nearest_five(base_fee)
    bonus = round_to_nearest_five(config.bonus_amount)
    return PerformanceBonusBreakdown(
        base_fee=rounded_base,
        bonus_threshold=config.bonus_threshold,
        bonus_metric=config.bonus_metric,
        bonus_amount=bonus,
        potential_total=round_to_nearest_five(rounded_base + bonus),
    )


def _affiliate_layers(
    affiliate: AffiliateEarningsBreakdown, category: str | None, symbol: str
) -> tuple[PricingLayer, ...]:
    rate = affiliate.commission_rate
    earnings = affiliate.estimated_earnings
    if category:
        rates = get_affiliate_category_rates(category)
        earnings_description = (
            f"{rates.display_name} category (typical: {rates.min}-{rates.max}%)"
        )
    else:
        earnings_description = "Projected commission earnings"
    return (
        PricingLayer(
            name="Commission Rate",
            description=f"{rate}% commission on sales",
            base_value=f"{rate}%",
            multiplier=rate / HUNDRED,
            adjustment=ZERO,
        ),
        PricingLayer(
            name="Estimated Sales",
            description=f"{affiliate.estimated_sales} projected sales",
            base_value=affiliate.estimated_sales,
            multiplier=ONE,
            adjustment=ZERO,
        ),
        PricingLayer(
            name="Average Order Value",
            description=f"{symbol}{affiliate.average_order_value} per order",
            base_value=f"{symbol}{affiliate.average_order_value}",
            multiplier=ONE,
            adjustment=ZERO,
        ),
        PricingLayer(
            name="Estimated Earnings",
            description=earnings_description,
            base_value=f"{symbol}{earnings}",
            multiplier=ONE,
            adjustment=earnings,
        ),
    )


def build_affiliate_result(
    config: AffiliateConfig,
    *,
    quantity: int,
    currency: CurrencyCode,
    symbol: str,
) -> PricingResult:
    """Build a commission-only quote with four layers and no flat fee."""
    affiliate = calculate_affiliate_earnings(config)
    earnings = affiliate.estimated_earnings
    return PricingResult(
        price_per_deliverable=ZERO,
        quantity=quantity,
        total_price=earnings,
        currency=currency,
        currency_symbol=symbol,
        layers=_affiliate_layers(affiliate, config.category, symbol),
        formula=(
            f"{affiliate.estimated_sales} sales × {symbol}{affiliate.average_order_value} AOV"
            f" × {affiliate.commission_rate}% = {symbol}{earnings}"
        ),
        pricing_model=PricingRoute.AFFILIATE,
        affiliate_breakdown=affiliate,
    )


def build_hybrid_result(sponsored: PricingResult, config: AffiliateConfig) -> PricingResult:
    """Extend a sponsored quote into a hybrid quote.

    The sponsored layers are kept and followed by "Hybrid Discount" and
    "Affiliate Commission". The total is the combined estimate.
    """
    symbol = sponsored.currency_symbol
    hybrid = calculate_hybrid_price(sponsored.total_price, config)
    affiliate = hybrid.affiliate_earnings
    kept_share = HUNDRED - hybrid.base_discount
    layers = sponsored.layers + (
        PricingLayer(
            name="Hybrid Discount",
            description=f"Base fee reduced to {kept_share}% for hybrid model",
            base_value=f"-{hybrid.base_discount}%",
            multiplier=HYBRID_BASE_FEE_SHARE,
            adjustment=-(sponsored.total_price * (ONE - HYBRID_BASE_FEE_SHARE)),
        ),
        PricingLayer(
            name="Affiliate Commission",
            description=(
                f"{affiliate.commission_rate}% on {affiliate.estimated_sales} est. sales"
            ),
            base_value=f"{affiliate.commission_rate}%",
            multiplier=ONE,
            adjustment=affiliate.estimated_earnings,
        ),
    )
    return sponsored.model_copy(
        update={
            "price_per_deliverable": hybrid.base_fee,
            "total_price": hybrid.combined_estimate,
            "layers": layers,
            "formula": (
                f"({symbol}{hybrid.full_rate} × {kept_share}%)"
                f" + ({affiliate.estimated_sales} × {symbol}{affiliate.average_order_value}"
                f" × {affiliate.commission_rate}%) = {symbol}{hybrid.combined_estimate}"
            ),
            "pricing_model": PricingRoute.HYBRID,
            "affiliate_breakdown": affiliate,
            "hybrid_breakdown": hybrid,
        }
    )


def build_performance_result(
    sponsored: PricingResult, config: PerformanceConfig
) -> PricingResult:
    """Extend a sponsored quote with a "Performance Bonus" layer.

    The total is the guaranteed base fee; the bonus only appears in
    ``potential_total``.
    """
    symbol = sponsored.currency_symbol
    performance = calculate_performance_price(sponsored.total_price, config)
    threshold = performance.bonus_threshold
    metric = performance.bonus_metric
    layers = sponsored.layers + (
        PricingLayer(
            name="Performance Bonus",
            description=f"+{symbol}{performance.bonus_amount} if {threshold:,} {metric} reached",
            base_value=f"{threshold} {metric}",
            multiplier=ONE,
            adjustment=performance.bonus_amount,
        ),
    )
    return sponsored.model_copy(
        update={
            "total_price": performance.base_fee,
            "layers": layers,
            "formula": (
                f"{symbol}{performance.base_fee} base + {symbol}{performance.bonus_amount}"
                f" bonus (at {threshold} {metric}) = {symbol}{performance.potential_total}"
                " potential"
            ),
            "pricing_model": PricingRoute.PERFORMANCE,
            "performance_breakdown": performance,
        }
    )
