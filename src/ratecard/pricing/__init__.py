"""Rate calculation engine.

Re-exports the classifiers, pricers and result types for convenient access:
    from ratecard.pricing import calculate_price, calculate_tier, PricingResult
"""

from ratecard.pricing.alternatives import (
    calculate_affiliate_earnings,
    calculate_hybrid_price,
    calculate_performance_price,
)
from ratecard.pricing.classifiers import (
    AffiliateCategoryRates,
    SeasonalPremium,
    calculate_tier,
    get_affiliate_category_rates,
    get_niche_premium,
    get_platform_multiplier,
    get_regional_multiplier,
    get_seasonal_premium,
    get_whitelisting_premium,
    round_to_nearest_five,
)
from ratecard.pricing.quick_estimate import (
    QuickEstimate,
    QuickEstimateRequest,
    calculate_quick_estimate,
)
from ratecard.pricing.results import (
    AffiliateEarningsBreakdown,
    HybridPricingBreakdown,
    PerformanceBonusBreakdown,
    PricingLayer,
    PricingResult,
    RetainerPricingBreakdown,
)
from ratecard.pricing.retainer import (
    calculate_ambassador_perks,
    calculate_deliverable_rates,
    calculate_retainer_price,
    get_event_day_rate,
    get_volume_discount,
)
from ratecard.pricing.router import calculate_price, resolve_pricing_route
from ratecard.pricing.sponsored import calculate_sponsored_price
from ratecard.pricing.ugc import calculate_ugc_price

__all__ = [
    "AffiliateCategoryRates",
    "AffiliateEarningsBreakdown",
    "HybridPricingBreakdown",
    "PerformanceBonusBreakdown",
    "PricingLayer",
    "PricingResult",
    "QuickEstimate",
    "QuickEstimateRequest",
    "RetainerPricingBreakdown",
    "SeasonalPremium",
    "calculate_affiliate_earnings",
    "calculate_ambassador_perks",
    "calculate_deliverable_rates",
    "calculate_hybrid_price",
    "calculate_performance_price",
    "calculate_price",
    "calculate_quick_estimate",
    "calculate_retainer_price",
    "calculate_sponsored_price",
    "calculate_tier",
    "calculate_ugc_price",
    "get_affiliate_category_rates",
    "get_event_day_rate",
    "get_niche_premium",
    "get_platform_multiplier",
    "get_regional_multiplier",
    "get_seasonal_premium",
    "get_volume_discount",
    "get_whitelisting_premium",
    "resolve_pricing_route",
    "round_to_nearest_five",
]
