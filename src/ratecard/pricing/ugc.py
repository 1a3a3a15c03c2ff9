"""UGC pricing.

UGC creators are paid for production, not audience, so follower count and
engagement never enter the price. Only the UGC format, usage rights,
whitelisting and season matter.
"""

from ratecard.domain.models import CreatorProfile, ParsedBrief
from ratecard.domain.types import PricingRoute, resolve_currency
from ratecard.pricing.classifiers import round_to_nearest_five
from ratecard.pricing.layers import (
    LayerStack,
    apply_complexity,
    apply_seasonal,
    apply_usage_rights,
    apply_whitelisting,
    format_premium,
)
from ratecard.pricing.results import PricingResult
from ratecard.pricing.tables import UGC_BASE_RATES, UGC_FORMAT_COMPLEXITY


def calculate_ugc_price(brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    """Price UGC deliverables through five layers.

    UGC Base Rate -> Usage Rights -> Whitelisting -> Complexity -> Seasonal.

    Args:
        brief: The parsed brief; ``ugc_format`` selects the base rate.
        profile: Used only for the quote currency.

    Returns:
        PricingResult tagged ``ugc``.
    """
    currency, symbol = resolve_currency(profile.currency)
    ugc_format = brief.ugc_format
    base_rate = UGC_BASE_RATES[ugc_format]

    stack = LayerStack(
        name="UGC Base Rate",
        description=f"{ugc_format.capitalize()} content base rate",
        base_value=f"{symbol}{base_rate}",
        base_amount=base_rate,
    )
    rights_value = apply_usage_rights(stack, brief.usage_rights)
    whitelisting_value = apply_whitelisting(stack, brief.usage_rights)
    complexity_value = apply_complexity(stack, UGC_FORMAT_COMPLEXITY[ugc_format])
    seasonal_value = apply_seasonal(stack, brief)

    price = round_to_nearest_five(stack.price)
    quantity = brief.content.quantity
    formula = (
        f"{symbol}{base_rate}"
        f" × (1 {format_premium(rights_value)})"
        f" × (1 {format_premium(whitelisting_value)})"
        f" × (1 {format_premium(complexity_value)})"
        f" × (1 {format_premium(seasonal_value)})"
    )

    return PricingResult(
        price_per_deliverable=price,
        quantity=quantity,
        total_price=price * quantity,
        currency=currency,
        currency_symbol=symbol,
        layers=tuple(stack.layers),
        formula=formula,
        pricing_model=PricingRoute.UGC,
    )
