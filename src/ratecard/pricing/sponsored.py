"""Sponsored (flat-fee) pricing.

The sponsored price is the tier base rate multiplied through eleven layers in
a fixed order, then rounded to the nearest 5 currency units:

Base Rate -> Platform -> Regional -> Engagement Multiplier -> Niche Premium
-> Format Premium -> Fit Score -> Usage Rights -> Whitelisting -> Complexity
-> Seasonal
"""

from decimal import Decimal

from ratecard.domain.models import (
    CreatorProfile,
    DealQualityResult,
    ParsedBrief,
    ScoreInput,
)
from ratecard.domain.types import PricingRoute, resolve_currency
from ratecard.pricing.classifiers import (
    get_complexity,
    get_engagement_multiplier,
    get_niche_category_name,
    get_niche_premium,
    get_platform_display_name,
    get_platform_multiplier,
    get_region_display_name,
    get_regional_multiplier,
    resolve_region,
    round_to_nearest_five,
)
from ratecard.pricing.layers import (
    ONE,
    LayerStack,
    apply_complexity,
    apply_seasonal,
    apply_usage_rights,
    apply_whitelisting,
    format_premium,
)
from ratecard.pricing.results import PricingResult
from ratecard.pricing.tables import (
    BASE_RATES,
    DEFAULT_NICHE,
    FORMAT_PREMIUMS,
    TIER_DISPLAY_NAMES,
)


def _apply_score(stack: LayerStack, score: ScoreInput) -> Decimal:
    """Apply the fit score or deal quality layer and return its adjustment."""
    if isinstance(score, DealQualityResult):
        name = "Deal Quality"
        description = (
            f"{score.total_score}/100 - {score.quality_level.capitalize()} opportunity"
        )
    else:
        name = "Fit Score"
        description = f"{score.total_score}/100 - {score.fit_level.capitalize()} alignment"
    stack.apply(
        name=name,
        description=description,
        base_value=f"{score.total_score}/100",
        multiplier=ONE + score.price_adjustment,
    )
    return score.price_adjustment


def calculate_sponsored_price(
    profile: CreatorProfile,
    brief: ParsedBrief,
    score: ScoreInput,
) -> PricingResult:
    """Price a sponsored post through the full layer stack.

    Args:
        profile: The creator's audience profile.
        brief: The parsed campaign brief.
        score: Fit score or deal quality result supplying the fit adjustment.

    Returns:
        PricingResult tagged ``flat_fee`` with eleven layers.
    """
    currency, symbol = resolve_currency(profile.currency)
    tier = profile.tier
    base_rate = BASE_RATES[tier]

    stack = LayerStack(
        name="Base Rate",
        description=f"{TIER_DISPLAY_NAMES[tier]} tier creator rate",
        base_value=f"{symbol}{base_rate}",
        base_amount=base_rate,
    )

    platform = brief.content.platform
    platform_multiplier = get_platform_multiplier(platform)
    stack.apply(
        name="Platform",
        description=f"{get_platform_display_name(platform)} content rate",
        base_value=platform,
        multiplier=platform_multiplier,
    )

    regional_multiplier = get_regional_multiplier(profile.region)
    stack.apply(
        name="Regional",
        description=f"{get_region_display_name(profile.region)} market rate",
        base_value=str(resolve_region(profile.region)),
        multiplier=regional_multiplier,
    )

    engagement_rate = profile.avg_engagement_rate
    engagement_multiplier = get_engagement_multiplier(engagement_rate)
    stack.apply(
        name="Engagement Multiplier",
        description=f"{engagement_rate:.1f}% engagement rate",
        base_value=f"{engagement_rate:.1f}%",
        multiplier=engagement_multiplier,
    )

    niche = profile.primary_niche or DEFAULT_NICHE
    niche_multiplier = get_niche_premium(niche)
    stack.apply(
        name="Niche Premium",
        description=(
            f"{get_niche_category_name(niche)} content commands {niche_multiplier}x rates"
        ),
        base_value=niche,
        multiplier=niche_multiplier,
    )

    content_format = brief.content.format
    format_value = FORMAT_PREMIUMS[content_format]
    stack.apply(
        name="Format Premium",
        description=f"{content_format.capitalize()} content type",
        base_value=str(content_format),
        multiplier=ONE + format_value,
    )

    fit_value = _apply_score(stack, score)
    rights_value = apply_usage_rights(stack, brief.usage_rights)
    whitelisting_value = apply_whitelisting(stack, brief.usage_rights)
    complexity_value = apply_complexity(stack, get_complexity(content_format))
    seasonal_value = apply_seasonal(stack, brief)

    price = round_to_nearest_five(stack.price)
    quantity = brief.content.quantity

    formula = (
        f"({symbol}{base_rate} × {platform_multiplier:.2f} × {regional_multiplier:.2f}"
        f" × {engagement_multiplier:.1f} × {niche_multiplier:.1f})"
        f" × (1 {format_premium(format_value)})"
        f" × (1 {format_premium(fit_value)})"
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
        pricing_model=PricingRoute.FLAT_FEE,
    )
