"""Classifiers over the pricing tables.

Classifiers never raise on unrecognised input. Each one normalises its key
(trim, lowercase, whitespace to underscore) and falls back to a documented
default. The defaults are deliberately not uniform: a missing region prices as
the United States baseline (1.0x) while a named but unknown region prices as
``other`` (0.7x).
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from ratecard.domain.types import (
    AffiliateCategory,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    Region,
    SeasonalPeriod,
    WhitelistingType,
)
from ratecard.pricing.tables import (
    AFFILIATE_CATEGORY_DISPLAY_NAMES,
    AFFILIATE_COMMISSION_RATES,
    DEFAULT_NICHE_PREMIUM,
    DEFAULT_PLATFORM_MULTIPLIER,
    DEFAULT_REGION,
    DEFAULT_WHITELISTING_TYPE,
    DURATION_TIERS,
    ENGAGEMENT_THRESHOLDS,
    FORMAT_COMPLEXITY,
    NICHE_CATEGORY_NAMES,
    NICHE_PREMIUMS,
    PLATFORM_DISPLAY_NAMES,
    PLATFORM_MULTIPLIERS,
    REGION_DISPLAY_NAMES,
    REGIONAL_MULTIPLIERS,
    SEASONAL_DISPLAY_NAMES,
    SEASONAL_PREMIUMS,
    SEASONAL_WINDOWS,
    TIER_THRESHOLDS,
    WHITELISTING_DISPLAY_NAMES,
    WHITELISTING_PREMIUMS,
)

FIVE = Decimal("5")


@dataclass(frozen=True)
class SeasonalPremium:
    """Seasonal premium resolved for a campaign date.

    Attributes:
        premium: Fraction added to 1 by the Seasonal layer.
        period: The seasonal window the date falls in.
        display_name: Human-readable name of the window.
    """

    premium: Decimal
    period: SeasonalPeriod
    display_name: str


@dataclass(frozen=True)
class AffiliateCategoryRates:
    """Typical commission range for an affiliate product category."""

    min: Decimal
    max: Decimal
    default: Decimal
    display_name: str


def _normalize(value: str) -> str:
    return "_".join(value.strip().lower().split())


def round_to_nearest_five(amount: Decimal) -> Decimal:
    """Round a currency amount to the nearest multiple of 5 (halves round up).

    Args:
        amount: The amount to round.

    Returns:
        A whole-unit Decimal divisible by 5.
    """
    return (amount / FIVE).quantize(Decimal("1"), rounding=ROUND_HALF_UP) * FIVE


def calculate_tier(followers: int) -> CreatorTier:
    """Classify a follower count into a creator tier.

    Lower bounds belong to the higher tier: 10,000 is micro, 9,999 is nano.

    Args:
        followers: Total follower count (non-negative).

    Returns:
        The matching CreatorTier.
    """
    for lower_bound, tier in TIER_THRESHOLDS:
        if followers >= lower_bound:
            return tier
    return CreatorTier.NANO


def _niche_key(niche: str) -> str:
    # Niche keys are space separated ("high-end fashion")
    return " ".join(niche.lower().replace("_", " ").split())


def get_niche_premium(niche: str | None) -> Decimal:
    """Look up the premium multiplier for a niche (default 1.0x)."""
    if not niche:
        return DEFAULT_NICHE_PREMIUM
    return NICHE_PREMIUMS.get(_niche_key(niche), DEFAULT_NICHE_PREMIUM)


def get_niche_category_name(niche: str) -> str:
    """Return the display category for a niche, or ``"Other"``."""
    return NICHE_CATEGORY_NAMES.get(_niche_key(niche), "Other")


def get_platform_multiplier(platform: str | None) -> Decimal:
    """Look up the platform multiplier (default 1.0x for missing or unknown)."""
    if not platform:
        return DEFAULT_PLATFORM_MULTIPLIER
    return PLATFORM_MULTIPLIERS.get(_normalize(platform), DEFAULT_PLATFORM_MULTIPLIER)


def get_platform_display_name(platform: str | None) -> str:
    """Return the display name for a platform, echoing unknown input."""
    if not platform:
        return "Unknown Platform"
    return PLATFORM_DISPLAY_NAMES.get(_normalize(platform), platform)


def resolve_region(region: str | None) -> Region:
    """Resolve a region string, distinguishing missing from unrecognised.

    Args:
        region: Free-text region identifier, e.g. ``"United Kingdom"``.

    Returns:
        The default region when *region* is empty or missing,
        ``Region.OTHER`` when it is present but unknown.
    """
    if not region or not region.strip():
        return DEFAULT_REGION
    try:
        return Region(_normalize(region))
    except ValueError:
        return Region.OTHER


def get_regional_multiplier(region: str | None) -> Decimal:
    """Look up the regional multiplier (1.0x when missing, 0.7x when unknown)."""
    return REGIONAL_MULTIPLIERS[resolve_region(region)]


def get_region_display_name(region: str | None) -> str:
    """Return the display name of the resolved region."""
    return REGION_DISPLAY_NAMES[resolve_region(region)]


def get_engagement_multiplier(engagement_rate: float | Decimal) -> Decimal:
    """Map an engagement rate percentage to its multiplier band.

    Bands: <1% 0.8x, <3% 1.0x, <5% 1.3x, <8% 1.6x, otherwise 2.0x.
    """
    rate = Decimal(str(engagement_rate))
    for upper_bound, multiplier in ENGAGEMENT_THRESHOLDS:
        if upper_bound is None or rate < upper_bound:
            return multiplier
    return ENGAGEMENT_THRESHOLDS[-1][1]


def get_duration_premium(duration_days: int) -> Decimal:
    """Return the usage-rights premium for a licence duration in days."""
    for max_days, premium in DURATION_TIERS:
        if max_days is None or duration_days <= max_days:
            return premium
    return DURATION_TIERS[-1][1]


def resolve_whitelisting_type(whitelisting_type: str | None) -> WhitelistingType:
    """Resolve a whitelisting string, defaulting to ``none``."""
    if not whitelisting_type:
        return DEFAULT_WHITELISTING_TYPE
    try:
        return WhitelistingType(_normalize(whitelisting_type))
    except ValueError:
        return DEFAULT_WHITELISTING_TYPE


def get_whitelisting_premium(whitelisting_type: str | None = None) -> Decimal:
    """Return the whitelisting premium (0 for missing or unknown types)."""
    return WHITELISTING_PREMIUMS[resolve_whitelisting_type(whitelisting_type)]


def get_whitelisting_display_name(whitelisting_type: str | None) -> str:
    """Return the display name of the resolved whitelisting type."""
    return WHITELISTING_DISPLAY_NAMES[resolve_whitelisting_type(whitelisting_type)]


def get_complexity(content_format: ContentFormat) -> ComplexityLevel:
    """Return the production complexity implied by a content format."""
    return FORMAT_COMPLEXITY[content_format]


def _coerce_date(value: date | datetime | str | None) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            pass
    return date.today()


def get_seasonal_period(day: date) -> SeasonalPeriod:
    """Find the highest-priority seasonal window containing *day*."""
    key = (day.month, day.day)
    for start, end, period in SEASONAL_WINDOWS:
        if start <= key <= end:
            return period
    return SeasonalPeriod.DEFAULT


def get_seasonal_premium(
    campaign_date: date | datetime | str | None = None,
) -> SeasonalPremium:
    """Resolve the seasonal premium for a campaign date.

    Windows, in priority order:

    - Q4 Holiday (Nov 1 - Dec 31): +25%
    - Back to School (Aug 1 - Sep 15): +15%
    - Valentine's (Feb 1 - 14): +10%
    - Summer (Jun 1 - Jul 31, August yields to Back to School): +5%
    - Otherwise: 0%

    Args:
        campaign_date: A date, datetime or ISO date string. Missing or
            unparsable values are treated as today.

    Returns:
        SeasonalPremium with premium, period and display name.
    """
    period = get_seasonal_period(_coerce_date(campaign_date))
    return SeasonalPremium(
        premium=SEASONAL_PREMIUMS[period],
        period=period,
        display_name=SEASONAL_DISPLAY_NAMES[period],
    )


def get_affiliate_category_rates(category: str | None) -> AffiliateCategoryRates:
    """Return the typical commission range for a product category.

    Unknown or missing categories use the ``other`` range (10-15%).
    """
    try:
        resolved = AffiliateCategory(_normalize(category or "other"))
    except ValueError:
        resolved = AffiliateCategory.OTHER
    low, high, default = AFFILIATE_COMMISSION_RATES[resolved]
    return AffiliateCategoryRates(
        min=low,
        max=high,
        default=default,
        display_name=AFFILIATE_CATEGORY_DISPLAY_NAMES[resolved],
    )
