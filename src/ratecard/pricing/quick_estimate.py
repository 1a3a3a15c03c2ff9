"""Quick rate estimates from minimal input.

A quick estimate needs only follower count, platform, content format and an
optional niche. It assumes a 3% engagement rate and a US audience, and
reports a +/-20% range around the estimate together with where that rate sits
among industry benchmarks for the tier.

Formula: base rate x platform x engagement(3%) x niche x (1 + format premium)
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field

from ratecard.domain.types import ContentFormat, CreatorTier
from ratecard.pricing.classifiers import (
    calculate_tier,
    get_niche_premium,
    get_platform_multiplier,
    round_to_nearest_five,
)
from ratecard.pricing.tables import (
    BASE_RATES,
    DEFAULT_NICHE,
    FORMAT_PREMIUMS,
    TIER_DISPLAY_NAMES,
)

# 3% sits at the top of the 1.0x engagement band for quick estimates
ASSUMED_ENGAGEMENT_MULTIPLIER = Decimal("1.0")
ESTIMATE_RANGE = Decimal("0.2")

# Potential with a full profile: high engagement 1.6x, usage rights +50%,
# exclusivity +30%
POTENTIAL_MULTIPLIER = Decimal("1.6") * Decimal("1.5") * Decimal("1.3")

MAX_FACTORS = 4


class TierBenchmarks(BaseModel):
    """Estimated 25th/50th/75th/90th percentile rates for a tier.

    These are industry estimates, not aggregated user data.
    """

    model_config = ConfigDict(frozen=True)

    p25: Decimal
    p50: Decimal
    p75: Decimal
    p90: Decimal


ESTIMATED_TIER_RANGES: dict[CreatorTier, TierBenchmarks] = {
    CreatorTier.NANO: TierBenchmarks(p25=100, p50=150, p75=225, p90=350),
    CreatorTier.MICRO: TierBenchmarks(p25=275, p50=400, p75=550, p90=750),
    CreatorTier.MID: TierBenchmarks(p25=550, p50=800, p75=1100, p90=1500),
    CreatorTier.RISING: TierBenchmarks(p25=1000, p50=1500, p75=2100, p90=3000),
    CreatorTier.MACRO: TierBenchmarks(p25=2000, p50=3000, p75=4500, p90=6500),
    CreatorTier.MEGA: TierBenchmarks(p25=4000, p50=6000, p75=9000, p90=14000),
    CreatorTier.CELEBRITY: TierBenchmarks(p25=8000, p50=12000, p75=20000, p90=35000),
}


class RateFactor(BaseModel):
    """A factor that can move a creator's rate, with its typical impact."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    impact: str


class RateRange(BaseModel):
    """Inclusive min/max rate pair."""

    model_config = ConfigDict(frozen=True)

    min: Decimal
    max: Decimal


class QuickEstimateRequest(BaseModel):
    """Minimal creator input for a quick estimate."""

    model_config = ConfigDict(frozen=True)

    follower_count: int = Field(ge=0)
    platform: str
    content_format: ContentFormat
    niche: str = DEFAULT_NICHE


class QuickEstimate(BaseModel):
    """Quick estimate with its range and benchmark comparison."""

    model_config = ConfigDict(frozen=True)

    min_rate: Decimal
    max_rate: Decimal
    base_rate: Decimal
    tier: CreatorTier
    tier_name: str
    platform: str
    content_format: ContentFormat
    niche: str
    percentile: int
    top_performer_range: RateRange
    potential_with_full_profile: Decimal
    rate_influencers: tuple[RateFactor, ...]
    missing_factors: tuple[RateFactor, ...]


# Factors that could raise the rate, in display priority order
HIGH_ENGAGEMENT = RateFactor(
    name="High Engagement",
    description="Engagement rate above 5% commands premium rates",
    impact="+20-60%",
)
USAGE_RIGHTS = RateFactor(
    name="Usage Rights",
    description="Brands using your content in ads pay more",
    impact="+25-100%",
)
EXCLUSIVITY = RateFactor(
    name="Exclusivity",
    description="Not working with competitors justifies higher rates",
    impact="+30-50%",
)
WHITELISTING = RateFactor(
    name="Whitelisting",
    description="Allowing brands to run your content as ads",
    impact="+50-200%",
)
Q4_HOLIDAY = RateFactor(
    name="Q4 Holiday Season",
    description="Brands pay more during peak shopping seasons",
    impact="+15-25%",
)
COMPLEX_PRODUCTION = RateFactor(
    name="Complex Production",
    description="Multi-location shoots or professional editing",
    impact="+15-50%",
)

# Inputs a full profile would supply
ACTUAL_ENGAGEMENT = RateFactor(
    name="Your Actual Engagement",
    description="High engagement = higher rates. We assumed 3% average.",
    impact="±30%",
)
AUDIENCE_LOCATION = RateFactor(
    name="Audience Location",
    description="US/UK audiences pay significantly more than global average.",
    impact="+40%",
)
PAST_BRAND_WORK = RateFactor(
    name="Past Brand Work",
    description="Portfolio with recognizable brands justifies premium rates.",
    impact="+15-25%",
)
CONTENT_QUALITY = RateFactor(
    name="Content Quality",
    description="Professional production value commands higher rates.",
    impact="+20-50%",
)
AUDIENCE_DEMOGRAPHICS = RateFactor(
    name="Audience Demographics",
    description="Age, income level, and interests affect brand value.",
    impact="+20-35%",
)
GROWTH_VELOCITY = RateFactor(
    name="Growth Velocity",
    description="Fast-growing accounts command premium rates.",
    impact="+10-20%",
)
NICHE_AUTHORITY = RateFactor(
    name="Niche Authority",
    description="Being a recognized expert in your niche adds value.",
    impact="+15-30%",
)

VIDEO_FORMATS = frozenset({ContentFormat.REEL, ContentFormat.VIDEO, ContentFormat.LIVE})
STILL_FORMATS = frozenset({ContentFormat.STATIC, ContentFormat.CAROUSEL})


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_percentile(rate: Decimal, tier: CreatorTier) -> int:
    """Estimate where a rate falls among the tier's benchmark rates.

    Interpolates linearly between benchmark points; rates above p90 approach
    but never exceed the 99th percentile.

    Args:
        rate: The estimated rate.
        tier: The creator tier to compare against.

    Returns:
        An integer percentile from 0 to 99.
    """
    bands = ESTIMATED_TIER_RANGES[tier]
    if rate <= bands.p25:
        return _round_half_up(rate / bands.p25 * 25)
    if rate <= bands.p50:
        return 25 + _round_half_up((rate - bands.p25) / (bands.p50 - bands.p25) * 25)
    if rate <= bands.p75:
        return 50 + _round_half_up((rate - bands.p50) / (bands.p75 - bands.p50) * 25)
    if rate <= bands.p90:
        return 75 + _round_half_up((rate - bands.p75) / (bands.p90 - bands.p75) * 15)
    return min(99, 90 + _round_half_up((rate - bands.p90) / bands.p90 * 9))


def get_top_performer_range(tier: CreatorTier) -> RateRange:
    """Return the p75-p90 benchmark range for a tier."""
    bands = ESTIMATED_TIER_RANGES[tier]
    return RateRange(min=bands.p75, max=bands.p90)


def calculate_potential_rate(base_rate: Decimal) -> Decimal:
    """Project the rate with high engagement, usage rights and exclusivity."""
    return (base_rate * POTENTIAL_MULTIPLIER).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def get_rate_influencers(
    tier: CreatorTier, content_format: ContentFormat
) -> tuple[RateFactor, ...]:
    """Pick the factors most likely to raise this creator's rate."""
    factors = [HIGH_ENGAGEMENT, USAGE_RIGHTS]
    if tier != CreatorTier.NANO:
        factors.append(EXCLUSIVITY)
    if content_format in (ContentFormat.REEL, ContentFormat.VIDEO):
        factors.append(WHITELISTING)
    factors.append(Q4_HOLIDAY)
    if content_format in (ContentFormat.VIDEO, ContentFormat.LIVE):
        factors.append(COMPLEX_PRODUCTION)
    return tuple(factors[:MAX_FACTORS])


def get_missing_factors(request: QuickEstimateRequest) -> tuple[RateFactor, ...]:
    """List the profile inputs that would most change the estimate."""
    tier = calculate_tier(request.follower_count)
    factors = [ACTUAL_ENGAGEMENT]
    # LinkedIn audiences are global
    if request.platform.strip().lower() != "linkedin":
        factors.append(AUDIENCE_LOCATION)
    factors.append(GROWTH_VELOCITY if tier == CreatorTier.NANO else PAST_BRAND_WORK)
    if request.content_format in VIDEO_FORMATS:
        factors.append(CONTENT_QUALITY)
    elif request.content_format in STILL_FORMATS:
        factors.append(NICHE_AUTHORITY)
    if tier not in (CreatorTier.NANO, CreatorTier.MICRO):
        factors.append(AUDIENCE_DEMOGRAPHICS)
    return tuple(factors[:MAX_FACTORS])


def calculate_quick_estimate(request: QuickEstimateRequest) -> QuickEstimate:
    """Estimate a creator's rate from minimal input.

    Args:
        request: Follower count, platform, content format and niche.

    Returns:
        QuickEstimate with base, min and max rates rounded to the nearest 5.
    """
    tier = calculate_tier(request.follower_count)
    rate = (
        BASE_RATES[tier]
        * get_platform_multiplier(request.platform)
        * ASSUMED_ENGAGEMENT_MULTIPLIER
        * get_niche_premium(request.niche)
        * (1 + FORMAT_PREMIUMS[request.content_format])
    )
    base_rate = round_to_nearest_five(rate)

    return QuickEstimate(
        min_rate=round_to_nearest_five(rate * (1 - ESTIMATE_RANGE)),
        max_rate=round_to_nearest_five(rate * (1 + ESTIMATE_RANGE)),
        base_rate=base_rate,
        tier=tier,
        tier_name=TIER_DISPLAY_NAMES[tier],
        platform=request.platform,
        content_format=request.content_format,
        niche=request.niche,
        percentile=calculate_percentile(base_rate, tier),
        top_performer_range=get_top_performer_range(tier),
        potential_with_full_profile=calculate_potential_rate(base_rate),
        rate_influencers=get_rate_influencers(tier, request.content_format),
        missing_factors=get_missing_factors(request),
    )
