"""Static pricing tables.

Every table is a read-only mapping built once at import time. Multipliers and
premiums are ``Decimal`` so layer products stay exact until the final
round-to-5. Premiums are fractions added to 1 (``0.25`` means +25%);
multipliers are applied as-is.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from ratecard.domain.types import (
    AffiliateCategory,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    DealLength,
    DealQualityLevel,
    ExclusivityLevel,
    FitLevel,
    Platform,
    Region,
    SeasonalPeriod,
    UGCFormat,
    WhitelistingType,
)

D = Decimal

# -- Tiers ---------------------------------------------------------------------

# Lower bound (inclusive) of each tier, largest first
TIER_THRESHOLDS: tuple[tuple[int, CreatorTier], ...] = (
    (1_000_000, CreatorTier.CELEBRITY),
    (500_000, CreatorTier.MEGA),
    (250_000, CreatorTier.MACRO),
    (100_000, CreatorTier.RISING),
    (50_000, CreatorTier.MID),
    (10_000, CreatorTier.MICRO),
    (0, CreatorTier.NANO),
)

BASE_RATES: Mapping[CreatorTier, Decimal] = MappingProxyType({
    CreatorTier.NANO: D("150"),
    CreatorTier.MICRO: D("400"),
    CreatorTier.MID: D("800"),
    CreatorTier.RISING: D("1500"),
    CreatorTier.MACRO: D("3000"),
    CreatorTier.MEGA: D("6000"),
    CreatorTier.CELEBRITY: D("12000"),
})

TIER_DISPLAY_NAMES: Mapping[CreatorTier, str] = MappingProxyType({
    CreatorTier.NANO: "Nano",
    CreatorTier.MICRO: "Micro",
    CreatorTier.MID: "Mid-Tier",
    CreatorTier.RISING: "Rising",
    CreatorTier.MACRO: "Macro",
    CreatorTier.MEGA: "Mega",
    CreatorTier.CELEBRITY: "Celebrity",
})

UGC_BASE_RATES: Mapping[UGCFormat, Decimal] = MappingProxyType({
    UGCFormat.VIDEO: D("175"),
    UGCFormat.PHOTO: D("100"),
})

# -- Platform ------------------------------------------------------------------

PLATFORM_MULTIPLIERS: Mapping[Platform, Decimal] = MappingProxyType({
    Platform.INSTAGRAM: D("1.0"),
    Platform.TIKTOK: D("0.9"),
    Platform.YOUTUBE: D("1.4"),
    Platform.YOUTUBE_SHORTS: D("0.7"),
    Platform.TWITTER: D("0.7"),
    Platform.THREADS: D("0.6"),
    Platform.PINTEREST: D("0.8"),
    Platform.LINKEDIN: D("1.3"),
    Platform.BLUESKY: D("0.5"),
    Platform.LEMON8: D("0.6"),
    Platform.SNAPCHAT: D("0.75"),
    Platform.TWITCH: D("1.1"),
})

DEFAULT_PLATFORM_MULTIPLIER = D("1.0")

PLATFORM_DISPLAY_NAMES: Mapping[Platform, str] = MappingProxyType({
    Platform.INSTAGRAM: "Instagram",
    Platform.TIKTOK: "TikTok",
    Platform.YOUTUBE: "YouTube",
    Platform.YOUTUBE_SHORTS: "YouTube Shorts",
    Platform.TWITTER: "Twitter/X",
    Platform.THREADS: "Threads",
    Platform.PINTEREST: "Pinterest",
    Platform.LINKEDIN: "LinkedIn",
    Platform.BLUESKY: "Bluesky",
    Platform.LEMON8: "Lemon8",
    Platform.SNAPCHAT: "Snapchat",
    Platform.TWITCH: "Twitch",
})

# -- Region --------------------------------------------------------------------

REGIONAL_MULTIPLIERS: Mapping[Region, Decimal] = MappingProxyType({
    Region.UNITED_STATES: D("1.0"),
    Region.UNITED_KINGDOM: D("0.95"),
    Region.CANADA: D("0.9"),
    Region.AUSTRALIA: D("0.9"),
    Region.WESTERN_EUROPE: D("0.85"),
    Region.UAE_GULF: D("1.1"),
    Region.SINGAPORE_HK: D("0.95"),
    Region.JAPAN: D("0.8"),
    Region.SOUTH_KOREA: D("0.75"),
    Region.BRAZIL: D("0.6"),
    Region.MEXICO: D("0.55"),
    Region.INDIA: D("0.4"),
    Region.SOUTHEAST_ASIA: D("0.5"),
    Region.EASTERN_EUROPE: D("0.5"),
    Region.AFRICA: D("0.4"),
    Region.OTHER: D("0.7"),
})

# Region assumed when a profile does not name one. A named but unknown region
# resolves to Region.OTHER instead.
DEFAULT_REGION = Region.UNITED_STATES

REGION_DISPLAY_NAMES: Mapping[Region, str] = MappingProxyType({
    Region.UNITED_STATES: "United States",
    Region.UNITED_KINGDOM: "United Kingdom",
    Region.CANADA: "Canada",
    Region.AUSTRALIA: "Australia",
    Region.WESTERN_EUROPE: "Western Europe",
    Region.UAE_GULF: "UAE/Gulf States",
    Region.SINGAPORE_HK: "Singapore/Hong Kong",
    Region.JAPAN: "Japan",
    Region.SOUTH_KOREA: "South Korea",
    Region.BRAZIL: "Brazil",
    Region.MEXICO: "Mexico",
    Region.INDIA: "India",
    Region.SOUTHEAST_ASIA: "Southeast Asia",
    Region.EASTERN_EUROPE: "Eastern Europe",
    Region.AFRICA: "Africa",
    Region.OTHER: "Other",
})

# -- Engagement ----------------------------------------------------------------

# (exclusive upper bound on engagement %, multiplier); the last band is open
ENGAGEMENT_THRESHOLDS: tuple[tuple[Decimal | None, Decimal], ...] = (
    (D("1"), D("0.8")),
    (D("3"), D("1.0")),
    (D("5"), D("1.3")),
    (D("8"), D("1.6")),
    (None, D("2.0")),
)

# -- Niche ---------------------------------------------------------------------

NICHE_PREMIUMS: Mapping[str, Decimal] = MappingProxyType({
    # High-value niches
    "finance": D("2.0"),
    "investing": D("2.0"),
    "b2b": D("1.8"),
    "business": D("1.8"),
    "tech": D("1.7"),
    "software": D("1.7"),
    "technology": D("1.7"),
    "legal": D("1.7"),
    "medical": D("1.7"),
    "healthcare": D("1.7"),
    "luxury": D("1.5"),
    "high-end fashion": D("1.5"),
    # Premium niches
    "beauty": D("1.3"),
    "skincare": D("1.3"),
    "cosmetics": D("1.3"),
    "fitness": D("1.2"),
    "wellness": D("1.2"),
    "health": D("1.2"),
    # Standard niches
    "food": D("1.15"),
    "cooking": D("1.15"),
    "recipes": D("1.15"),
    "travel": D("1.15"),
    "parenting": D("1.1"),
    "family": D("1.1"),
    "motherhood": D("1.1"),
    # Baseline niches
    "lifestyle": D("1.0"),
    "entertainment": D("1.0"),
    "comedy": D("1.0"),
    "music": D("1.0"),
    # Below baseline
    "gaming": D("0.95"),
    "esports": D("0.95"),
})

DEFAULT_NICHE_PREMIUM = D("1.0")
DEFAULT_NICHE = "lifestyle"

NICHE_CATEGORY_NAMES: Mapping[str, str] = MappingProxyType({
    "finance": "Finance/Investing",
    "investing": "Finance/Investing",
    "b2b": "B2B/Business",
    "business": "B2B/Business",
    "tech": "Tech/Software",
    "software": "Tech/Software",
    "technology": "Tech/Software",
    "legal": "Legal/Medical",
    "medical": "Legal/Medical",
    "healthcare": "Legal/Medical",
    "luxury": "Luxury/High-end Fashion",
    "high-end fashion": "Luxury/High-end Fashion",
    "beauty": "Beauty/Skincare",
    "skincare": "Beauty/Skincare",
    "cosmetics": "Beauty/Skincare",
    "fitness": "Fitness/Wellness",
    "wellness": "Fitness/Wellness",
    "health": "Fitness/Wellness",
    "food": "Food/Cooking",
    "cooking": "Food/Cooking",
    "recipes": "Food/Cooking",
    "travel": "Travel",
    "parenting": "Parenting/Family",
    "family": "Parenting/Family",
    "motherhood": "Parenting/Family",
    "lifestyle": "Lifestyle",
    "entertainment": "Entertainment/Comedy",
    "comedy": "Entertainment/Comedy",
    "music": "Entertainment/Comedy",
    "gaming": "Gaming",
    "esports": "Gaming",
})

# -- Format & complexity -------------------------------------------------------

FORMAT_PREMIUMS: Mapping[ContentFormat, Decimal] = MappingProxyType({
    ContentFormat.STATIC: D("0"),
    ContentFormat.CAROUSEL: D("0.15"),
    ContentFormat.STORY: D("-0.15"),
    ContentFormat.REEL: D("0.25"),
    ContentFormat.VIDEO: D("0.35"),
    ContentFormat.LIVE: D("0.4"),
    ContentFormat.UGC: D("0"),
})

COMPLEXITY_PREMIUMS: Mapping[ComplexityLevel, Decimal] = MappingProxyType({
    ComplexityLevel.SIMPLE: D("0"),
    ComplexityLevel.STANDARD: D("0.15"),
    ComplexityLevel.COMPLEX: D("0.3"),
    ComplexityLevel.PRODUCTION: D("0.5"),
})

FORMAT_COMPLEXITY: Mapping[ContentFormat, ComplexityLevel] = MappingProxyType({
    ContentFormat.STATIC: ComplexityLevel.SIMPLE,
    ContentFormat.STORY: ComplexityLevel.SIMPLE,
    ContentFormat.UGC: ComplexityLevel.SIMPLE,
    ContentFormat.CAROUSEL: ComplexityLevel.STANDARD,
    ContentFormat.REEL: ComplexityLevel.STANDARD,
    ContentFormat.VIDEO: ComplexityLevel.PRODUCTION,
    ContentFormat.LIVE: ComplexityLevel.COMPLEX,
})

UGC_FORMAT_COMPLEXITY: Mapping[UGCFormat, ComplexityLevel] = MappingProxyType({
    UGCFormat.PHOTO: ComplexityLevel.SIMPLE,
    UGCFormat.VIDEO: ComplexityLevel.STANDARD,
})

# -- Fit score -----------------------------------------------------------------

# Reference adjustments behind FitScoreResult.price_adjustment
FIT_ADJUSTMENTS: Mapping[FitLevel, Decimal] = MappingProxyType({
    FitLevel.PERFECT: D("0.25"),
    FitLevel.HIGH: D("0.15"),
    FitLevel.MEDIUM: D("0"),
    FitLevel.LOW: D("-0.1"),
})

DEAL_QUALITY_FIT_LEVELS: Mapping[DealQualityLevel, FitLevel] = MappingProxyType({
    DealQualityLevel.EXCELLENT: FitLevel.PERFECT,
    DealQualityLevel.GOOD: FitLevel.HIGH,
    DealQualityLevel.FAIR: FitLevel.MEDIUM,
    DealQualityLevel.CAUTION: FitLevel.LOW,
})

# -- Usage rights --------------------------------------------------------------

# (inclusive upper bound in days, premium); the last band is open (perpetual)
DURATION_TIERS: tuple[tuple[int | None, Decimal], ...] = (
    (0, D("0")),
    (30, D("0.25")),
    (60, D("0.35")),
    (90, D("0.45")),
    (180, D("0.6")),
    (365, D("0.8")),
    (None, D("1.0")),
)

EXCLUSIVITY_PREMIUMS: Mapping[ExclusivityLevel, Decimal] = MappingProxyType({
    ExclusivityLevel.NONE: D("0"),
    ExclusivityLevel.CATEGORY: D("0.3"),
    ExclusivityLevel.FULL: D("0.5"),
})

# -- Whitelisting --------------------------------------------------------------

WHITELISTING_PREMIUMS: Mapping[WhitelistingType, Decimal] = MappingProxyType({
    WhitelistingType.NONE: D("0"),
    WhitelistingType.ORGANIC: D("0.5"),
    WhitelistingType.PAID_SOCIAL: D("1.0"),
    WhitelistingType.FULL_MEDIA: D("2.0"),
})

DEFAULT_WHITELISTING_TYPE = WhitelistingType.NONE

WHITELISTING_DISPLAY_NAMES: Mapping[WhitelistingType, str] = MappingProxyType({
    WhitelistingType.NONE: "No whitelisting",
    WhitelistingType.ORGANIC: "Organic reposts only",
    WhitelistingType.PAID_SOCIAL: "Paid social ads",
    WhitelistingType.FULL_MEDIA: "Full media buy (TV, OOH, digital)",
})

# -- Seasonal ------------------------------------------------------------------

SEASONAL_PREMIUMS: Mapping[SeasonalPeriod, Decimal] = MappingProxyType({
    SeasonalPeriod.Q4_HOLIDAY: D("0.25"),
    SeasonalPeriod.BACK_TO_SCHOOL: D("0.15"),
    SeasonalPeriod.VALENTINES: D("0.10"),
    SeasonalPeriod.SUMMER: D("0.05"),
    SeasonalPeriod.DEFAULT: D("0"),
})

SEASONAL_DISPLAY_NAMES: Mapping[SeasonalPeriod, str] = MappingProxyType({
    SeasonalPeriod.Q4_HOLIDAY: "Q4 Holiday Season (Nov-Dec)",
    SeasonalPeriod.BACK_TO_SCHOOL: "Back to School (Aug-Sep)",
    SeasonalPeriod.VALENTINES: "Valentine's Day (Feb)",
    SeasonalPeriod.SUMMER: "Summer Season (Jun-Aug)",
    SeasonalPeriod.DEFAULT: "Standard Period",
})

# Windows in priority order as ((start month, day), (end month, day), period),
# both ends inclusive. August sits in both back-to-school and summer; the
# earlier entry wins.
SEASONAL_WINDOWS: tuple[tuple[tuple[int, int], tuple[int, int], SeasonalPeriod], ...] = (
    ((11, 1), (12, 31), SeasonalPeriod.Q4_HOLIDAY),
    ((8, 1), (9, 15), SeasonalPeriod.BACK_TO_SCHOOL),
    ((2, 1), (2, 14), SeasonalPeriod.VALENTINES),
    ((6, 1), (8, 31), SeasonalPeriod.SUMMER),
)

# -- Affiliate -----------------------------------------------------------------

# (min %, max %, recommended default %)
AFFILIATE_COMMISSION_RATES: Mapping[AffiliateCategory, tuple[Decimal, Decimal, Decimal]] = (
    MappingProxyType({
        AffiliateCategory.FASHION_APPAREL: (D("10"), D("20"), D("15")),
        AffiliateCategory.BEAUTY_SKINCARE: (D("15"), D("25"), D("20")),
        AffiliateCategory.TECH_ELECTRONICS: (D("5"), D("10"), D("7")),
        AffiliateCategory.HOME_LIFESTYLE: (D("8"), D("15"), D("12")),
        AffiliateCategory.FOOD_BEVERAGE: (D("10"), D("15"), D("12")),
        AffiliateCategory.HEALTH_SUPPLEMENTS: (D("15"), D("30"), D("22")),
        AffiliateCategory.DIGITAL_PRODUCTS: (D("20"), D("40"), D("30")),
        AffiliateCategory.SERVICES_SUBSCRIPTIONS: (D("15"), D("25"), D("20")),
        AffiliateCategory.OTHER: (D("10"), D("15"), D("12")),
    })
)

AFFILIATE_CATEGORY_DISPLAY_NAMES: Mapping[AffiliateCategory, str] = MappingProxyType({
    AffiliateCategory.FASHION_APPAREL: "Fashion/Apparel",
    AffiliateCategory.BEAUTY_SKINCARE: "Beauty/Skincare",
    AffiliateCategory.TECH_ELECTRONICS: "Tech/Electronics",
    AffiliateCategory.HOME_LIFESTYLE: "Home/Lifestyle",
    AffiliateCategory.FOOD_BEVERAGE: "Food/Beverage",
    AffiliateCategory.HEALTH_SUPPLEMENTS: "Health/Supplements",
    AffiliateCategory.DIGITAL_PRODUCTS: "Digital Products/Courses",
    AffiliateCategory.SERVICES_SUBSCRIPTIONS: "Services/Subscriptions",
    AffiliateCategory.OTHER: "Other",
})

# Share of the full sponsored rate guaranteed in a hybrid deal
HYBRID_BASE_FEE_SHARE = D("0.5")

# -- Retainer / ambassador -----------------------------------------------------

VOLUME_DISCOUNTS: Mapping[DealLength, Decimal] = MappingProxyType({
    DealLength.ONE_TIME: D("0"),
    DealLength.MONTHLY: D("0"),
    DealLength.THREE_MONTH: D("0.15"),
    DealLength.SIX_MONTH: D("0.25"),
    DealLength.TWELVE_MONTH: D("0.35"),
})

CONTRACT_MONTHS: Mapping[DealLength, int] = MappingProxyType({
    DealLength.ONE_TIME: 1,
    DealLength.MONTHLY: 1,
    DealLength.THREE_MONTH: 3,
    DealLength.SIX_MONTH: 6,
    DealLength.TWELVE_MONTH: 12,
})

AMBASSADOR_EXCLUSIVITY_PREMIUMS: Mapping[ExclusivityLevel, Decimal] = MappingProxyType({
    ExclusivityLevel.NONE: D("0"),
    ExclusivityLevel.CATEGORY: D("0.5"),
    ExclusivityLevel.FULL: D("1.0"),
})

EVENT_DAY_RATES: Mapping[CreatorTier, Decimal] = MappingProxyType({
    CreatorTier.NANO: D("500"),
    CreatorTier.MICRO: D("750"),
    CreatorTier.MID: D("1000"),
    CreatorTier.RISING: D("1250"),
    CreatorTier.MACRO: D("1500"),
    CreatorTier.MEGA: D("1750"),
    CreatorTier.CELEBRITY: D("2000"),
})

# Per-piece multipliers on the sponsored rate, keyed by MonthlyDeliverables field
DELIVERABLE_FORMAT_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType({
    "posts": D("1.0"),
    "stories": D("0.3"),
    "reels": D("1.25"),
    "videos": D("1.5"),
})

# -- Quote ---------------------------------------------------------------------

QUOTE_VALID_DAYS = 14
