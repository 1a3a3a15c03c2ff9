"""Domain enumerations and currency metadata for the rate card engine."""

from enum import StrEnum


class CreatorTier(StrEnum):
    """Audience-size buckets, smallest first."""

    NANO = "nano"
    MICRO = "micro"
    MID = "mid"
    RISING = "rising"
    MACRO = "macro"
    MEGA = "mega"
    CELEBRITY = "celebrity"


class Platform(StrEnum):
    """Content platforms with a known rate multiplier."""

    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    YOUTUBE_SHORTS = "youtube_shorts"
    TWITTER = "twitter"
    THREADS = "threads"
    PINTEREST = "pinterest"
    LINKEDIN = "linkedin"
    BLUESKY = "bluesky"
    LEMON8 = "lemon8"
    SNAPCHAT = "snapchat"
    TWITCH = "twitch"


class ContentFormat(StrEnum):
    """Sponsored content formats."""

    STATIC = "static"
    CAROUSEL = "carousel"
    STORY = "story"
    REEL = "reel"
    VIDEO = "video"
    LIVE = "live"
    # Kept for briefs parsed before UGC became a deal type
    UGC = "ugc"


class Region(StrEnum):
    """Creator primary markets with a regional multiplier."""

    UNITED_STATES = "united_states"
    UNITED_KINGDOM = "united_kingdom"
    CANADA = "canada"
    AUSTRALIA = "australia"
    WESTERN_EUROPE = "western_europe"
    UAE_GULF = "uae_gulf"
    SINGAPORE_HK = "singapore_hk"
    JAPAN = "japan"
    SOUTH_KOREA = "south_korea"
    BRAZIL = "brazil"
    MEXICO = "mexico"
    INDIA = "india"
    SOUTHEAST_ASIA = "southeast_asia"
    EASTERN_EUROPE = "eastern_europe"
    AFRICA = "africa"
    OTHER = "other"


class ExclusivityLevel(StrEnum):
    """Competitive restrictions attached to usage rights."""

    NONE = "none"
    CATEGORY = "category"
    FULL = "full"


class WhitelistingType(StrEnum):
    """How a brand may reuse creator content in its own channels."""

    NONE = "none"
    ORGANIC = "organic"
    PAID_SOCIAL = "paid_social"
    FULL_MEDIA = "full_media"


class DealType(StrEnum):
    """Audience-based sponsorship or audience-independent UGC."""

    SPONSORED = "sponsored"
    UGC = "ugc"


class UGCFormat(StrEnum):
    """UGC deliverable formats."""

    VIDEO = "video"
    PHOTO = "photo"


class PricingModel(StrEnum):
    """Compensation structure requested by a brief."""

    FLAT_FEE = "flat_fee"
    AFFILIATE = "affiliate"
    HYBRID = "hybrid"
    PERFORMANCE = "performance"


class PricingRoute(StrEnum):
    """Pricer selected for a brief, and the tag carried by its result."""

    FLAT_FEE = "flat_fee"
    UGC = "ugc"
    AFFILIATE = "affiliate"
    HYBRID = "hybrid"
    PERFORMANCE = "performance"
    RETAINER = "retainer"


class ComplexityLevel(StrEnum):
    """Production effort behind a deliverable."""

    SIMPLE = "simple"
    STANDARD = "standard"
    COMPLEX = "complex"
    PRODUCTION = "production"


class SeasonalPeriod(StrEnum):
    """Demand windows in the advertising calendar."""

    Q4_HOLIDAY = "q4_holiday"
    BACK_TO_SCHOOL = "back_to_school"
    VALENTINES = "valentines"
    SUMMER = "summer"
    DEFAULT = "default"


class FitLevel(StrEnum):
    """Brand-centric compatibility level from a fit score."""

    PERFECT = "perfect"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DealQualityLevel(StrEnum):
    """Creator-centric quality level from a deal quality score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    CAUTION = "caution"


class AffiliateCategory(StrEnum):
    """Product categories with typical commission ranges."""

    FASHION_APPAREL = "fashion_apparel"
    BEAUTY_SKINCARE = "beauty_skincare"
    TECH_ELECTRONICS = "tech_electronics"
    HOME_LIFESTYLE = "home_lifestyle"
    FOOD_BEVERAGE = "food_beverage"
    HEALTH_SUPPLEMENTS = "health_supplements"
    DIGITAL_PRODUCTS = "digital_products"
    SERVICES_SUBSCRIPTIONS = "services_subscriptions"
    OTHER = "other"


class BonusMetric(StrEnum):
    """Metric a performance bonus threshold is measured in."""

    CLICKS = "clicks"
    SALES = "sales"
    CONVERSIONS = "conversions"
    VIEWS = "views"


class DealLength(StrEnum):
    """Retainer contract lengths."""

    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    THREE_MONTH = "3_month"
    SIX_MONTH = "6_month"
    TWELVE_MONTH = "12_month"


class CurrencyCode(StrEnum):
    """Currencies a quote can be labelled in (no conversion is performed)."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AUD = "AUD"
    BRL = "BRL"
    INR = "INR"
    MXN = "MXN"


CURRENCY_SYMBOLS: dict[CurrencyCode, str] = {
    CurrencyCode.USD: "$",
    CurrencyCode.GBP: "£",
    CurrencyCode.EUR: "€",
    CurrencyCode.CAD: "C$",
    CurrencyCode.AUD: "A$",
    CurrencyCode.BRL: "R$",
    CurrencyCode.INR: "₹",
    CurrencyCode.MXN: "MX$",
}


def resolve_currency(code: str | None) -> tuple[CurrencyCode, str]:
    """Resolve a currency code to its canonical code and display symbol.

    Unknown or missing codes fall back to USD.

    Args:
        code: A currency code such as ``"GBP"`` (case-insensitive).

    Returns:
        A ``(code, symbol)`` tuple.
    """
    try:
        currency = CurrencyCode((code or "").strip().upper())
    except ValueError:
        currency = CurrencyCode.USD
    return currency, CURRENCY_SYMBOLS[currency]
