"""Domain types, models, and errors for the rate card engine."""

from ratecard.domain.errors import (
    MissingPricingConfigError,
    PricingError,
    RateCardError,
)
from ratecard.domain.models import (
    AffiliateConfig,
    AmbassadorPerks,
    BrandInfo,
    ContentRequirements,
    CreatorProfile,
    DealQualityResult,
    FitScoreResult,
    MonthlyDeliverables,
    ParsedBrief,
    PerformanceConfig,
    QuoteRequest,
    RetainerConfig,
    ScoreInput,
    UsageRights,
)
from ratecard.domain.types import (
    CURRENCY_SYMBOLS,
    AffiliateCategory,
    BonusMetric,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    DealQualityLevel,
    DealType,
    ExclusivityLevel,
    FitLevel,
    Platform,
    PricingModel,
    PricingRoute,
    Region,
    SeasonalPeriod,
    UGCFormat,
    WhitelistingType,
    resolve_currency,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "AffiliateCategory",
    "AffiliateConfig",
    "AmbassadorPerks",
    "BonusMetric",
    "BrandInfo",
    "ComplexityLevel",
    "ContentFormat",
    "ContentRequirements",
    "CreatorProfile",
    "CreatorTier",
    "CurrencyCode",
    "DealLength",
    "DealQualityLevel",
    "DealQualityResult",
    "DealType",
    "ExclusivityLevel",
    "FitLevel",
    "FitScoreResult",
    "MissingPricingConfigError",
    "MonthlyDeliverables",
    "ParsedBrief",
    "PerformanceConfig",
    "Platform",
    "PricingError",
    "PricingModel",
    "PricingRoute",
    "QuoteRequest",
    "RateCardError",
    "Region",
    "RetainerConfig",
    "ScoreInput",
    "SeasonalPeriod",
    "UGCFormat",
    "UsageRights",
    "WhitelistingType",
    "resolve_currency",
]
