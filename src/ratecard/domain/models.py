"""Pydantic v2 models for the inputs of the rate card engine.

All inputs are immutable. Monetary fields are ``Decimal``; float inputs
(from JSON or YAML payloads) are converted through their shortest string form
so ``49.99`` becomes ``Decimal("49.99")`` rather than its binary expansion.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_validator,
)

from ratecard.domain.types import (
    BonusMetric,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    DealQualityLevel,
    DealType,
    ExclusivityLevel,
    FitLevel,
    PricingModel,
    UGCFormat,
)


def _decimal_from_float(v: object) -> object:
    """Route float inputs through ``str`` before Decimal coercion."""
    if isinstance(v, float):
        return Decimal(str(v))
    return v


Money = Annotated[Decimal, BeforeValidator(_decimal_from_float)]


class CreatorProfile(BaseModel):
    """Audience characteristics of a creator.

    The tier is derived from ``total_reach`` on every access and is never
    stored independently. ``niches[0]`` is the primary niche.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    total_reach: int
    avg_engagement_rate: float = 0.0
    niches: tuple[str, ...] = ()
    region: str | None = None
    currency: str = CurrencyCode.USD

    @field_validator("total_reach")
    @classmethod
    def reach_must_not_be_negative(cls, v: int) -> int:
        """Ensure total_reach is zero or greater."""
        if v < 0:
            raise ValueError("total_reach must not be negative")
        return v

    @field_validator("avg_engagement_rate")
    @classmethod
    def engagement_must_not_be_negative(cls, v: float) -> float:
        """Ensure the engagement rate percentage is zero or greater."""
        if v < 0:
            raise ValueError("avg_engagement_rate must not be negative")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tier(self) -> CreatorTier:
        """Tier classified from the current total reach."""
        from ratecard.pricing.classifiers import calculate_tier

        return calculate_tier(self.total_reach)

    @property
    def primary_niche(self) -> str | None:
        """First listed niche, or ``None`` when no niches are set."""
        return self.niches[0] if self.niches else None


class BrandInfo(BaseModel):
    """Brand behind a campaign brief."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    industry: str = ""
    product: str = ""


class ContentRequirements(BaseModel):
    """Deliverables requested by a brief.

    ``platform`` is kept as free text so unlisted platforms still price at
    the default multiplier.
    """

    model_config = ConfigDict(frozen=True)

    platform: str
    format: ContentFormat
    quantity: int = 1
    creative_direction: str = ""

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        """Ensure quantity is at least 1."""
        if v < 1:
            raise ValueError("quantity must be at least 1")
        return v


class UsageRights(BaseModel):
    """Licensing terms: duration, exclusivity and whitelisting."""

    model_config = ConfigDict(frozen=True)

    duration_days: int = 0
    exclusivity: ExclusivityLevel = ExclusivityLevel.NONE
    paid_amplification: bool = False
    whitelisting_type: str | None = None

    @field_validator("duration_days")
    @classmethod
    def duration_must_not_be_negative(cls, v: int) -> int:
        """Ensure duration_days is zero or greater."""
        if v < 0:
            raise ValueError("duration_days must not be negative")
        return v


class AffiliateConfig(BaseModel):
    """Commission terms for affiliate and hybrid deals.

    Attributes:
        affiliate_rate: Commission as a percentage (``15`` means 15%).
        estimated_sales: Projected number of sales.
        average_order_value: Average order value in quote currency.
        category: Optional product category for typical-rate context.
    """

    model_config = ConfigDict(frozen=True)

    affiliate_rate: Money
    estimated_sales: int
    average_order_value: Money
    category: str | None = None

    @field_validator("affiliate_rate", "average_order_value")
    @classmethod
    def must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Reject negative rates and order values."""
        if v < 0:
            raise ValueError("affiliate amounts must not be negative")
        return v

    @field_validator("estimated_sales")
    @classmethod
    def sales_must_not_be_negative(cls, v: int) -> int:
        """Ensure estimated_sales is zero or greater."""
        if v < 0:
            raise ValueError("estimated_sales must not be negative")
        return v


class PerformanceConfig(BaseModel):
    """Bonus terms for performance deals.

    The engine prices the bonus; whether the threshold is met is decided
    by the caller after the campaign runs.
    """

    model_config = ConfigDict(frozen=True)

    bonus_threshold: int
    bonus_metric: BonusMetric
    bonus_amount: Money

    @field_validator("bonus_amount")
    @classmethod
    def bonus_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure bonus_amount is zero or greater."""
        if v < 0:
            raise ValueError("bonus_amount must not be negative")
        return v


class MonthlyDeliverables(BaseModel):
    """Number of each content type delivered per retainer month."""

    model_config = ConfigDict(frozen=True)

    posts: int = Field(default=0, ge=0)
    stories: int = Field(default=0, ge=0)
    reels: int = Field(default=0, ge=0)
    videos: int = Field(default=0, ge=0)


class AmbassadorPerks(BaseModel):
    """Extras attached to long-term ambassador deals."""

    model_config = ConfigDict(frozen=True)

    exclusivity_required: bool = False
    exclusivity_type: ExclusivityLevel = ExclusivityLevel.NONE
    product_seeding: bool = False
    product_value: Money = Decimal("0")
    events_included: int = Field(default=0, ge=0)
    # None means "use the tier's standard event day rate"
    event_day_rate: Money | None = None


class RetainerConfig(BaseModel):
    """Ongoing partnership terms."""

    model_config = ConfigDict(frozen=True)

    deal_length: DealLength
    monthly_deliverables: MonthlyDeliverables
    ambassador_perks: AmbassadorPerks | None = None


class ParsedBrief(BaseModel):
    """Structured campaign requirements extracted from a brand brief.

    Only the config matching the active pricing model is read; configs for
    other models are carried but ignored.
    """

    model_config = ConfigDict(frozen=True)

    brand: BrandInfo = BrandInfo()
    content: ContentRequirements
    usage_rights: UsageRights = UsageRights()
    campaign_date: datetime | date | str | None = None
    disable_seasonal_pricing: bool = False
    deal_type: DealType = DealType.SPONSORED
    ugc_format: UGCFormat = UGCFormat.VIDEO
    pricing_model: PricingModel = PricingModel.FLAT_FEE
    affiliate_config: AffiliateConfig | None = None
    performance_config: PerformanceConfig | None = None
    retainer_config: RetainerConfig | None = None

    @field_validator("deal_type", "ugc_format", mode="before")
    @classmethod
    def default_when_missing(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicit ``None`` as the field default."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("pricing_model", mode="before")
    @classmethod
    def normalize_pricing_model(cls, v: Any) -> Any:
        """Map a missing model and the ``sponsored`` alias to ``flat_fee``."""
        if v is None:
            return PricingModel.FLAT_FEE
        if isinstance(v, str) and v.strip().lower() == "sponsored":
            return PricingModel.FLAT_FEE
        return v


class FitScoreResult(BaseModel):
    """Externally computed brand/creator compatibility score."""

    model_config = ConfigDict(frozen=True)

    total_score: int = Field(ge=0, le=100)
    fit_level: FitLevel
    price_adjustment: Money


class DealQualityResult(BaseModel):
    """Externally computed creator-centric deal quality score."""

    model_config = ConfigDict(frozen=True)

    total_score: int = Field(ge=0, le=100)
    quality_level: DealQualityLevel
    price_adjustment: Money


ScoreInput = FitScoreResult | DealQualityResult


class QuoteRequest(BaseModel):
    """A creator profile, a brief and a score, priced together as one quote.

    ``fit_score`` accepts either score shape; the presence of ``fit_level``
    or ``quality_level`` decides which.
    """

    model_config = ConfigDict(frozen=True)

    profile: CreatorProfile
    brief: ParsedBrief
    fit_score: FitScoreResult | DealQualityResult
