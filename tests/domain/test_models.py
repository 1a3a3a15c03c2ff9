"""Tests for Pydantic domain models: profiles, briefs, configs and scores."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ratecard.domain.models import (
    AffiliateConfig,
    AmbassadorPerks,
    ContentRequirements,
    CreatorProfile,
    DealQualityResult,
    FitScoreResult,
    MonthlyDeliverables,
    ParsedBrief,
    PerformanceConfig,
    QuoteRequest,
    UsageRights,
)
from ratecard.domain.types import (
    BonusMetric,
    ContentFormat,
    CreatorTier,
    DealType,
    ExclusivityLevel,
    PricingModel,
    SeasonalPeriod,
    UGCFormat,
)
from ratecard.pricing.classifiers import get_seasonal_premium


class TestCreatorProfile:
    """Tests for the CreatorProfile model."""

    def test_tier_is_derived_from_reach(self):
        profile = CreatorProfile(total_reach=75_000)
        assert profile.tier == CreatorTier.MID

    def test_tier_is_serialized(self):
        data = CreatorProfile(total_reach=10_000).model_dump()
        assert data["tier"] == CreatorTier.MICRO

    def test_primary_niche(self):
        assert CreatorProfile(total_reach=1, niches=("tech", "gaming")).primary_niche == "tech"
        assert CreatorProfile(total_reach=1).primary_niche is None

    def test_rejects_negative_reach(self):
        with pytest.raises(ValidationError, match="total_reach must not be negative"):
            CreatorProfile(total_reach=-1)

    def test_rejects_negative_engagement(self):
        with pytest.raises(ValidationError, match="avg_engagement_rate must not be negative"):
            CreatorProfile(total_reach=1_000, avg_engagement_rate=-0.5)

    def test_defaults(self):
        profile = CreatorProfile(total_reach=1_000)
        assert profile.currency == "USD"
        assert profile.region is None
        assert profile.avg_engagement_rate == 0.0

    def test_frozen_immutability(self):
        profile = CreatorProfile(total_reach=1_000)
        with pytest.raises(ValidationError):
            profile.total_reach = 2_000  # type: ignore[misc]


class TestContentRequirements:
    """Tests for the ContentRequirements model."""

    def test_rejects_zero_quantity(self):
        with pytest.raises(ValidationError, match="quantity must be at least 1"):
            ContentRequirements(platform="instagram", format=ContentFormat.REEL, quantity=0)

    def test_rejects_unknown_format(self):
        with pytest.raises(ValidationError):
            ContentRequirements(platform="instagram", format="hologram")

    def test_free_text_platform(self):
        content = ContentRequirements(platform="myspace", format="static")
        assert content.platform == "myspace"
        assert content.format == ContentFormat.STATIC


class TestUsageRights:
    """Tests for the UsageRights model."""

    def test_defaults(self):
        rights = UsageRights()
        assert rights.duration_days == 0
        assert rights.exclusivity == ExclusivityLevel.NONE
        assert rights.whitelisting_type is None

    def test_rejects_negative_duration(self):
        with pytest.raises(ValidationError, match="duration_days must not be negative"):
            UsageRights(duration_days=-30)


class TestParsedBrief:
    """Tests for ParsedBrief defaults and normalisation."""

    def _content(self) -> ContentRequirements:
        return ContentRequirements(platform="instagram", format=ContentFormat.REEL)

    def test_defaults(self):
        brief = ParsedBrief(content=self._content())
        assert brief.deal_type == DealType.SPONSORED
        assert brief.ugc_format == UGCFormat.VIDEO
        assert brief.pricing_model == PricingModel.FLAT_FEE
        assert brief.disable_seasonal_pricing is False
        assert brief.affiliate_config is None

    @pytest.mark.parametrize("value", ["sponsored", "Sponsored", None])
    def test_pricing_model_aliases(self, value):
        brief = ParsedBrief(content=self._content(), pricing_model=value)
        assert brief.pricing_model == PricingModel.FLAT_FEE

    def test_explicit_none_deal_type_uses_default(self):
        brief = ParsedBrief(content=self._content(), deal_type=None, ugc_format=None)
        assert brief.deal_type == DealType.SPONSORED
        assert brief.ugc_format == UGCFormat.VIDEO

    def test_rejects_unknown_pricing_model(self):
        with pytest.raises(ValidationError):
            ParsedBrief(content=self._content(), pricing_model="barter")

    def test_campaign_date_accepts_iso_string(self):
        brief = ParsedBrief.model_validate(
            {"content": {"platform": "tiktok", "format": "video"}, "campaign_date": "2025-08-20"}
        )
        assert get_seasonal_premium(brief.campaign_date).period == SeasonalPeriod.BACK_TO_SCHOOL

    def test_campaign_date_accepts_date(self):
        brief = ParsedBrief(content=self._content(), campaign_date=date(2025, 3, 10))
        assert brief.campaign_date == date(2025, 3, 10)


class TestAffiliateConfig:
    """Tests for the AffiliateConfig model."""

    def test_float_inputs_become_exact_decimals(self):
        config = AffiliateConfig(affiliate_rate=12.5, estimated_sales=10, average_order_value=49.99)
        assert config.affiliate_rate == Decimal("12.5")
        assert config.average_order_value == Decimal("49.99")

    def test_string_inputs_are_coerced(self):
        config = AffiliateConfig(affiliate_rate="15", estimated_sales=10, average_order_value="50")
        assert config.affiliate_rate == Decimal("15")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"affiliate_rate": Decimal("-1")},
            {"average_order_value": Decimal("-0.01")},
            {"estimated_sales": -5},
        ],
        ids=["rate", "aov", "sales"],
    )
    def test_rejects_negative_values(self, overrides):
        fields = {
            "affiliate_rate": Decimal("10"),
            "estimated_sales": 10,
            "average_order_value": Decimal("50"),
        }
        fields.update(overrides)
        with pytest.raises(ValidationError, match="must not be negative"):
            AffiliateConfig(**fields)


class TestPerformanceConfig:
    """Tests for the PerformanceConfig model."""

    def test_rejects_negative_bonus(self):
        with pytest.raises(ValidationError, match="bonus_amount must not be negative"):
            PerformanceConfig(
                bonus_threshold=100, bonus_metric=BonusMetric.VIEWS, bonus_amount=Decimal("-5")
            )


class TestRetainerModels:
    """Tests for monthly deliverables and ambassador perks."""

    def test_deliverables_default_to_zero(self):
        deliverables = MonthlyDeliverables()
        assert deliverables.posts == 0
        assert deliverables.stories == 0
        assert deliverables.reels == 0
        assert deliverables.videos == 0

    def test_rejects_negative_deliverables(self):
        with pytest.raises(ValidationError):
            MonthlyDeliverables(posts=-1)

    def test_perks_defaults(self):
        perks = AmbassadorPerks()
        assert perks.exclusivity_required is False
        assert perks.event_day_rate is None
        assert perks.product_value == Decimal("0")


class TestScores:
    """Tests for fit score and deal quality models."""

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            FitScoreResult(total_score=101, fit_level="high", price_adjustment=Decimal("0.15"))
        with pytest.raises(ValidationError):
            DealQualityResult(total_score=-1, quality_level="good", price_adjustment=Decimal("0"))

    def test_negative_adjustment_allowed(self):
        score = FitScoreResult(total_score=20, fit_level="low", price_adjustment=-0.1)
        assert score.price_adjustment == Decimal("-0.1")


class TestQuoteRequest:
    """Tests for parsing a complete quote request payload."""

    def _payload(self, fit_score: dict) -> dict:
        return {
            "profile": {"total_reach": 25_000, "avg_engagement_rate": 4.5},
            "brief": {"content": {"platform": "instagram", "format": "reel"}},
            "fit_score": fit_score,
        }

    def test_fit_score_shape(self):
        request = QuoteRequest.model_validate(
            self._payload({"total_score": 78, "fit_level": "high", "price_adjustment": 0.15})
        )
        assert isinstance(request.fit_score, FitScoreResult)

    def test_deal_quality_shape(self):
        request = QuoteRequest.model_validate(
            self._payload({"total_score": 80, "quality_level": "good", "price_adjustment": 0.15})
        )
        assert isinstance(request.fit_score, DealQualityResult)
        assert request.fit_score.price_adjustment == Decimal("0.15")

    def test_rejects_score_without_level(self):
        with pytest.raises(ValidationError):
            QuoteRequest.model_validate(self._payload({"total_score": 50, "price_adjustment": 0}))
