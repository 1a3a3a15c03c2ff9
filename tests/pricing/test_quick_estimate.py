"""Tests for quick rate estimates."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ratecard.domain.types import ContentFormat, CreatorTier
from ratecard.pricing.quick_estimate import (
    QuickEstimateRequest,
    calculate_percentile,
    calculate_potential_rate,
    calculate_quick_estimate,
    get_missing_factors,
    get_rate_influencers,
    get_top_performer_range,
)


class TestCalculateQuickEstimate:
    """Tests for the end-to-end quick estimate."""

    def test_micro_instagram_reel(self):
        estimate = calculate_quick_estimate(
            QuickEstimateRequest(
                follower_count=25_000,
                platform="instagram",
                content_format=ContentFormat.REEL,
            )
        )
        assert estimate.tier == CreatorTier.MICRO
        assert estimate.tier_name == "Micro"
        assert estimate.base_rate == Decimal("500")
        assert estimate.min_rate == Decimal("400")
        assert estimate.max_rate == Decimal("600")
        assert estimate.percentile == 67
        assert estimate.top_performer_range.min == Decimal("550")
        assert estimate.top_performer_range.max == Decimal("750")
        assert estimate.potential_with_full_profile == Decimal("1560")
        assert estimate.niche == "lifestyle"

    def test_nano_tiktok_static(self):
        estimate = calculate_quick_estimate(
            QuickEstimateRequest(
                follower_count=5_000,
                platform="tiktok",
                content_format=ContentFormat.STATIC,
            )
        )
        assert estimate.base_rate == Decimal("135")
        assert estimate.min_rate == Decimal("110")
        assert estimate.max_rate == Decimal("160")
        assert estimate.percentile == 43
        assert estimate.potential_with_full_profile == Decimal("421")

    def test_celebrity_youtube_finance_video(self):
        estimate = calculate_quick_estimate(
            QuickEstimateRequest(
                follower_count=2_000_000,
                platform="youtube",
                content_format=ContentFormat.VIDEO,
                niche="finance",
            )
        )
        assert estimate.base_rate == Decimal("45360")
        assert estimate.percentile == 93

    def test_rates_are_multiples_of_five(self):
        estimate = calculate_quick_estimate(
            QuickEstimateRequest(
                follower_count=312_000,
                platform="pinterest",
                content_format=ContentFormat.CAROUSEL,
                niche="travel",
            )
        )
        for value in (estimate.base_rate, estimate.min_rate, estimate.max_rate):
            assert value % 5 == 0
        assert estimate.min_rate <= estimate.base_rate <= estimate.max_rate

    def test_negative_followers_rejected(self):
        with pytest.raises(ValidationError):
            QuickEstimateRequest(
                follower_count=-1,
                platform="instagram",
                content_format=ContentFormat.REEL,
            )


class TestPercentile:
    """Tests for benchmark percentile interpolation."""

    @pytest.mark.parametrize(
        ("rate", "expected"),
        [
            (Decimal("0"), 0),
            (Decimal("275"), 25),
            (Decimal("400"), 50),
            (Decimal("550"), 75),
            (Decimal("750"), 90),
            (Decimal("100000"), 99),
        ],
        ids=["zero", "p25", "p50", "p75", "p90", "capped"],
    )
    def test_micro_benchmarks(self, rate: Decimal, expected: int):
        assert calculate_percentile(rate, CreatorTier.MICRO) == expected

    def test_top_performer_range(self):
        top = get_top_performer_range(CreatorTier.CELEBRITY)
        assert (top.min, top.max) == (Decimal("20000"), Decimal("35000"))

    def test_potential_rate(self):
        assert calculate_potential_rate(Decimal("1000")) == Decimal("3120")


class TestFactors:
    """Tests for rate influencers and missing profile factors."""

    def test_influencers_for_micro_reel(self):
        names = [f.name for f in get_rate_influencers(CreatorTier.MICRO, ContentFormat.REEL)]
        assert names == ["High Engagement", "Usage Rights", "Exclusivity", "Whitelisting"]

    def test_nano_skips_exclusivity(self):
        names = [f.name for f in get_rate_influencers(CreatorTier.NANO, ContentFormat.STATIC)]
        assert names == ["High Engagement", "Usage Rights", "Q4 Holiday Season"]

    def test_influencers_capped_at_four(self):
        factors = get_rate_influencers(CreatorTier.MACRO, ContentFormat.VIDEO)
        assert len(factors) == 4

    def test_missing_factors_for_nano_static(self):
        request = QuickEstimateRequest(
            follower_count=5_000, platform="tiktok", content_format=ContentFormat.STATIC
        )
        names = [f.name for f in get_missing_factors(request)]
        assert names == [
            "Your Actual Engagement",
            "Audience Location",
            "Growth Velocity",
            "Niche Authority",
        ]

    def test_linkedin_skips_audience_location(self):
        request = QuickEstimateRequest(
            follower_count=75_000, platform="LinkedIn", content_format=ContentFormat.STORY
        )
        names = [f.name for f in get_missing_factors(request)]
        assert names == ["Your Actual Engagement", "Past Brand Work", "Audience Demographics"]
