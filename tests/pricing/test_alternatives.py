"""Tests for affiliate, hybrid and performance pricing."""

from decimal import Decimal

import pytest

from ratecard.domain.models import AffiliateConfig, PerformanceConfig
from ratecard.domain.types import BonusMetric, CurrencyCode, PricingRoute
from ratecard.pricing.alternatives import (
    build_affiliate_result,
    build_hybrid_result,
    build_performance_result,
    calculate_affiliate_earnings,
    calculate_hybrid_price,
    calculate_performance_price,
)
from ratecard.pricing.sponsored import calculate_sponsored_price


@pytest.fixture
def clicks_bonus() -> PerformanceConfig:
    """$500 bonus at 10,000 clicks."""
    return PerformanceConfig(
        bonus_threshold=10_000,
        bonus_metric=BonusMetric.CLICKS,
        bonus_amount=Decimal("500"),
    )


@pytest.fixture
def sponsored(micro_profile, reel_brief, high_fit):
    """The $2150 micro finance reel quote."""
    return calculate_sponsored_price(micro_profile, reel_brief, high_fit)


class TestAffiliateEarnings:
    """Tests for commission earnings estimates."""

    def test_basic_earnings(self, affiliate_config):
        result = calculate_affiliate_earnings(affiliate_config)
        assert result.estimated_earnings == Decimal("750")
        assert result.commission_rate == Decimal("15")
        assert result.category_rate_range is None

    def test_earnings_round_to_five(self):
        config = AffiliateConfig(
            affiliate_rate=Decimal("12"),
            estimated_sales=37,
            average_order_value=Decimal("19.99"),
        )
        # 37 x 19.99 x 12% = 88.7556
        assert calculate_affiliate_earnings(config).estimated_earnings == Decimal("90")

    def test_category_supplies_typical_range(self):
        config = AffiliateConfig(
            affiliate_rate=Decimal("20"),
            estimated_sales=10,
            average_order_value=Decimal("40"),
            category="beauty_skincare",
        )
        result = calculate_affiliate_earnings(config)
        assert result.category_rate_range is not None
        assert result.category_rate_range.min == Decimal("15")
        assert result.category_rate_range.max == Decimal("25")

    def test_float_inputs_are_exact(self):
        config = AffiliateConfig(
            affiliate_rate=10.0,
            estimated_sales=100,
            average_order_value=49.99,
        )
        assert config.average_order_value == Decimal("49.99")
        # 100 x 49.99 x 10% = 499.9
        assert calculate_affiliate_earnings(config).estimated_earnings == Decimal("500")

    def test_zero_sales_earn_nothing(self):
        config = AffiliateConfig(
            affiliate_rate=Decimal("15"),
            estimated_sales=0,
            average_order_value=Decimal("50"),
        )
        assert calculate_affiliate_earnings(config).estimated_earnings == Decimal("0")


class TestAffiliateResult:
    """Tests for the commission-only quote."""

    def test_affiliate_quote(self, affiliate_config):
        result = build_affiliate_result(
            affiliate_config, quantity=2, currency=CurrencyCode.USD, symbol="$"
        )
        assert result.pricing_model == PricingRoute.AFFILIATE
        assert result.price_per_deliverable == Decimal("0")
        assert result.total_price == Decimal("750")
        assert result.quantity == 2
        assert [layer.name for layer in result.layers] == [
            "Commission Rate",
            "Estimated Sales",
            "Average Order Value",
            "Estimated Earnings",
        ]
        assert result.formula == "100 sales × $50 AOV × 15% = $750"
        assert result.affiliate_breakdown is not None

    def test_earnings_layer_names_category(self):
        config = AffiliateConfig(
            affiliate_rate=Decimal("20"),
            estimated_sales=10,
            average_order_value=Decimal("40"),
            category="beauty_skincare",
        )
        result = build_affiliate_result(
            config, quantity=1, currency=CurrencyCode.USD, symbol="$"
        )
        assert result.layer("Estimated Earnings").description == (
            "Beauty/Skincare category (typical: 15-25%)"
        )


class TestHybridPrice:
    """Tests for the hybrid base fee split."""

    def test_split(self, affiliate_config):
        hybrid = calculate_hybrid_price(Decimal("2150"), affiliate_config)
        assert hybrid.base_fee == Decimal("1075")
        assert hybrid.full_rate == Decimal("2150")
        assert hybrid.base_discount == Decimal("50")
        assert hybrid.combined_estimate == Decimal("1825")

    def test_base_fee_rounds_to_five(self, affiliate_config):
        hybrid = calculate_hybrid_price(Decimal("1075"), affiliate_config)
        assert hybrid.base_fee == Decimal("540")

    def test_hybrid_result_extends_sponsored(self, sponsored, affiliate_config):
        result = build_hybrid_result(sponsored, affiliate_config)
        assert result.pricing_model == PricingRoute.HYBRID
        assert result.price_per_deliverable == Decimal("1075")
        assert result.total_price == Decimal("1825")
        names = [layer.name for layer in result.layers]
        assert names[: len(sponsored.layers)] == [layer.name for layer in sponsored.layers]
        assert names[-2:] == ["Hybrid Discount", "Affiliate Commission"]
        assert result.formula == "($2150 × 50%) + (100 × $50 × 15%) = $1825"
        assert result.hybrid_breakdown is not None
        assert result.affiliate_breakdown is not None

    def test_sponsored_quote_is_not_mutated(self, sponsored, affiliate_config):
        build_hybrid_result(sponsored, affiliate_config)
        assert sponsored.pricing_model == PricingRoute.FLAT_FEE
        assert sponsored.total_price == Decimal("2150")


class TestPerformancePrice:
    """Tests for performance bonuses."""

    def test_potential_total(self, clicks_bonus):
        performance = calculate_performance_price(Decimal("2150"), clicks_bonus)
        assert performance.base_fee == Decimal("2150")
        assert performance.bonus_amount == Decimal("500")
        assert performance.potential_total == Decimal("2650")

    def test_bonus_rounds_to_five(self):
        config = PerformanceConfig(
            bonus_threshold=500,
            bonus_metric=BonusMetric.SALES,
            bonus_amount=Decimal("502"),
        )
        performance = calculate_performance_price(Decimal("2150"), config)
        assert performance.bonus_amount == Decimal("500")

    def test_performance_result_total_is_guaranteed_fee(self, sponsored, clicks_bonus):
        result = build_performance_result(sponsored, clicks_bonus)
        assert result.pricing_model == PricingRoute.PERFORMANCE
        assert result.total_price == Decimal("2150")
        assert result.price_per_deliverable == Decimal("2150")
        bonus = result.layer("Performance Bonus")
        assert bonus.description == "+$500 if 10,000 clicks reached"
        assert bonus.adjustment == Decimal("500")
        assert result.formula == (
            "$2150 base + $500 bonus (at 10000 clicks) = $2650 potential"
        )
        assert result.performance_breakdown is not None
        assert result.performance_breakdown.potential_total == Decimal("2650")
