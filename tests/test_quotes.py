"""Tests for applying service settings to quote requests."""

from datetime import date
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from ratecard.config import Settings
from ratecard.domain.errors import MissingPricingConfigError
from ratecard.domain.models import CreatorProfile, QuoteRequest
from ratecard.domain.types import CurrencyCode, PricingModel
from ratecard.quotes import apply_settings, price_quote


@pytest.fixture
def quote(micro_profile, reel_brief, high_fit) -> QuoteRequest:
    """The micro finance reel quote request."""
    return QuoteRequest(profile=micro_profile, brief=reel_brief, fit_score=high_fit)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestApplySettings:
    """Tests for service defaults filled into requests."""

    def test_default_currency_fills_unset_currency(self, quote):
        prepared = apply_settings(quote, _settings(default_currency="GBP"))
        assert prepared.profile.currency == "GBP"

    def test_explicit_currency_is_kept(self, reel_brief, high_fit):
        profile = CreatorProfile(total_reach=25_000, currency="EUR")
        request = QuoteRequest(profile=profile, brief=reel_brief, fit_score=high_fit)
        prepared = apply_settings(request, _settings(default_currency="GBP"))
        assert prepared.profile.currency == "EUR"

    def test_service_switch_disables_seasonal(self, quote):
        prepared = apply_settings(quote, _settings(disable_seasonal_pricing=True))
        assert prepared.brief.disable_seasonal_pricing is True
        assert quote.brief.disable_seasonal_pricing is False

    def test_defaults_leave_request_unchanged(self, quote):
        prepared = apply_settings(quote, _settings())
        assert prepared.brief == quote.brief
        assert prepared.profile.currency == "USD"


class TestPriceQuote:
    """Tests for pricing a request under service settings."""

    def test_prices_in_default_currency(self, quote):
        result = price_quote(quote, _settings(default_currency="GBP"))
        assert result.currency == CurrencyCode.GBP
        assert result.total_price == Decimal("2150")

    def test_seasonal_switch_changes_q4_price(self, quote):
        q4 = quote.model_copy(
            update={"brief": quote.brief.model_copy(update={"campaign_date": date(2025, 11, 20)})}
        )
        seasonal = price_quote(q4, _settings())
        flat = price_quote(q4, _settings(disable_seasonal_pricing=True))
        assert seasonal.total_price > flat.total_price
        assert flat.total_price == Decimal("2150")

    def test_logs_priced_quote(self, quote):
        with capture_logs() as logs:
            price_quote(quote, _settings())
        entry = next(e for e in logs if e["event"] == "quote_priced")
        assert entry["pricing_model"] == "flat_fee"
        assert entry["total_price"] == "2150"
        assert entry["log_level"] == "info"

    def test_errors_propagate(self, quote):
        bad = quote.model_copy(
            update={
                "brief": quote.brief.model_copy(update={"pricing_model": PricingModel.AFFILIATE})
            }
        )
        with pytest.raises(MissingPricingConfigError):
            price_quote(bad, _settings())
