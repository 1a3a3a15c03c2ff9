"""Shared pytest fixtures for the rate card test suite."""

from datetime import date
from decimal import Decimal

import pytest
import structlog

from ratecard.domain.models import (
    AffiliateConfig,
    ContentRequirements,
    CreatorProfile,
    FitScoreResult,
    ParsedBrief,
    UsageRights,
)
from ratecard.domain.types import ContentFormat, FitLevel

# A date outside every seasonal window, so prices do not depend on today
OFF_SEASON = date(2025, 3, 10)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Reset structlog so configuration from one test never leaks into another."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def micro_profile() -> CreatorProfile:
    """A 25K-follower finance creator with 4.5% engagement."""
    return CreatorProfile(
        display_name="Test Creator",
        total_reach=25_000,
        avg_engagement_rate=4.5,
        niches=("finance",),
    )


@pytest.fixture
def reel_brief() -> ParsedBrief:
    """One Instagram reel with 30-day usage rights, priced off-season."""
    return ParsedBrief(
        content=ContentRequirements(platform="instagram", format=ContentFormat.REEL),
        usage_rights=UsageRights(duration_days=30),
        campaign_date=OFF_SEASON,
    )


@pytest.fixture
def high_fit() -> FitScoreResult:
    """A high brand fit worth +15%."""
    return FitScoreResult(
        total_score=78,
        fit_level=FitLevel.HIGH,
        price_adjustment=Decimal("0.15"),
    )


@pytest.fixture
def neutral_fit() -> FitScoreResult:
    """A medium brand fit with no price adjustment."""
    return FitScoreResult(
        total_score=55,
        fit_level=FitLevel.MEDIUM,
        price_adjustment=Decimal("0"),
    )


@pytest.fixture
def affiliate_config() -> AffiliateConfig:
    """15% commission on 100 sales at a $50 average order value."""
    return AffiliateConfig(
        affiliate_rate=Decimal("15"),
        estimated_sales=100,
        average_order_value=Decimal("50"),
    )
