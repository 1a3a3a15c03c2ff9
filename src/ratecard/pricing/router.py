"""Route a brief to the pricer for its deal type and pricing model."""

from typing import TypeVar, assert_never

import structlog

from ratecard.domain.errors import MissingPricingConfigError
from ratecard.domain.models import CreatorProfile, ParsedBrief, ScoreInput
from ratecard.domain.types import DealType, PricingModel, PricingRoute, resolve_currency
from ratecard.pricing.alternatives import (
    build_affiliate_result,
    build_hybrid_result,
    build_performance_result,
)
from ratecard.pricing.results import PricingResult
from ratecard.pricing.retainer import build_retainer_result
from ratecard.pricing.sponsored import calculate_sponsored_price
from ratecard.pricing.ugc import calculate_ugc_price

logger = structlog.get_logger()

_ConfigT = TypeVar("_ConfigT")


def resolve_pricing_route(brief: ParsedBrief) -> PricingRoute:
    """Decide which pricer handles a brief.

    Order: UGC deal type, affiliate model, hybrid model with an affiliate
    config, performance model with a performance config, any retainer
    config, then flat fee. Hybrid and performance briefs without their
    config fall through to the remaining checks.

    Args:
        brief: The parsed campaign brief.

    Returns:
        The PricingRoute to dispatch on.
    """
    if brief.deal_type == DealType.UGC:
        return PricingRoute.UGC
    if brief.pricing_model == PricingModel.AFFILIATE:
        return PricingRoute.AFFILIATE
    if brief.pricing_model == PricingModel.HYBRID and brief.affiliate_config is not None:
        return PricingRoute.HYBRID
    if (
        brief.pricing_model == PricingModel.PERFORMANCE
        and brief.performance_config is not None
    ):
        return PricingRoute.PERFORMANCE
    if brief.retainer_config is not None:
        return PricingRoute.RETAINER
    return PricingRoute.FLAT_FEE


def _require(config: _ConfigT | None, pricing_model: str, config_name: str) -> _ConfigT:
    if config is None:
        raise MissingPricingConfigError(pricing_model, config_name)
    return config


def calculate_price(
    profile: CreatorProfile,
    brief: ParsedBrief,
    score: ScoreInput,
) -> PricingResult:
    """Price a brief for a creator.

    Args:
        profile: The creator's audience profile.
        brief: The parsed campaign brief.
        score: Fit score or deal quality result. Ignored by the UGC and
            affiliate routes.

    Returns:
        PricingResult whose ``pricing_model`` mirrors the route taken.

    Raises:
        MissingPricingConfigError: If the brief asks for affiliate pricing
            without an affiliate config.
    """
    route = resolve_pricing_route(brief)

    match route:
        case PricingRoute.UGC:
            result = calculate_ugc_price(brief, profile)
        case PricingRoute.AFFILIATE:
            config = _require(brief.affiliate_config, route, "affiliate_config")
            currency, symbol = resolve_currency(profile.currency)
            result = build_affiliate_result(
                config,
                quantity=brief.content.quantity,
                currency=currency,
                symbol=symbol,
            )
        case PricingRoute.HYBRID:
            result = build_hybrid_result(
                calculate_sponsored_price(profile, brief, score),
                _require(brief.affiliate_config, route, "affiliate_config"),
            )
        case PricingRoute.PERFORMANCE:
            result = build_performance_result(
                calculate_sponsored_price(profile, brief, score),
                _require(brief.performance_config, route, "performance_config"),
            )
        case PricingRoute.RETAINER:
            result = build_retainer_result(
                calculate_sponsored_price(profile, brief, score),
                _require(brief.retainer_config, route, "retainer_config"),
                profile.tier,
            )
        case PricingRoute.FLAT_FEE:
            result = calculate_sponsored_price(profile, brief, score)
        case _:
            assert_never(route)

    logger.debug(
        "price_calculated",
        route=str(route),
        tier=str(profile.tier),
        total=str(result.total_price),
    )
    return result
