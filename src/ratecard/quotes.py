"""Service-level quoting shared by the HTTP API and the CLI.

Applies the service settings to an incoming quote request before handing it
to the pricing engine, which itself reads no configuration.
"""

from __future__ import annotations

import structlog

from ratecard.config import Settings
from ratecard.domain.models import QuoteRequest
from ratecard.pricing import PricingResult, calculate_price

logger = structlog.get_logger()


def apply_settings(request: QuoteRequest, settings: Settings) -> QuoteRequest:
    """Fill service defaults into a quote request.

    - A profile without an explicit currency takes ``default_currency``.
    - ``disable_seasonal_pricing`` in settings disables seasonal pricing for
      every brief; a brief can still disable it on its own.

    Args:
        request: The incoming quote request.
        settings: Service settings.

    Returns:
        A new QuoteRequest; the input is not modified.
    """
    profile = request.profile
    if "currency" not in profile.model_fields_set:
        profile = profile.model_copy(update={"currency": settings.default_currency})

    brief = request.brief
    if settings.disable_seasonal_pricing and not brief.disable_seasonal_pricing:
        brief = brief.model_copy(update={"disable_seasonal_pricing": True})

    return request.model_copy(update={"profile": profile, "brief": brief})


def price_quote(request: QuoteRequest, settings: Settings) -> PricingResult:
    """Price a quote request under the service settings.

    Raises:
        PricingError: If the brief violates the engine's input contract.
    """
    prepared = apply_settings(request, settings)
    result = calculate_price(prepared.profile, prepared.brief, prepared.fit_score)
    logger.info(
        "quote_priced",
        pricing_model=str(result.pricing_model),
        tier=str(prepared.profile.tier),
        total_price=str(result.total_price),
        currency=str(result.currency),
    )
    return result
