"""Retainer and ambassador pricing.

A retainer prices a monthly bundle of deliverables off the sponsored rate,
discounted by contract length. Ambassador deals may add exclusivity, paid
event appearances and product seeding on top.
"""

from decimal import Decimal

from ratecard.domain.models import AmbassadorPerks, MonthlyDeliverables, RetainerConfig
from ratecard.domain.types import CreatorTier, DealLength, ExclusivityLevel, PricingRoute
from ratecard.pricing.classifiers import round_to_nearest_five
from ratecard.pricing.layers import ONE
from ratecard.pricing.results import (
    AmbassadorPerksBreakdown,
    DeliverableRates,
    PricingLayer,
    PricingResult,
    RetainerPricingBreakdown,
)
from ratecard.pricing.tables import (
    AMBASSADOR_EXCLUSIVITY_PREMIUMS,
    CONTRACT_MONTHS,
    DELIVERABLE_FORMAT_MULTIPLIERS,
    EVENT_DAY_RATES,
    TIER_DISPLAY_NAMES,
    VOLUME_DISCOUNTS,
)

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def get_volume_discount(deal_length: DealLength) -> Decimal:
    """Return the volume discount fraction for a contract length."""
    return VOLUME_DISCOUNTS[deal_length]


def get_event_day_rate(tier: CreatorTier | None = None) -> Decimal:
    """Return the standard event appearance day rate (micro when unknown)."""
    return EVENT_DAY_RATES[tier or CreatorTier.MICRO]


def calculate_deliverable_rates(base_rate: Decimal) -> DeliverableRates:
    """Derive per-piece rates from the sponsored rate.

    Posts 1.0x, stories 0.3x, reels 1.25x, videos 1.5x, each rounded to the
    nearest 5.
    """
    return DeliverableRates(
        post_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["posts"]),
        story_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["stories"]),
        reel_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["reels"]),
        video_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["videos"]),
    )


def _discount_rates(rates: DeliverableRates, discount: Decimal) -> DeliverableRates:
    factor = ONE - discount
    return DeliverableRates(
        post_rate=round_to_nearest_five(rates.post_rate * factor),
        story_rate=round_to_nearest_five(rates.story_rate * factor),
        reel_rate=round_to_nearest_five(rates.reel_rate * factor),
        video_rate=round_to_nearest_five(rates.video_rate * factor),
    )


def _monthly_value(deliverables: MonthlyDeliverables, rates: DeliverableRates) -> Decimal:
    return (
        deliverables.posts * rates.post_rate
        + deliverables.stories * rates.story_rate
        + deliverables.reels * rates.reel_rate
        + deliverables.videos * rates.video_rate
    )


def calculate_ambassador_perks(
    perks: AmbassadorPerks,
    monthly_value: Decimal,
    contract_months: int,
    tier: CreatorTier | None = None,
) -> AmbassadorPerksBreakdown:
    """Value the ambassador add-ons over the whole contract.

    Exclusivity costs the discounted monthly content value times the
    exclusivity premium (category 0.5, full 1.0) for every contract month.
    Event appearances are paid per day. Product seeding value is reported but
    is not part of the perks total.

    Args:
        perks: Requested ambassador perks.
        monthly_value: Discounted monthly content value.
        contract_months: Number of contract months.
        tier: Creator tier used for the default event day rate.

    Returns:
        AmbassadorPerksBreakdown with the perks total.
    """
    exclusivity_premium = ZERO
    if perks.exclusivity_required:
        exclusivity_premium = round_to_nearest_five(
            monthly_value
            * AMBASSADOR_EXCLUSIVITY_PREMIUMS[perks.exclusivity_type]
            * contract_months
        )

    product_seeding_value = perks.product_value if perks.product_seeding else ZERO

    event_day_rate = ZERO
    if perks.events_included > 0:
        event_day_rate = (
            perks.event_day_rate
            if perks.event_day_rate is not None
            else get_event_day_rate(tier)
        )
    event_appearances_value = round_to_nearest_five(perks.events_included * event_day_rate)

    return AmbassadorPerksBreakdown(
        exclusivity_premium=exclusivity_premium,
        exclusivity_type=perks.exclusivity_type,
        product_seeding_value=product_seeding_value,
        events_included=perks.events_included,
        event_day_rate=event_day_rate,
        event_appearances_value=event_appearances_value,
        total_perks_value=exclusivity_premium + event_appearances_value,
    )


def calculate_retainer_price(
    base_rate: Decimal,
    config: RetainerConfig,
    tier: CreatorTier | None = None,
) -> RetainerPricingBreakdown:
    """Price a retainer contract.

    Total contract value = monthly rate x contract months + perks total,
    rounded to the nearest 5.

    Args:
        base_rate: Sponsored price per deliverable.
        config: Contract length, monthly deliverables and optional perks.
        tier: Creator tier, used for the default event day rate.

    Returns:
        RetainerPricingBreakdown with full and discounted values.
    """
    months = CONTRACT_MONTHS[config.deal_length]
    discount = get_volume_discount(config.deal_length)
    full_rates = calculate_deliverable_rates(base_rate)
    discounted_rates = _discount_rates(full_rates, discount)

    monthly_full = _monthly_value(config.monthly_deliverables, full_rates)
    monthly_discounted = _monthly_value(config.monthly_deliverables, discounted_rates)
    monthly_rate = round_to_nearest_five(monthly_discounted)

    ambassador = None
    perks_total = ZERO
    if config.ambassador_perks is not None:
        ambassador = calculate_ambassador_perks(
            config.ambassador_perks, monthly_discounted, months, tier
        )
        perks_total = ambassador.total_perks_value

    return RetainerPricingBreakdown(
        deal_length=config.deal_length,
        contract_months=months,
        volume_discount=(discount * HUNDRED).quantize(ONE),
        full_rates=full_rates,
        discounted_rates=discounted_rates,
        monthly_deliverables=config.monthly_deliverables,
        monthly_content_value_full=monthly_full,
        monthly_content_value_discounted=monthly_discounted,
        monthly_savings=monthly_full - monthly_discounted,
        monthly_rate=monthly_rate,
        total_contract_value=round_to_nearest_five(monthly_rate * months + perks_total),
        ambassador_breakdown=ambassador,
    )


def _describe_perks(ambassador: AmbassadorPerksBreakdown, symbol: str) -> str:
    parts = []
    if ambassador.exclusivity_premium > 0 and ambassador.exclusivity_type != ExclusivityLevel.NONE:
        parts.append(
            f"{ambassador.exclusivity_type} exclusivity (+{symbol}{ambassador.exclusivity_premium})"
        )
    if ambassador.events_included > 0:
        noun = "event" if ambassador.events_included == 1 else "events"
        parts.append(
            f"{ambassador.events_included} {noun} (+{symbol}{ambassador.event_appearances_value})"
        )
    if ambassador.product_seeding_value > 0:
        parts.append(f"product seeding ({symbol}{ambassador.product_seeding_value} value)")
    return ", ".join(parts) or "No additional perks"


def build_retainer_result(
    sponsored: PricingResult,
    config: RetainerConfig,
    tier: CreatorTier,
) -> PricingResult:
    """Turn a sponsored quote into a retainer quote.

    Layers: Base Rate, Volume Discount, Monthly Deliverables, Contract Length
    and, when perks are requested, Ambassador Perks. Quantity is the number
    of contract months.
    """
    symbol = sponsored.currency_symbol
    base_rate = sponsored.price_per_deliverable
    retainer = calculate_retainer_price(base_rate, config, tier)
    months = retainer.contract_months
    monthly = retainer.monthly_rate
    deliverables = retainer.monthly_deliverables
    discount_pct = retainer.volume_discount

    layers = [
        PricingLayer(
            name="Base Rate",
            description=f"{TIER_DISPLAY_NAMES[tier]} tier creator rate",
            base_value=f"{symbol}{base_rate}",
            multiplier=ONE,
            adjustment=base_rate,
        ),
        PricingLayer(
            name="Volume Discount",
            description=f"{discount_pct}% discount for {months}-month commitment",
            base_value=f"-{discount_pct}%",
            multiplier=ONE - discount_pct / HUNDRED,
            adjustment=-retainer.monthly_savings,
        ),
        PricingLayer(
            name="Monthly Deliverables",
            description=(
                f"{deliverables.posts} posts, {deliverables.stories} stories,"
                f" {deliverables.reels} reels, {deliverables.videos} videos"
            ),
            base_value=f"{symbol}{monthly}/mo",
            multiplier=ONE,
            adjustment=monthly,
        ),
        PricingLayer(
            name="Contract Length",
            description=f"{months} month" if months == 1 else f"{months} months",
            base_value=f"×{months}",
            multiplier=Decimal(months),
            adjustment=monthly * months,
        ),
    ]

    ambassador = retainer.ambassador_breakdown
    total = retainer.total_contract_value
    if ambassador is not None:
        perks_total = ambassador.total_perks_value
        layers.append(
            PricingLayer(
                name="Ambassador Perks",
                description=_describe_perks(ambassador, symbol),
                base_value=f"+{symbol}{perks_total}",
                multiplier=ONE,
                adjustment=perks_total,
            )
        )
        formula = (
            f"{symbol}{monthly}/mo × {months} months"
            f" + {symbol}{perks_total} perks = {symbol}{total}"
        )
    else:
        formula = f"{symbol}{monthly}/mo × {months} months = {symbol}{total}"

    return sponsored.model_copy(
        update={
            "quantity": months,
            "total_price": total,
            "layers": tuple(layers),
            "formula": formula,
            "pricing_model": PricingRoute.RETAINER,
            "retainer_breakdown": retainer,
        }
    )
