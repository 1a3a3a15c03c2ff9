"""Layer accumulation shared by the sponsored and UGC pricers.

A ``LayerStack`` starts from a base amount and multiplies the running price
layer by layer, recording each step as a ``PricingLayer``. The running price
stays exact; only recorded adjustments are quantised to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

from ratecard.domain.models import ParsedBrief, UsageRights
from ratecard.domain.types import ComplexityLevel, ExclusivityLevel
from ratecard.pricing.classifiers import (
    get_duration_premium,
    get_seasonal_premium,
    get_whitelisting_display_name,
    get_whitelisting_premium,
    resolve_whitelisting_type,
)
from ratecard.pricing.results import PricingLayer
from ratecard.pricing.tables import COMPLEXITY_PREMIUMS, EXCLUSIVITY_PREMIUMS

TWO_PLACES = Decimal("0.01")
ONE = Decimal("1")


def format_premium(value: Decimal) -> str:
    """Format a premium fraction as a signed percentage (``0.25`` -> ``"+25%"``)."""
    percent = int((value * 100).quantize(ONE, rounding=ROUND_HALF_UP))
    if percent == 0:
        return "0%"
    return f"+{percent}%" if percent > 0 else f"{percent}%"


class LayerStack:
    """Running price with its ordered layer breakdown."""

    def __init__(
        self,
        *,
        name: str,
        description: str,
        base_value: str,
        base_amount: Decimal,
    ) -> None:
        self.price = base_amount
        self.layers: list[PricingLayer] = [
            PricingLayer(
                name=name,
                description=description,
                base_value=base_value,
                multiplier=ONE,
                adjustment=base_amount,
            )
        ]

    def apply(
        self,
        *,
        name: str,
        description: str,
        base_value: str | int,
        multiplier: Decimal,
    ) -> None:
        """Multiply the running price and record the layer."""
        adjustment = self.price * multiplier - self.price
        self.layers.append(
            PricingLayer(
                name=name,
                description=description,
                base_value=base_value,
                multiplier=multiplier,
                adjustment=adjustment.quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
            )
        )
        self.price *= multiplier


def describe_usage_rights(usage_rights: UsageRights) -> str:
    """Describe a licence, e.g. ``"90-day usage rights, category exclusivity"``."""
    days = usage_rights.duration_days
    if days == 0:
        description = "Content only, no paid usage"
    elif days >= 365:
        description = "Perpetual usage rights"
    else:
        description = f"{days}-day usage rights"
    if usage_rights.exclusivity != ExclusivityLevel.NONE:
        description += f", {usage_rights.exclusivity} exclusivity"
    return description


def apply_usage_rights(stack: LayerStack, usage_rights: UsageRights) -> Decimal:
    """Apply duration and exclusivity premiums as one summed layer.

    Returns:
        The combined premium fraction.
    """
    premium = get_duration_premium(usage_rights.duration_days) + EXCLUSIVITY_PREMIUMS[
        usage_rights.exclusivity
    ]
    stack.apply(
        name="Usage Rights",
        description=describe_usage_rights(usage_rights),
        base_value=f"{usage_rights.duration_days} days",
        multiplier=ONE + premium,
    )
    return premium


def apply_whitelisting(stack: LayerStack, usage_rights: UsageRights) -> Decimal:
    """Apply the whitelisting premium layer and return the premium."""
    premium = get_whitelisting_premium(usage_rights.whitelisting_type)
    stack.apply(
        name="Whitelisting",
        description=get_whitelisting_display_name(usage_rights.whitelisting_type),
        base_value=str(resolve_whitelisting_type(usage_rights.whitelisting_type)),
        multiplier=ONE + premium,
    )
    return premium


def apply_complexity(stack: LayerStack, level: ComplexityLevel) -> Decimal:
    """Apply the production complexity layer and return the premium."""
    premium = COMPLEXITY_PREMIUMS[level]
    stack.apply(
        name="Complexity",
        description=f"{level.capitalize()} production requirements",
        base_value=str(level),
        multiplier=ONE + premium,
    )
    return premium


def apply_seasonal(stack: LayerStack, brief: ParsedBrief) -> Decimal:
    """Apply the seasonal layer; neutral (1.0x) when seasonal pricing is disabled."""
    if brief.disable_seasonal_pricing:
        premium = Decimal("0")
        display_name = "Standard Period"
        base_value = "disabled"
    else:
        seasonal = get_seasonal_premium(brief.campaign_date)
        premium = seasonal.premium
        display_name = seasonal.display_name
        base_value = "auto"
    stack.apply(
        name="Seasonal",
        description=display_name,
        base_value=base_value,
        multiplier=ONE + premium,
    )
    return premium
