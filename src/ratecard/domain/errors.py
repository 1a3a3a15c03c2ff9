"""Domain-specific exception classes for the rate card engine."""


class RateCardError(Exception):
    """Base class for all domain errors in the rate card engine."""


class PricingError(RateCardError):
    """Raised when a caller passes input outside the engine's documented domain."""


class MissingPricingConfigError(PricingError):
    """Raised when a pricing model is selected without the config it requires.

    Attributes:
        pricing_model: The pricing model that was requested.
        config_name: Name of the missing brief field.
    """

    def __init__(self, pricing_model: str, config_name: str) -> None:
        self.pricing_model = pricing_model
        self.config_name = config_name
        super().__init__(
            f"Pricing model '{pricing_model}' requires '{config_name}' on the brief"
        )
