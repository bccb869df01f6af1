"""Address standardization against the USPS ZIP code lookup."""

from govaddress.standardize.client import (
    STRATEGY_ORDER,
    StandardizationAttempt,
    StandardizationClient,
    StandardizationError,
    Strategy,
    ValidatorUnavailableError,
    build_form,
    select_candidate,
)

__all__ = [
    "StandardizationClient",
    "StandardizationAttempt",
    "StandardizationError",
    "ValidatorUnavailableError",
    "Strategy",
    "STRATEGY_ORDER",
    "build_form",
    "select_candidate",
]
