"""Annual effective rate (TEA) conversions.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from dataclasses import replace
from decimal import Decimal

from mortgage_sim.models.loan import MortgageConfig, RateSettings

ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHLY_EXPONENT = ONE / Decimal("12")
DAILY_EXPONENT = ONE / Decimal("360")  # Commercial year


def _geometric_rate(annual_rate_pct: Decimal, exponent: Decimal) -> Decimal:
    if annual_rate_pct == 0:
        return Decimal("0")
    return (ONE + annual_rate_pct / HUNDRED) ** exponent - ONE


def to_monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    """TEM = (1 + TEA)^(1/12) - 1."""
    return _geometric_rate(annual_rate_pct, MONTHLY_EXPONENT)


def to_daily_rate(annual_rate_pct: Decimal) -> Decimal:
    """TED = (1 + TEA)^(1/360) - 1."""
    return _geometric_rate(annual_rate_pct, DAILY_EXPONENT)


def monthly_rate_pct(annual_rate_pct: Decimal) -> Decimal:
    """TEM expressed as a percentage, for display."""
    return to_monthly_rate(annual_rate_pct) * HUNDRED


def apply_rate_settings(config: MortgageConfig, settings: RateSettings) -> MortgageConfig:
    """Return a config whose rates reflect the borrower's rate-entry mode.

    TCEA mode uses the all-in rate and zeroes both insurance rates; when no
    TCEA was entered the TEA stands in for it.
    """
    if settings.tcea_mode:
        return replace(
            config,
            annual_rate=settings.tcea if settings.tcea is not None else settings.tea,
            desgravamen_rate=Decimal("0"),
            fire_insurance_rate=Decimal("0"),
        )
    return replace(
        config,
        annual_rate=settings.tea,
        desgravamen_rate=settings.desgravamen_rate,
        fire_insurance_rate=settings.fire_insurance_rate,
    )
