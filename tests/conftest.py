"""Canonical test fixtures used across all engine tests.

Fixture: 300K property, 20% down, 8.5% TEA, 20yr French loan starting 2025-01-01,
desgravamen 0.049%/month on balance, fire insurance 0.029%/month on price.
"""

import pytest
from dataclasses import replace
from datetime import date
from decimal import Decimal

from mortgage_sim.models.loan import (
    Frequency,
    MortgageConfig,
    Prepayment,
    PrepaymentStrategy,
)


@pytest.fixture
def canonical_config() -> MortgageConfig:
    """300K property with standard insurance, no prepayments."""
    return MortgageConfig(
        price=Decimal("300000"),
        down_payment=Decimal("60000"),
        annual_rate=Decimal("8.5"),
        term_years=20,
        desgravamen_rate=Decimal("0.049"),
        fire_insurance_rate=Decimal("0.029"),
        start_date=date(2025, 1, 1),
    )


@pytest.fixture
def prepaying_config(canonical_config) -> MortgageConfig:
    """Canonical loan with 10K yearly prepayments from month 12."""
    return replace(
        canonical_config,
        prepayments=(
            Prepayment(month=12, amount=Decimal("10000"), frequency=Frequency.RECURRING),
        ),
        strategy=PrepaymentStrategy.REDUCE_TERM,
    )


@pytest.fixture
def monthly_attack_config(canonical_config) -> MortgageConfig:
    """Canonical loan with 2K extra every month, for the intelligent strategy."""
    return replace(
        canonical_config,
        prepayments=(
            Prepayment(
                month=1,
                amount=Decimal("2000"),
                frequency=Frequency.RECURRING,
                interval=1,
            ),
        ),
    )


@pytest.fixture
def zero_rate_config() -> MortgageConfig:
    """120K interest-free loan over 10 years: 1,000 per month."""
    return MortgageConfig(
        price=Decimal("120000"),
        down_payment=Decimal("0"),
        annual_rate=Decimal("0"),
        term_years=10,
        start_date=date(2025, 1, 1),
    )


@pytest.fixture
def one_percent_config() -> MortgageConfig:
    """100K loan, TEA giving exactly 1% TEM, 12 months, no insurance."""
    return MortgageConfig(
        price=Decimal("120000"),
        down_payment=Decimal("20000"),
        annual_rate=Decimal("12.682503"),
        term_years=1,
        start_date=date(2025, 1, 1),
    )
