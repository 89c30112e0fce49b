"""Mortgage simulation inputs: loan configuration, prepayments, refinancing events."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

DEFAULT_ITF_RATE = Decimal("0.00005")
DEFAULT_RECURRING_INTERVAL = 12
DEFAULT_RISK_THRESHOLD_PCT = Decimal("30")


class Frequency(Enum):
    UNIQUE = "unique"
    RECURRING = "recurring"


class PrepaymentStrategy(Enum):
    REDUCE_TERM = "reduce_term"
    REDUCE_PAYMENT = "reduce_payment"


@dataclass(frozen=True)
class Prepayment:
    month: int  # 1-based
    amount: Decimal
    frequency: Frequency = Frequency.UNIQUE
    interval: int | None = None  # Recurring only, months between payments

    @property
    def effective_interval(self) -> int:
        return self.interval or DEFAULT_RECURRING_INTERVAL


@dataclass(frozen=True)
class RefinancingEvent:
    month: int
    new_rate: Decimal  # New TEA %
    closing_costs: Decimal = Decimal("0")  # Added to the outstanding balance
    color: str | None = None  # Display only
    label: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class MortgageConfig:
    # Property & financing
    price: Decimal
    down_payment: Decimal = Decimal("0")
    annual_rate: Decimal = Decimal("0")  # TEA %
    term_years: int = 20

    # Insurance, monthly %
    desgravamen_rate: Decimal = Decimal("0")  # On outstanding balance
    fire_insurance_rate: Decimal = Decimal("0")  # On price

    # Prepayments
    prepayments: tuple[Prepayment, ...] = ()
    strategy: PrepaymentStrategy = PrepaymentStrategy.REDUCE_TERM

    start_date: date | None = None  # None = today
    monthly_salary: Decimal | None = None

    # Intelligent strategy
    intelligent_strategy: bool = False
    aggressive_continuity: bool = False

    refinancing_events: tuple[RefinancingEvent, ...] = ()

    # ITF (transaction tax)
    itf_rate: Decimal = DEFAULT_ITF_RATE

    # Payment-to-salary share above which the loan is flagged risky
    risk_threshold_pct: Decimal = DEFAULT_RISK_THRESHOLD_PCT

    @property
    def loan_amount(self) -> Decimal:
        return self.price - self.down_payment

    @property
    def total_months(self) -> int:
        return self.term_years * 12

    @property
    def down_payment_pct(self) -> Decimal:
        if self.price == 0:
            return Decimal("0")
        return (self.down_payment / self.price * 100).quantize(Decimal("0.1"))


@dataclass(frozen=True)
class RateSettings:
    """Rate-entry mode chosen by the borrower.

    In TCEA mode the all-in annual cost already includes insurance, so the
    separate insurance rates are dropped.
    """
    tea: Decimal
    tcea: Decimal | None = None
    desgravamen_rate: Decimal = Decimal("0")
    fire_insurance_rate: Decimal = Decimal("0")
    tcea_mode: bool = False
