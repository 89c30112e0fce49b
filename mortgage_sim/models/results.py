from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from mortgage_sim.models.loan import RefinancingEvent


class StrategyStatus(Enum):
    DEFAULT = "default"
    ACCELERATION = "acceleration"
    PIVOT = "pivot"
    PROTECTED = "protected"


@dataclass(frozen=True)
class ScheduleRow:
    month: int
    payment_date: date
    days_in_period: int
    tea: Decimal  # Rate in effect, %
    ted: Decimal

    # Financial components
    balance_start: Decimal
    interest: Decimal
    desgravamen: Decimal
    fire_insurance: Decimal

    # Amortization components
    financial_payment: Decimal  # Standing quota (capital + interest)
    amortization: Decimal  # Scheduled capital part of the quota
    extra_capital: Decimal
    total_amortization: Decimal

    # ITF
    itf_base: Decimal
    itf_extra: Decimal
    itf: Decimal

    payment: Decimal  # Total cash disbursed
    balance_end: Decimal

    # Flags
    has_prepayment: bool = False
    is_crossover: bool = False  # Combined amortization > interest
    is_scheduled_crossover: bool = False  # Scheduled amortization > interest
    status: StrategyStatus = StrategyStatus.DEFAULT
    interest_savings: Decimal | None = None

    # Refinancing (display only)
    refinancing_event: RefinancingEvent | None = None
    background_color: str | None = None
    period_label: str | None = None


@dataclass
class ScheduleTotals:
    total_interest: Decimal = Decimal("0")
    total_capital: Decimal = Decimal("0")
    total_extra: Decimal = Decimal("0")
    total_insurance: Decimal = Decimal("0")  # Desgravamen + fire
    total_payment: Decimal = Decimal("0")
    total_itf: Decimal = Decimal("0")


@dataclass(frozen=True)
class StrategyImpact:
    original_interest: Decimal  # Baseline without prepayments
    saved_interest: Decimal
    saved_months: int
    new_end_date: date
    original_end_date: date


@dataclass(frozen=True)
class Affordability:
    first_payment: Decimal
    monthly_salary: Decimal
    salary_percentage: Decimal
    is_risky: bool


@dataclass
class EngineResult:
    schedule: list[ScheduleRow] = field(default_factory=list)
    totals: ScheduleTotals = field(default_factory=ScheduleTotals)
    strategy_impact: StrategyImpact | None = None
    affordability: Affordability | None = None


@dataclass(frozen=True)
class QuoteRow:
    month: int
    payment: Decimal
    financial_payment: Decimal
    interest: Decimal
    capital: Decimal
    desgravamen: Decimal
    fire_insurance: Decimal
    balance: Decimal


@dataclass(frozen=True)
class QuoteSchedule:
    """Quick-calculator schedule on a flat monthly effective rate."""
    rows: list[QuoteRow]
    loan_amount: Decimal
    monthly_rate: Decimal
    financial_payment: Decimal
    first_month_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal


@dataclass(frozen=True)
class StrategyOutcome:
    strategy: str
    saved_interest: Decimal
    saved_months: int
    total_interest: Decimal
    end_date: date
    quota_before_prepayment: Decimal | None = None
    quota_after_prepayment: Decimal | None = None


@dataclass(frozen=True)
class StrategyComparison:
    reduce_term: StrategyOutcome
    reduce_payment: StrategyOutcome
    first_prepayment_month: int | None = None

    @property
    def interest_advantage(self) -> Decimal:
        """Extra interest saved by shortening the term instead of lowering the quota."""
        return self.reduce_term.saved_interest - self.reduce_payment.saved_interest
