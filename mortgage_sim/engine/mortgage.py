"""Mortgage engine facade: baseline vs actual reconciliation and optimal extra search.

The baseline (no prepayments, reduce_term, no intelligent strategy) and the
actual schedule are produced by two independent runs of the same loop, then
compared row by row.

Pure computation. No I/O.
"""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

from mortgage_sim.engine.affordability import assess_affordability
from mortgage_sim.engine.debt import round_money
from mortgage_sim.engine.simulation import run_simulation
from mortgage_sim.models.loan import Frequency, MortgageConfig, Prepayment, PrepaymentStrategy
from mortgage_sim.models.results import EngineResult, ScheduleRow, StrategyImpact

logger = logging.getLogger(__name__)

SEARCH_ITERATIONS = 20


def normalize_config(config: MortgageConfig) -> MortgageConfig:
    """Fill in the start date (today) when the caller left it out."""
    if config.start_date is not None:
        return config
    return replace(config, start_date=date.today())


def baseline_config(config: MortgageConfig) -> MortgageConfig:
    return replace(
        config,
        prepayments=(),
        strategy=PrepaymentStrategy.REDUCE_TERM,
        intelligent_strategy=False,
    )


def first_crossover_month(schedule: list[ScheduleRow]) -> int | None:
    return next((row.month for row in schedule if row.is_crossover), None)


def _end_date(schedule: list[ScheduleRow], start_date: date) -> date:
    return schedule[-1].payment_date if schedule else start_date


def calculate(config: MortgageConfig) -> EngineResult:
    """Simulate the configured loan and measure it against the unassisted baseline."""
    config = normalize_config(config)

    baseline = run_simulation(baseline_config(config))
    result = run_simulation(config)

    baseline_rows = baseline.schedule
    result.schedule = [
        replace(
            row,
            interest_savings=(
                max(Decimal("0"), baseline_rows[i].interest - row.interest)
                if i < len(baseline_rows)
                else Decimal("0")
            ),
        )
        for i, row in enumerate(result.schedule)
    ]

    baseline_interest = baseline.totals.total_interest
    result.strategy_impact = StrategyImpact(
        original_interest=baseline_interest,
        saved_interest=max(Decimal("0"), baseline_interest - result.totals.total_interest),
        saved_months=max(0, config.total_months - len(result.schedule)),
        new_end_date=_end_date(result.schedule, config.start_date),
        original_end_date=_end_date(baseline_rows, config.start_date),
    )

    if config.monthly_salary and result.schedule:
        result.affordability = assess_affordability(
            result.schedule[0].payment, config.monthly_salary, config.risk_threshold_pct
        )

    return result


def _search_config(config: MortgageConfig, monthly_extra: Decimal) -> MortgageConfig:
    return replace(
        config,
        prepayments=(
            Prepayment(
                month=1,
                amount=monthly_extra,
                frequency=Frequency.RECURRING,
                interval=1,
            ),
        ),
        strategy=PrepaymentStrategy.REDUCE_TERM,
        intelligent_strategy=False,
    )


def _reaches_target(config: MortgageConfig, monthly_extra: Decimal, target_month: int) -> bool:
    crossover = first_crossover_month(run_simulation(_search_config(config, monthly_extra)).schedule)
    return crossover is not None and crossover <= target_month


def calculate_optimal_monthly_extra(config: MortgageConfig, target_month: int) -> Decimal:
    """Minimum recurring monthly extra payment that brings the crossover to ``target_month``.

    Bisects over [0, price] for a fixed number of iterations. Returns 0 when
    the target is already met without extra payments, and the upper bound
    when it cannot be met at all.
    """
    config = normalize_config(config)

    if _reaches_target(config, Decimal("0"), target_month):
        return Decimal("0")

    low = Decimal("0")
    high = config.price
    optimal = high

    for _ in range(SEARCH_ITERATIONS):
        mid = (low + high) / 2
        if _reaches_target(config, mid, target_month):
            optimal = mid
            high = mid
        else:
            low = mid

    logger.debug(
        "Optimal monthly extra for crossover by month %d: %s (bracket %s-%s)",
        target_month, optimal, low, high,
    )
    return round_money(optimal)
