"""Side-by-side comparison of reduce_term vs reduce_payment for one prepayment scenario."""

from dataclasses import replace
from decimal import Decimal

from mortgage_sim.engine.mortgage import calculate, normalize_config
from mortgage_sim.models.loan import MortgageConfig, PrepaymentStrategy
from mortgage_sim.models.results import (
    EngineResult,
    ScheduleRow,
    StrategyComparison,
    StrategyOutcome,
)


def _all_in_quota(row: ScheduleRow) -> Decimal:
    return row.financial_payment + row.desgravamen + row.fire_insurance


def _quotas_around(
    schedule: list[ScheduleRow], prepayment_month: int | None
) -> tuple[Decimal | None, Decimal | None]:
    """Quota on the row before the prepayment month and on the row right after it."""
    if prepayment_month is None:
        return None, None
    by_month = {row.month: row for row in schedule}
    before = by_month.get(prepayment_month - 1) or by_month.get(prepayment_month)
    after = by_month.get(prepayment_month + 1)
    return (
        _all_in_quota(before) if before is not None else None,
        _all_in_quota(after) if after is not None else None,
    )


def _outcome(
    strategy: PrepaymentStrategy,
    result: EngineResult,
    prepayment_month: int | None = None,
) -> StrategyOutcome:
    impact = result.strategy_impact
    before, after = _quotas_around(result.schedule, prepayment_month)
    return StrategyOutcome(
        strategy=strategy.value,
        saved_interest=impact.saved_interest,
        saved_months=impact.saved_months,
        total_interest=result.totals.total_interest,
        end_date=impact.new_end_date,
        quota_before_prepayment=before,
        quota_after_prepayment=after,
    )


def compare_strategies(config: MortgageConfig) -> StrategyComparison:
    """Run the same prepayment scenario under both payoff strategies."""
    config = normalize_config(config)

    term_result = calculate(replace(config, strategy=PrepaymentStrategy.REDUCE_TERM))
    payment_result = calculate(replace(config, strategy=PrepaymentStrategy.REDUCE_PAYMENT))

    first_prepayment = next(
        (row.month for row in payment_result.schedule if row.has_prepayment), None
    )

    return StrategyComparison(
        reduce_term=_outcome(PrepaymentStrategy.REDUCE_TERM, term_result),
        reduce_payment=_outcome(
            PrepaymentStrategy.REDUCE_PAYMENT, payment_result, first_prepayment
        ),
        first_prepayment_month=first_prepayment,
    )
