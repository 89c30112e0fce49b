from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from mortgage_sim.engine.mortgage import (
    calculate,
    calculate_optimal_monthly_extra,
    first_crossover_month,
    normalize_config,
)
from mortgage_sim.engine.simulation import run_simulation
from mortgage_sim.models.loan import Frequency, Prepayment, PrepaymentStrategy
from mortgage_sim.models.results import StrategyStatus


def _with_monthly_extra(config, amount):
    return replace(
        config,
        prepayments=(
            Prepayment(month=1, amount=amount, frequency=Frequency.RECURRING, interval=1),
        ),
        strategy=PrepaymentStrategy.REDUCE_TERM,
    )


class TestNormalizeConfig:
    def test_defaults_start_date_to_today(self, canonical_config):
        config = normalize_config(replace(canonical_config, start_date=None))
        assert config.start_date == date.today()

    def test_keeps_explicit_start_date(self, canonical_config):
        assert normalize_config(canonical_config).start_date == date(2025, 1, 1)

    def test_calculate_without_start_date(self, canonical_config):
        result = calculate(replace(canonical_config, start_date=None))
        assert result.schedule[0].payment_date > date.today()


class TestBaselineComparison:
    def test_no_prepayments_saves_nothing(self, canonical_config):
        result = calculate(canonical_config)
        impact = result.strategy_impact
        assert impact.saved_interest == Decimal("0")
        assert impact.original_interest == result.totals.total_interest
        assert impact.new_end_date == impact.original_end_date
        assert all(row.interest_savings == Decimal("0") for row in result.schedule)

    def test_prepayments_save_interest_and_months(self, prepaying_config):
        result = calculate(prepaying_config)
        impact = result.strategy_impact
        assert impact.saved_interest > 0
        assert impact.saved_months > 0
        assert impact.saved_months == 240 - len(result.schedule)
        assert impact.new_end_date < impact.original_end_date
        assert impact.new_end_date == result.schedule[-1].payment_date

    def test_saved_interest_matches_totals(self, prepaying_config):
        result = calculate(prepaying_config)
        impact = result.strategy_impact
        assert impact.saved_interest == impact.original_interest - result.totals.total_interest

    def test_row_savings_never_negative(self, prepaying_config):
        result = calculate(prepaying_config)
        assert all(row.interest_savings >= 0 for row in result.schedule)
        # Savings start after the first prepayment
        assert result.schedule[10].interest_savings == Decimal("0")
        assert result.schedule[13].interest_savings > 0

    def test_row_savings_against_baseline(self, canonical_config, prepaying_config):
        baseline = run_simulation(canonical_config).schedule
        result = calculate(prepaying_config)
        for base_row, row in zip(baseline, result.schedule):
            assert row.interest_savings == max(Decimal("0"), base_row.interest - row.interest)

    @pytest.mark.parametrize("strategy", list(PrepaymentStrategy))
    def test_impact_never_negative(self, canonical_config, strategy):
        config = replace(
            canonical_config,
            prepayments=(Prepayment(month=6, amount=Decimal("15000")),),
            strategy=strategy,
            intelligent_strategy=True,
        )
        impact = calculate(config).strategy_impact
        assert impact.saved_interest >= 0
        assert impact.saved_months >= 0

    def test_baseline_ignores_intelligent_strategy(self, monthly_attack_config):
        config = replace(monthly_attack_config, intelligent_strategy=True)
        result = calculate(config)
        baseline = run_simulation(replace(monthly_attack_config, prepayments=())).schedule
        assert result.strategy_impact.original_interest == sum(r.interest for r in baseline)
        pivots = [r for r in result.schedule if r.status is StrategyStatus.PIVOT]
        assert len(pivots) == 1


class TestAffordability:
    def test_risky_on_low_salary(self, canonical_config):
        result = calculate(replace(canonical_config, monthly_salary=Decimal("6550")))
        a = result.affordability
        assert a.first_payment == result.schedule[0].payment
        assert a.salary_percentage > Decimal("30")
        assert a.is_risky

    def test_safe_on_high_salary(self, canonical_config):
        result = calculate(replace(canonical_config, monthly_salary=Decimal("20000")))
        assert not result.affordability.is_risky

    def test_no_salary(self, canonical_config):
        assert calculate(canonical_config).affordability is None

    def test_threshold_from_config(self, canonical_config):
        config = replace(canonical_config, monthly_salary=Decimal("6550"))
        share = calculate(config).affordability.salary_percentage
        relaxed = calculate(replace(config, risk_threshold_pct=share + 1)).affordability
        assert relaxed.salary_percentage == share
        assert not relaxed.is_risky


class TestOptimalMonthlyExtra:
    def test_reaches_target(self, canonical_config):
        amount = calculate_optimal_monthly_extra(canonical_config, 24)
        assert amount > 0
        schedule = run_simulation(
            _with_monthly_extra(canonical_config, amount + Decimal("0.01"))
        ).schedule
        assert first_crossover_month(schedule) <= 24

    def test_is_minimal(self, canonical_config):
        amount = calculate_optimal_monthly_extra(canonical_config, 24)
        schedule = run_simulation(
            _with_monthly_extra(canonical_config, amount - Decimal("1"))
        ).schedule
        crossover = first_crossover_month(schedule)
        assert crossover is None or crossover > 24

    def test_earlier_target_needs_more(self, canonical_config):
        early = calculate_optimal_monthly_extra(canonical_config, 6)
        late = calculate_optimal_monthly_extra(canonical_config, 60)
        assert early > late

    def test_already_met(self, canonical_config):
        assert first_crossover_month(run_simulation(canonical_config).schedule) < 200
        assert calculate_optimal_monthly_extra(canonical_config, 200) == Decimal("0")

    def test_unreachable_returns_upper_bound(self, canonical_config):
        assert calculate_optimal_monthly_extra(canonical_config, 0) == Decimal("300000.00")

    def test_ignores_intelligent_strategy(self, canonical_config):
        plain = calculate_optimal_monthly_extra(canonical_config, 24)
        smart = calculate_optimal_monthly_extra(
            replace(canonical_config, intelligent_strategy=True), 24
        )
        assert plain == smart
