"""Month-by-month amortization loop with day-count interest.

Each month accrues interest on the actual days elapsed since the previous
payment date, charges both insurance premiums, applies refinancing events and
extra capital, and computes the ITF split between base quota and extra capital.

Pure computation. No I/O.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from mortgage_sim.engine.dates import add_months, days_between
from mortgage_sim.engine.debt import quota, round_money
from mortgage_sim.engine.prepayments import extra_capital_for
from mortgage_sim.engine.rates import HUNDRED, to_daily_rate, to_monthly_rate
from mortgage_sim.engine.refinancing import event_for_month, period_label, sorted_events
from mortgage_sim.engine.strategy import StrategyPhase, is_equilibrium, transition
from mortgage_sim.models.loan import MortgageConfig, PrepaymentStrategy
from mortgage_sim.models.results import EngineResult, ScheduleRow, ScheduleTotals, StrategyStatus

logger = logging.getLogger(__name__)

PAYOFF_EPSILON = Decimal("0.05")


def fold_totals(schedule: Iterable[ScheduleRow]) -> ScheduleTotals:
    totals = ScheduleTotals()
    for row in schedule:
        totals.total_interest += row.interest
        totals.total_capital += row.total_amortization
        totals.total_extra += row.extra_capital
        totals.total_insurance += row.desgravamen + row.fire_insurance
        totals.total_payment += row.payment
        totals.total_itf += row.itf
    return totals


def run_simulation(config: MortgageConfig) -> EngineResult:
    """Run the amortization loop for a normalized config (``start_date`` set).

    Stops once the balance falls to the payoff epsilon or the contractual
    term is exhausted, whichever comes first.
    """
    start_date = config.start_date
    max_months = config.total_months
    fire_insurance = round_money(config.price * (config.fire_insurance_rate / HUNDRED))
    events = sorted_events(config.refinancing_events)

    current_rate = config.annual_rate
    tem = to_monthly_rate(current_rate)
    ted = to_daily_rate(current_rate)

    balance = config.loan_amount
    standing_quota = quota(balance, tem, max_months)

    phase = StrategyPhase.ATTACK
    period_color: str | None = None
    current_label: str | None = None
    current_date = start_date
    schedule: list[ScheduleRow] = []

    for month in range(1, max_months + 1):
        if balance <= PAYOFF_EPSILON:
            break

        prev_date = current_date
        current_date = add_months(start_date, month)
        days = days_between(prev_date, current_date)

        refinancing = event_for_month(events, month)
        if refinancing is not None:
            current_rate = refinancing.new_rate
            tem = to_monthly_rate(current_rate)
            ted = to_daily_rate(current_rate)
            # Quota is re-derived on the pre-cost balance; closing costs are
            # then financed on top of it
            standing_quota = quota(balance, tem, max_months - month + 1)
            balance += refinancing.closing_costs
            period_color = refinancing.color
            current_label = period_label(refinancing)

        interest_factor = (1 + ted) ** days - 1
        interest = round_money(balance * interest_factor)
        desgravamen = round_money(balance * (config.desgravamen_rate / HUNDRED))

        amortization = round_money(standing_quota - interest)
        # Last payment correction
        if amortization > balance:
            amortization = balance
            standing_quota = amortization + interest

        declared_extra = extra_capital_for(month, config.prepayments)
        if config.intelligent_strategy:
            step = transition(
                phase,
                is_equilibrium(month, amortization, interest),
                config.aggressive_continuity,
            )
            phase = step.phase
            extra_capital, status = step.resolve(declared_extra)
        else:
            extra_capital, status = declared_extra, StrategyStatus.DEFAULT

        if amortization + extra_capital > balance:
            extra_capital = max(Decimal("0"), balance - amortization)

        total_amortization = amortization + extra_capital
        balance_end = max(Decimal("0"), round_money(balance - total_amortization))

        base_payment = interest + amortization + desgravamen + fire_insurance
        itf_base = round_money(base_payment * config.itf_rate)
        itf_extra = round_money(extra_capital * config.itf_rate)
        itf = itf_base + itf_extra

        schedule.append(ScheduleRow(
            month=month,
            payment_date=current_date,
            days_in_period=days,
            tea=current_rate,
            ted=ted,
            balance_start=balance,
            interest=interest,
            desgravamen=desgravamen,
            fire_insurance=fire_insurance,
            financial_payment=standing_quota,
            amortization=amortization,
            extra_capital=extra_capital,
            total_amortization=total_amortization,
            itf_base=itf_base,
            itf_extra=itf_extra,
            itf=itf,
            payment=base_payment + extra_capital + itf,
            balance_end=balance_end,
            has_prepayment=extra_capital > 0,
            is_crossover=total_amortization > interest,
            is_scheduled_crossover=amortization > interest,
            status=status,
            refinancing_event=refinancing,
            background_color=period_color,
            period_label=current_label,
        ))

        balance = balance_end

        if (
            config.strategy is PrepaymentStrategy.REDUCE_PAYMENT
            and extra_capital > 0
            and balance > 0
        ):
            remaining = max_months - month
            if remaining > 0:
                standing_quota = quota(balance, tem, remaining)

    if len(schedule) < max_months:
        logger.debug("Loan paid off early after %d of %d months", len(schedule), max_months)

    return EngineResult(schedule=schedule, totals=fold_totals(schedule))
