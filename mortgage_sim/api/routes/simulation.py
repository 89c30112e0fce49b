"""Simulation routes: the primary API entry point."""

import logging
from decimal import Decimal

from fastapi import APIRouter

from mortgage_sim.api.schemas import (
    AffordabilityResponse,
    MortgageRequest,
    OptimalExtraRequest,
    OptimalExtraResponse,
    QuoteResponse,
    QuoteRowResponse,
    RefinancingEventSchema,
    ScheduleRowResponse,
    SimulationResponse,
    StrategyImpactResponse,
    TotalsResponse,
)
from mortgage_sim.config import settings
from mortgage_sim.engine.affordability import assess_affordability
from mortgage_sim.engine.debt import quote_schedule, round_money
from mortgage_sim.engine.mortgage import calculate, calculate_optimal_monthly_extra
from mortgage_sim.engine.rates import apply_rate_settings, monthly_rate_pct
from mortgage_sim.models.loan import (
    Frequency,
    MortgageConfig,
    Prepayment,
    PrepaymentStrategy,
    RateSettings,
    RefinancingEvent,
)
from mortgage_sim.models.results import Affordability, EngineResult, ScheduleRow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/simulations", tags=["simulations"])

FOUR_PLACES = Decimal("0.0001")


def build_config(req: MortgageRequest) -> MortgageConfig:
    """Build an engine config from request data."""
    config = MortgageConfig(
        price=req.price,
        down_payment=req.down_payment,
        annual_rate=req.annual_rate,
        term_years=req.term_years,
        desgravamen_rate=req.desgravamen_rate,
        fire_insurance_rate=req.fire_insurance_rate,
        prepayments=tuple(
            Prepayment(
                month=p.month,
                amount=p.amount,
                frequency=Frequency(p.frequency),
                interval=p.interval,
            )
            for p in req.prepayments
        ),
        strategy=PrepaymentStrategy(req.strategy),
        start_date=req.start_date,
        monthly_salary=req.monthly_salary,
        intelligent_strategy=req.intelligent_strategy,
        aggressive_continuity=req.aggressive_continuity,
        refinancing_events=tuple(
            RefinancingEvent(
                month=e.month,
                new_rate=e.new_rate,
                closing_costs=e.closing_costs,
                color=e.color,
                label=e.label,
                id=e.id,
            )
            for e in req.refinancing_events
        ),
        itf_rate=settings.itf_rate,
        risk_threshold_pct=settings.risk_threshold_pct,
    )
    if req.rate_settings is not None:
        rs = req.rate_settings
        config = apply_rate_settings(config, RateSettings(
            tea=rs.tea,
            tcea=rs.tcea,
            desgravamen_rate=rs.desgravamen_rate,
            fire_insurance_rate=rs.fire_insurance_rate,
            tcea_mode=rs.tcea_mode,
        ))
    return config


def _affordability_to_response(a: Affordability | None) -> AffordabilityResponse | None:
    if a is None:
        return None
    return AffordabilityResponse(
        first_payment=round_money(a.first_payment),
        monthly_salary=a.monthly_salary,
        salary_percentage=a.salary_percentage,
        is_risky=a.is_risky,
    )


def _row_to_response(row: ScheduleRow) -> ScheduleRowResponse:
    event = row.refinancing_event
    return ScheduleRowResponse(
        month=row.month,
        payment_date=row.payment_date,
        days_in_period=row.days_in_period,
        tea=row.tea,
        balance_start=row.balance_start,
        interest=row.interest,
        desgravamen=row.desgravamen,
        fire_insurance=row.fire_insurance,
        financial_payment=round_money(row.financial_payment),
        amortization=row.amortization,
        extra_capital=row.extra_capital,
        total_amortization=row.total_amortization,
        itf_base=row.itf_base,
        itf_extra=row.itf_extra,
        itf=row.itf,
        payment=round_money(row.payment),
        balance_end=row.balance_end,
        has_prepayment=row.has_prepayment,
        is_crossover=row.is_crossover,
        is_scheduled_crossover=row.is_scheduled_crossover,
        status=row.status.value,
        interest_savings=row.interest_savings,
        refinancing_event=(
            RefinancingEventSchema(
                id=event.id,
                month=event.month,
                new_rate=event.new_rate,
                closing_costs=event.closing_costs,
                color=event.color,
                label=event.label,
            )
            if event is not None
            else None
        ),
        background_color=row.background_color,
        period_label=row.period_label,
    )


def _result_to_response(config: MortgageConfig, result: EngineResult) -> SimulationResponse:
    """Convert engine EngineResult to API response."""
    t = result.totals
    impact = result.strategy_impact
    return SimulationResponse(
        loan_amount=config.loan_amount,
        down_payment_pct=config.down_payment_pct,
        schedule=[_row_to_response(row) for row in result.schedule],
        totals=TotalsResponse(
            total_interest=t.total_interest,
            total_capital=t.total_capital,
            total_extra=t.total_extra,
            total_insurance=t.total_insurance,
            total_payment=round_money(t.total_payment),
            total_itf=t.total_itf,
        ),
        strategy_impact=StrategyImpactResponse(
            original_interest=impact.original_interest,
            saved_interest=impact.saved_interest,
            saved_months=impact.saved_months,
            new_end_date=impact.new_end_date,
            original_end_date=impact.original_end_date,
        ),
        affordability=_affordability_to_response(result.affordability),
    )


@router.post("", response_model=SimulationResponse)
async def simulate(req: MortgageRequest):
    """Simulate the loan month by month and compare it with the unassisted baseline."""
    config = build_config(req)
    result = calculate(config)
    logger.info(
        "Simulated %s over %d years: %d rows, %s interest saved",
        config.loan_amount, config.term_years, len(result.schedule),
        result.strategy_impact.saved_interest,
    )
    return _result_to_response(config, result)


@router.post("/optimal-extra", response_model=OptimalExtraResponse)
async def optimal_extra(req: OptimalExtraRequest):
    """Minimum recurring monthly extra payment that reaches equilibrium by the target month."""
    amount = calculate_optimal_monthly_extra(build_config(req), req.target_month)
    return OptimalExtraResponse(target_month=req.target_month, monthly_extra=amount)


@router.post("/quote", response_model=QuoteResponse)
async def quote(req: MortgageRequest):
    """Quick constant-quota quote on the flat monthly rate."""
    config = build_config(req)
    q = quote_schedule(config)
    affordability = None
    if config.monthly_salary:
        affordability = assess_affordability(
            round_money(q.first_month_payment), config.monthly_salary, config.risk_threshold_pct
        )
    return QuoteResponse(
        loan_amount=q.loan_amount,
        monthly_rate_pct=monthly_rate_pct(config.annual_rate).quantize(FOUR_PLACES),
        financial_payment=round_money(q.financial_payment),
        first_month_payment=round_money(q.first_month_payment),
        total_payment=round_money(q.total_payment),
        total_interest=round_money(q.total_interest),
        rows=[
            QuoteRowResponse(
                month=r.month,
                payment=round_money(r.payment),
                financial_payment=round_money(r.financial_payment),
                interest=round_money(r.interest),
                capital=round_money(r.capital),
                desgravamen=round_money(r.desgravamen),
                fire_insurance=round_money(r.fire_insurance),
                balance=round_money(r.balance),
            )
            for r in q.rows
        ],
        affordability=_affordability_to_response(affordability),
    )
