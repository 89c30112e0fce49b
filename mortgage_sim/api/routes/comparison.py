"""reduce_term vs reduce_payment comparison routes."""

from fastapi import APIRouter, HTTPException

from mortgage_sim.api.routes.simulation import build_config
from mortgage_sim.api.schemas import ComparisonResponse, MortgageRequest, StrategyOutcomeResponse
from mortgage_sim.engine.comparison import compare_strategies
from mortgage_sim.models.results import StrategyOutcome

router = APIRouter(prefix="/api/v1/comparison", tags=["comparison"])


def _outcome_response(o: StrategyOutcome) -> StrategyOutcomeResponse:
    return StrategyOutcomeResponse(
        strategy=o.strategy,
        saved_interest=o.saved_interest,
        saved_months=o.saved_months,
        total_interest=o.total_interest,
        end_date=o.end_date,
        quota_before_prepayment=o.quota_before_prepayment,
        quota_after_prepayment=o.quota_after_prepayment,
    )


@router.post("/strategies", response_model=ComparisonResponse)
async def compare(req: MortgageRequest):
    """Run the same prepayment scenario under both payoff strategies."""
    if not any(p.amount > 0 for p in req.prepayments):
        raise HTTPException(status_code=400, detail="Comparison requires at least one prepayment")

    comparison = compare_strategies(build_config(req))
    return ComparisonResponse(
        reduce_term=_outcome_response(comparison.reduce_term),
        reduce_payment=_outcome_response(comparison.reduce_payment),
        first_prepayment_month=comparison.first_prepayment_month,
        interest_advantage=comparison.interest_advantage,
    )
