"""Payment-to-income affordability check."""

from decimal import Decimal, ROUND_HALF_UP

from mortgage_sim.models.loan import DEFAULT_RISK_THRESHOLD_PCT
from mortgage_sim.models.results import Affordability


def salary_percentage(payment: Decimal, monthly_salary: Decimal) -> Decimal:
    """Share of salary taken by the payment, in percent."""
    if monthly_salary == 0:
        return Decimal("0")
    return (payment / monthly_salary * 100).quantize(Decimal("0.01"), ROUND_HALF_UP)


def assess_affordability(
    first_payment: Decimal,
    monthly_salary: Decimal,
    threshold_pct: Decimal = DEFAULT_RISK_THRESHOLD_PCT,
) -> Affordability:
    share = salary_percentage(first_payment, monthly_salary)
    return Affordability(
        first_payment=first_payment,
        monthly_salary=monthly_salary,
        salary_percentage=share,
        is_risky=share > threshold_pct,
    )
