"""French (constant-quota) amortization.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from mortgage_sim.engine.rates import HUNDRED, to_monthly_rate
from mortgage_sim.models.loan import MortgageConfig
from mortgage_sim.models.results import QuoteRow, QuoteSchedule

TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def quota(principal: Decimal, periodic_rate: Decimal, periods: int) -> Decimal:
    """Constant periodic payment that amortizes ``principal`` to zero.

    Unrounded; callers round the derived interest and amortization instead.
    """
    if periods <= 0 or principal <= 0:
        return Decimal("0")
    if periodic_rate == 0:
        return principal / periods

    # Q = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + periodic_rate) ** periods
    return principal * (periodic_rate * factor) / (factor - 1)


def quote_schedule(config: MortgageConfig) -> QuoteSchedule:
    """Quick quote on a flat TEM, ignoring calendar days, prepayments and ITF.

    Values are left unrounded so totals match the closed-form figures.
    """
    loan_amount = config.loan_amount
    rate = to_monthly_rate(config.annual_rate)
    n_periods = config.total_months
    financial_payment = quota(loan_amount, rate, n_periods)
    fire_insurance = config.price * (config.fire_insurance_rate / HUNDRED)

    rows: list[QuoteRow] = []
    balance = loan_amount
    total_payment = Decimal("0")
    total_interest = Decimal("0")

    for month in range(1, n_periods + 1):
        interest = balance * rate
        capital = financial_payment - interest
        desgravamen = balance * (config.desgravamen_rate / HUNDRED)
        payment = financial_payment + desgravamen + fire_insurance

        balance = max(Decimal("0"), balance - capital)
        total_payment += payment
        total_interest += interest

        rows.append(QuoteRow(
            month=month,
            payment=payment,
            financial_payment=financial_payment,
            interest=interest,
            capital=capital,
            desgravamen=desgravamen,
            fire_insurance=fire_insurance,
            balance=balance,
        ))

    return QuoteSchedule(
        rows=rows,
        loan_amount=loan_amount,
        monthly_rate=rate,
        financial_payment=financial_payment,
        first_month_payment=rows[0].payment if rows else Decimal("0"),
        total_payment=total_payment,
        total_interest=total_interest,
    )
