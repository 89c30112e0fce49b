"""Extra principal scheduled by prepayment declarations."""

from collections.abc import Iterable
from decimal import Decimal

from mortgage_sim.models.loan import Frequency, Prepayment


def fires_in_month(prepayment: Prepayment, month: int) -> bool:
    if prepayment.frequency is Frequency.UNIQUE:
        return prepayment.month == month
    if month < prepayment.month:
        return False
    return (month - prepayment.month) % prepayment.effective_interval == 0


def extra_capital_for(month: int, prepayments: Iterable[Prepayment]) -> Decimal:
    """Total extra principal declared for a 1-based month.

    Unique declarations fire once; recurring ones fire at ``month``,
    ``month + interval``, ... (interval defaults to 12).
    """
    return sum(
        (p.amount for p in prepayments if fires_in_month(p, month)),
        Decimal("0"),
    )
