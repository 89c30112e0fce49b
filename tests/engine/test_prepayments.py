from decimal import Decimal

from mortgage_sim.engine.prepayments import extra_capital_for
from mortgage_sim.models.loan import Frequency, Prepayment


class TestUniquePrepayment:
    def test_fires_only_in_its_month(self):
        p = [Prepayment(month=6, amount=Decimal("5000"))]
        assert extra_capital_for(6, p) == Decimal("5000")
        assert extra_capital_for(5, p) == Decimal("0")
        assert extra_capital_for(18, p) == Decimal("0")


class TestRecurringPrepayment:
    def test_custom_interval(self):
        """Declared at month 3 every 6 months: 3, 9, 15, ..."""
        p = [Prepayment(month=3, amount=Decimal("1000"), frequency=Frequency.RECURRING, interval=6)]
        firing = [m for m in range(1, 40) if extra_capital_for(m, p) > 0]
        assert firing == [3, 9, 15, 21, 27, 33, 39]

    def test_default_interval_is_yearly(self):
        p = [Prepayment(month=5, amount=Decimal("1000"), frequency=Frequency.RECURRING)]
        firing = [m for m in range(1, 50) if extra_capital_for(m, p) > 0]
        assert firing == [5, 17, 29, 41]

    def test_nothing_before_first_month(self):
        p = [Prepayment(month=10, amount=Decimal("1000"), frequency=Frequency.RECURRING, interval=1)]
        assert extra_capital_for(9, p) == Decimal("0")
        assert extra_capital_for(10, p) == Decimal("1000")
        assert extra_capital_for(11, p) == Decimal("1000")


class TestCombinedPrepayments:
    def test_amounts_are_additive(self):
        p = [
            Prepayment(month=12, amount=Decimal("3000")),
            Prepayment(month=12, amount=Decimal("2000"), frequency=Frequency.RECURRING),
        ]
        assert extra_capital_for(12, p) == Decimal("5000")
        assert extra_capital_for(24, p) == Decimal("2000")

    def test_order_does_not_matter(self):
        a = Prepayment(month=1, amount=Decimal("100"), frequency=Frequency.RECURRING, interval=1)
        b = Prepayment(month=4, amount=Decimal("700"))
        assert extra_capital_for(4, [a, b]) == extra_capital_for(4, [b, a]) == Decimal("800")

    def test_empty(self):
        assert extra_capital_for(1, []) == Decimal("0")
