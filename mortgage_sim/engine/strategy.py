"""Intelligent prepayment strategy as an explicit state machine.

The borrower "attacks" the loan with prepayments until the fixed quota's
principal component overtakes interest (equilibrium). From there the
conservative branch stops prepaying to protect cash flow, while aggressive
continuity keeps applying every declared prepayment.

    ATTACK --crossover, conservative--> EQUILIBRIUM_PIVOT --> PROTECTED
    ATTACK --crossover, aggressive--> ACCELERATION

Aggressive continuity skips the one-month EQUILIBRIUM_PIVOT on purpose: there
is no pivot month to report when nothing is suspended.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from mortgage_sim.models.results import StrategyStatus


class StrategyPhase(Enum):
    ATTACK = "attack"
    EQUILIBRIUM_PIVOT = "equilibrium_pivot"
    PROTECTED = "protected"
    ACCELERATION = "acceleration"


class ExtraPolicy(Enum):
    APPLY = "apply"  # Use the declared prepayments for the month
    SUSPEND = "suspend"  # Force extra capital to zero


@dataclass(frozen=True)
class Transition:
    phase: StrategyPhase
    policy: ExtraPolicy
    suspended_status: StrategyStatus = StrategyStatus.PROTECTED

    def resolve(self, declared_extra: Decimal) -> tuple[Decimal, StrategyStatus]:
        """Extra capital and status tag for the month."""
        if self.policy is ExtraPolicy.SUSPEND:
            return Decimal("0"), self.suspended_status
        if declared_extra > 0:
            return declared_extra, StrategyStatus.ACCELERATION
        return declared_extra, StrategyStatus.DEFAULT


def is_equilibrium(month: int, amortization: Decimal, interest: Decimal) -> bool:
    """Scheduled amortization beats interest. Month 1 never counts."""
    return month > 1 and amortization > interest


def transition(
    phase: StrategyPhase, crossover: bool, aggressive_continuity: bool
) -> Transition:
    """Phase for the current month given last month's phase and this month's crossover test."""
    if phase is StrategyPhase.ATTACK:
        if not crossover:
            return Transition(StrategyPhase.ATTACK, ExtraPolicy.APPLY)
        if aggressive_continuity:
            return Transition(StrategyPhase.ACCELERATION, ExtraPolicy.APPLY)
        return Transition(
            StrategyPhase.EQUILIBRIUM_PIVOT, ExtraPolicy.SUSPEND, StrategyStatus.PIVOT
        )

    if phase is StrategyPhase.ACCELERATION:
        return Transition(StrategyPhase.ACCELERATION, ExtraPolicy.APPLY)

    # EQUILIBRIUM_PIVOT lasts a single month; PROTECTED is terminal
    return Transition(StrategyPhase.PROTECTED, ExtraPolicy.SUSPEND, StrategyStatus.PROTECTED)
