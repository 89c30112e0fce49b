"""Refinancing event lookups: which event fires, which rate and period apply."""

from collections.abc import Iterable
from decimal import Decimal

from mortgage_sim.models.loan import RefinancingEvent


def sorted_events(events: Iterable[RefinancingEvent]) -> list[RefinancingEvent]:
    return sorted(events, key=lambda e: e.month)


def event_for_month(events: Iterable[RefinancingEvent], month: int) -> RefinancingEvent | None:
    """First event scheduled for ``month``, in the order given.

    Callers pass events already sorted with ``sorted_events``.
    """
    return next((e for e in events if e.month == month), None)


def _latest_event(events: Iterable[RefinancingEvent], month: int) -> RefinancingEvent | None:
    applicable = [e for e in sorted_events(events) if e.month <= month]
    return applicable[-1] if applicable else None


def active_rate_for_month(
    events: Iterable[RefinancingEvent], month: int, base_rate: Decimal
) -> Decimal:
    """TEA in force for ``month``: the latest event at or before it, else the base rate."""
    latest = _latest_event(events, month)
    return latest.new_rate if latest is not None else base_rate


def color_for_month(events: Iterable[RefinancingEvent], month: int) -> str | None:
    latest = _latest_event(events, month)
    return latest.color if latest is not None else None


def period_label(event: RefinancingEvent) -> str:
    return event.label or f"Refinancing - TEA {event.new_rate}%"
