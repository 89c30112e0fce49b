"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from mortgage_sim.config import settings


# ---- Request schemas ----

class PrepaymentSchema(BaseModel):
    month: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=0)
    frequency: str = Field("unique", pattern="^(unique|recurring)$")
    interval: int | None = Field(None, ge=1, description="Months between recurring payments (default 12)")


class RefinancingEventSchema(BaseModel):
    id: str | None = None
    month: int = Field(..., ge=1)
    new_rate: Decimal = Field(..., ge=0, description="New TEA %")
    closing_costs: Decimal = Field(Decimal("0"), ge=0)
    color: str | None = None
    label: str | None = None


class RateSettingsSchema(BaseModel):
    tcea_mode: bool = False
    tea: Decimal = Field(..., ge=0)
    tcea: Decimal | None = Field(None, ge=0)
    desgravamen_rate: Decimal = Field(Decimal("0"), ge=0)
    fire_insurance_rate: Decimal = Field(Decimal("0"), ge=0)


class MortgageRequest(BaseModel):
    price: Decimal = Field(settings.default_price, ge=0)
    down_payment: Decimal = Field(settings.default_down_payment, ge=0)
    annual_rate: Decimal = Field(settings.default_annual_rate, ge=0, description="TEA %")
    term_years: int = Field(settings.default_term_years, ge=1, le=50)
    desgravamen_rate: Decimal = Field(settings.default_desgravamen_rate, ge=0)
    fire_insurance_rate: Decimal = Field(settings.default_fire_insurance_rate, ge=0)

    prepayments: list[PrepaymentSchema] = Field(default_factory=list)
    strategy: str = Field("reduce_term", pattern="^(reduce_term|reduce_payment)$")
    start_date: date | None = None
    monthly_salary: Decimal | None = Field(None, ge=0)

    intelligent_strategy: bool = False
    aggressive_continuity: bool = False
    refinancing_events: list[RefinancingEventSchema] = Field(default_factory=list)

    # Overrides annual_rate and insurance rates when provided
    rate_settings: RateSettingsSchema | None = None

    @model_validator(mode="after")
    def down_payment_within_price(self):
        if self.down_payment > self.price:
            raise ValueError("down_payment cannot exceed price")
        return self


class OptimalExtraRequest(MortgageRequest):
    target_month: int = Field(..., ge=1, description="Month by which capital should overtake interest")


# ---- Response schemas ----

class ScheduleRowResponse(BaseModel):
    month: int
    payment_date: date
    days_in_period: int
    tea: Decimal
    balance_start: Decimal
    interest: Decimal
    desgravamen: Decimal
    fire_insurance: Decimal
    financial_payment: Decimal
    amortization: Decimal
    extra_capital: Decimal
    total_amortization: Decimal
    itf_base: Decimal
    itf_extra: Decimal
    itf: Decimal
    payment: Decimal
    balance_end: Decimal
    has_prepayment: bool
    is_crossover: bool
    is_scheduled_crossover: bool
    status: str
    interest_savings: Decimal | None = None
    refinancing_event: RefinancingEventSchema | None = None
    background_color: str | None = None
    period_label: str | None = None


class TotalsResponse(BaseModel):
    total_interest: Decimal
    total_capital: Decimal
    total_extra: Decimal
    total_insurance: Decimal
    total_payment: Decimal
    total_itf: Decimal


class StrategyImpactResponse(BaseModel):
    original_interest: Decimal
    saved_interest: Decimal
    saved_months: int
    new_end_date: date
    original_end_date: date


class AffordabilityResponse(BaseModel):
    first_payment: Decimal
    monthly_salary: Decimal
    salary_percentage: Decimal
    is_risky: bool


class SimulationResponse(BaseModel):
    loan_amount: Decimal
    down_payment_pct: Decimal
    schedule: list[ScheduleRowResponse]
    totals: TotalsResponse
    strategy_impact: StrategyImpactResponse
    affordability: AffordabilityResponse | None = None


class OptimalExtraResponse(BaseModel):
    target_month: int
    monthly_extra: Decimal


class QuoteRowResponse(BaseModel):
    month: int
    payment: Decimal
    financial_payment: Decimal
    interest: Decimal
    capital: Decimal
    desgravamen: Decimal
    fire_insurance: Decimal
    balance: Decimal


class QuoteResponse(BaseModel):
    loan_amount: Decimal
    monthly_rate_pct: Decimal
    financial_payment: Decimal
    first_month_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    rows: list[QuoteRowResponse]
    affordability: AffordabilityResponse | None = None


class StrategyOutcomeResponse(BaseModel):
    strategy: str
    saved_interest: Decimal
    saved_months: int
    total_interest: Decimal
    end_date: date
    quota_before_prepayment: Decimal | None = None
    quota_after_prepayment: Decimal | None = None


class ComparisonResponse(BaseModel):
    reduce_term: StrategyOutcomeResponse
    reduce_payment: StrategyOutcomeResponse
    first_prepayment_month: int | None = None
    interest_advantage: Decimal
