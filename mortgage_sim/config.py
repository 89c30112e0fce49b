from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Engine defaults applied to API requests
    itf_rate: Decimal = Decimal("0.00005")  # ITF (transaction tax), 0.005%
    risk_threshold_pct: Decimal = Decimal("30")  # Payment-to-salary ratio flagged as risky

    # Loan defaults for the quick calculator
    default_price: Decimal = Decimal("300000")
    default_down_payment: Decimal = Decimal("60000")
    default_annual_rate: Decimal = Decimal("8.5")
    default_term_years: int = 20
    default_desgravamen_rate: Decimal = Decimal("0.049")
    default_fire_insurance_rate: Decimal = Decimal("0.029")


settings = Settings()
