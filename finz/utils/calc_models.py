from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

# No range constraints: out-of-range numbers flow through the formulas
# unchanged.


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# -------------------------
# Investment
# -------------------------

class InvestmentInput(_Frozen):
    principal: float
    annual_yield_pct: float = Field(..., description="Annual yield in percent, e.g. 7 for 7%.")
    tax_rate_pct: float = Field(..., description="Tax rate on gains in percent.")
    inflation_pct: float = Field(..., description="Annual inflation in percent.")
    years: int


class InvestmentResult(_Frozen):
    principal: float
    net_future_value: float
    real_value: float
    tax_paid: float
    years: int


# -------------------------
# Loan
# -------------------------

class LoanInput(_Frozen):
    principal: float
    annual_rate_pct: float
    years: int
    include_monthly_schedule: bool = True


class MonthlyBreakdown(_Frozen):
    month: int
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


class LoanResult(_Frozen):
    principal: float
    monthly_payment: float
    total_paid: float
    total_interest: float
    years: int
    number_of_payments: int
    monthly_schedule: List[MonthlyBreakdown] = Field(default_factory=list)


# -------------------------
# Savings
# -------------------------

class SavingsInput(_Frozen):
    initial: float
    monthly_deposit: float
    annual_yield_pct: float
    inflation_pct: float
    years: int


class SavingsResult(_Frozen):
    initial: float
    monthly_deposit: float
    future_value: float
    real_future_value: float
    total_deposits: float
    interest_earned: float
    years: int
    number_of_months: int


# -------------------------
# Retirement
# -------------------------

class RetirementInput(_Frozen):
    current_age: int
    retirement_age: int
    current_savings: float
    monthly_contribution: float
    withdrawal_rate_pct: float
    annual_yield_pct: float
    inflation_pct: float


class RetirementResult(_Frozen):
    current_age: int
    retirement_age: int
    years_to_retirement: int
    retirement_savings: float
    annual_withdrawal: float
    monthly_withdrawal: float
    real_monthly_withdrawal: float


# -------------------------
# Currency
# -------------------------

ConversionErrorKind = Literal["unsupported_source_currency", "unsupported_target_currency"]


class CurrencyInput(_Frozen):
    amount: float
    from_code: str
    to_code: str


class CurrencyResult(_Frozen):
    amount: float
    from_code: str
    to_code: str
    converted_amount: float
    exchange_rate: float


class ConversionError(_Frozen):
    kind: ConversionErrorKind
    code: str = Field(..., description="Offending currency code, upper-cased.")

    @computed_field  # type: ignore[misc]
    @property
    def message(self) -> str:
        side = "source" if self.kind == "unsupported_source_currency" else "target"
        return f"unsupported {side} currency: {self.code}"


# -------------------------
# Budget
# -------------------------

class BudgetInput(_Frozen):
    income: float
    housing: float
    food: float
    transport: float
    utilities: float
    healthcare: float
    debt: float
    savings: float
    discretionary: float


class BudgetCategory(_Frozen):
    name: str
    amount: float
    percentage: float


class BudgetResult(_Frozen):
    income: float
    categories: List[BudgetCategory]
    total_amount: float
    total_percentage: float
    warning: Optional[str] = None
