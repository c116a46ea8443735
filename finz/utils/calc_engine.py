from __future__ import annotations

from typing import List, Union

from finz.utils.calc_models import (
    InvestmentInput, InvestmentResult,
    LoanInput, LoanResult, MonthlyBreakdown,
    SavingsInput, SavingsResult,
    RetirementInput, RetirementResult,
    CurrencyInput, CurrencyResult, ConversionError,
    BudgetInput, BudgetResult, BudgetCategory,
)
from finz.utils.fx_rates import RATES
from finz.utils.numeric import div, growth

SCHEDULE_MONTHS = 12

BUDGET_WARNING = "Warning: Your budget percentages total does not equal 100%"

# (display name, BudgetInput field) in display order
BUDGET_CATEGORIES = (
    ("Housing", "housing"),
    ("Food", "food"),
    ("Transportation", "transport"),
    ("Utilities", "utilities"),
    ("Healthcare", "healthcare"),
    ("Debt Repayment", "debt"),
    ("Savings", "savings"),
    ("Discretionary", "discretionary"),
)


def _frac(pct: float) -> float:
    return pct / 100


def _annuity_fv(payment: float, mr: float, n_months: int) -> float:
    """Future value of `n_months` equal deposits; linear when the rate is exactly zero."""
    if mr != 0:
        return div(payment * (growth(mr, n_months) - 1), mr)
    return payment * n_months


def calculate_investment(inv: InvestmentInput) -> InvestmentResult:
    rate = _frac(inv.annual_yield_pct)
    tax = _frac(inv.tax_rate_pct)
    inf = _frac(inv.inflation_pct)

    future_value = inv.principal * growth(rate, inv.years)
    profit = future_value - inv.principal
    # no floor: a loss produces negative tax
    tax_paid = profit * tax
    net_future_value = future_value - tax_paid
    real_value = div(net_future_value, growth(inf, inv.years))

    return InvestmentResult(
        principal=inv.principal,
        net_future_value=net_future_value,
        real_value=real_value,
        tax_paid=tax_paid,
        years=inv.years,
    )


def calculate_loan(loan: LoanInput) -> LoanResult:
    """
    Standard amortizing payment P*r*(1+r)^n / ((1+r)^n - 1).

    A zero rate or a zero term divides by zero and yields a NaN/inf payment.
    There is deliberately no principal/n fallback here.
    """
    mr = _frac(loan.annual_rate_pct) / 12
    n_payments = loan.years * 12

    compounded = growth(mr, n_payments)
    monthly_payment = div(loan.principal * mr * compounded, compounded - 1)

    total_paid = monthly_payment * n_payments
    total_interest = total_paid - loan.principal

    schedule: List[MonthlyBreakdown] = []
    if loan.include_monthly_schedule:
        balance = loan.principal
        # first year only, even past payoff on short terms
        for month in range(1, SCHEDULE_MONTHS + 1):
            interest = balance * mr
            principal_part = monthly_payment - interest
            balance -= principal_part
            schedule.append(MonthlyBreakdown(
                month=month,
                payment=monthly_payment,
                principal_portion=principal_part,
                interest_portion=interest,
                remaining_balance=balance,
            ))

    return LoanResult(
        principal=loan.principal,
        monthly_payment=monthly_payment,
        total_paid=total_paid,
        total_interest=total_interest,
        years=loan.years,
        number_of_payments=n_payments,
        monthly_schedule=schedule,
    )


def calculate_savings(sv: SavingsInput) -> SavingsResult:
    mr = _frac(sv.annual_yield_pct) / 12
    n_months = sv.years * 12

    future_value = sv.initial * growth(mr, n_months) + _annuity_fv(sv.monthly_deposit, mr, n_months)

    total_deposits = sv.initial + sv.monthly_deposit * n_months
    interest_earned = future_value - total_deposits

    if sv.inflation_pct > 0:
        real_future_value = div(future_value, growth(_frac(sv.inflation_pct), sv.years))
    else:
        real_future_value = future_value

    return SavingsResult(
        initial=sv.initial,
        monthly_deposit=sv.monthly_deposit,
        future_value=future_value,
        real_future_value=real_future_value,
        total_deposits=total_deposits,
        interest_earned=interest_earned,
        years=sv.years,
        number_of_months=n_months,
    )


def calculate_retirement(rt: RetirementInput) -> RetirementResult:
    years_to_retirement = rt.retirement_age - rt.current_age
    n_months = years_to_retirement * 12
    mr = _frac(rt.annual_yield_pct) / 12

    savings = rt.current_savings * growth(mr, n_months)
    savings += _annuity_fv(rt.monthly_contribution, mr, n_months)

    annual_withdrawal = savings * _frac(rt.withdrawal_rate_pct)
    monthly_withdrawal = annual_withdrawal / 12
    real_monthly_withdrawal = div(monthly_withdrawal, growth(_frac(rt.inflation_pct), years_to_retirement))

    return RetirementResult(
        current_age=rt.current_age,
        retirement_age=rt.retirement_age,
        years_to_retirement=years_to_retirement,
        retirement_savings=savings,
        annual_withdrawal=annual_withdrawal,
        monthly_withdrawal=monthly_withdrawal,
        real_monthly_withdrawal=real_monthly_withdrawal,
    )


def convert_currency(cx: CurrencyInput) -> Union[CurrencyResult, ConversionError]:
    src = cx.from_code.upper()
    dst = cx.to_code.upper()

    if src == dst:
        # same code never touches the table, known or not
        rate = 1.0
    else:
        targets = RATES.get(src)
        if targets is None:
            return ConversionError(kind="unsupported_source_currency", code=src)
        if dst not in targets:
            return ConversionError(kind="unsupported_target_currency", code=dst)
        rate = targets[dst]

    return CurrencyResult(
        amount=cx.amount,
        from_code=src,
        to_code=dst,
        converted_amount=cx.amount * rate,
        exchange_rate=rate,
    )


def allocate_budget(b: BudgetInput) -> BudgetResult:
    total_pct = 0.0
    for _, field in BUDGET_CATEGORIES:
        total_pct += getattr(b, field)

    categories = [
        BudgetCategory(name=name, amount=b.income * getattr(b, field) / 100, percentage=getattr(b, field))
        for name, field in BUDGET_CATEGORIES
    ]

    return BudgetResult(
        income=b.income,
        categories=categories,
        total_amount=b.income * total_pct / 100,
        total_percentage=total_pct,
        # exact comparison, 99.999 still warns
        warning=None if total_pct == 100 else BUDGET_WARNING,
    )
