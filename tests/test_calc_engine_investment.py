import math

import pytest

from finz.utils.calc_engine import calculate_investment
from finz.utils.calc_models import InvestmentInput


def test_investment_golden_values():
    out = calculate_investment(InvestmentInput(
        principal=10000, annual_yield_pct=7, tax_rate_pct=20, inflation_pct=2, years=10,
    ))
    assert out.net_future_value == pytest.approx(17865.70, rel=0.01)
    assert out.tax_paid == pytest.approx(1934.30, rel=0.01)
    assert out.real_value == pytest.approx(14661.23, rel=0.01)
    assert out.years == 10
    assert out.principal == 10000


def test_tax_applies_to_profit_only():
    out = calculate_investment(InvestmentInput(
        principal=10000, annual_yield_pct=7, tax_rate_pct=26, inflation_pct=0, years=10,
    ))
    gross = 10000 * 1.07 ** 10
    assert out.tax_paid == pytest.approx((gross - 10000) * 0.26)
    assert out.net_future_value == pytest.approx(gross - out.tax_paid)
    # no inflation: real equals nominal
    assert out.real_value == pytest.approx(out.net_future_value)


@pytest.mark.parametrize("yield_pct", [0, 3.5, 7, 12])
def test_zero_years_returns_principal(yield_pct):
    out = calculate_investment(InvestmentInput(
        principal=2500, annual_yield_pct=yield_pct, tax_rate_pct=26, inflation_pct=2, years=0,
    ))
    assert out.net_future_value == 2500
    assert out.real_value == 2500
    assert out.tax_paid == 0


def test_zero_yield_only_inflation_erodes():
    out = calculate_investment(InvestmentInput(
        principal=5000, annual_yield_pct=0, tax_rate_pct=26, inflation_pct=2, years=5,
    ))
    assert out.net_future_value == 5000
    assert out.tax_paid == 0
    assert out.real_value == pytest.approx(5000 / 1.02 ** 5)


def test_negative_yield_gives_negative_tax():
    out = calculate_investment(InvestmentInput(
        principal=10000, annual_yield_pct=-5, tax_rate_pct=20, inflation_pct=2, years=5,
    ))
    gross = 10000 * 0.95 ** 5
    assert out.tax_paid < 0
    assert out.net_future_value == pytest.approx(gross - out.tax_paid)
    assert out.net_future_value < 10000


def test_zero_principal():
    out = calculate_investment(InvestmentInput(
        principal=0, annual_yield_pct=7, tax_rate_pct=26, inflation_pct=2, years=10,
    ))
    assert out.net_future_value == 0
    assert out.real_value == 0
    assert out.tax_paid == 0


def test_negative_years_discounts_backwards():
    out = calculate_investment(InvestmentInput(
        principal=1000, annual_yield_pct=10, tax_rate_pct=0, inflation_pct=0, years=-2,
    ))
    assert out.net_future_value == pytest.approx(1000 / 1.1 ** 2)
    assert out.years == -2


def test_total_inflation_wipeout_is_non_finite():
    out = calculate_investment(InvestmentInput(
        principal=1000, annual_yield_pct=5, tax_rate_pct=10, inflation_pct=-100, years=3,
    ))
    assert math.isinf(out.real_value)
