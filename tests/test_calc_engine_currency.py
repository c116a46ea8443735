import pytest
from pydantic import ValidationError

from finz.utils.calc_engine import convert_currency
from finz.utils.calc_models import ConversionError, CurrencyInput, CurrencyResult
from finz.utils.fx_rates import RATES, supported_currencies


@pytest.mark.parametrize("src,dst,rate", [
    ("EUR", "USD", 1.09),
    ("USD", "JPY", 147.0),
    ("GBP", "EUR", 1.18),
    ("JPY", "GBP", 0.0053),
])
def test_table_conversions(src, dst, rate):
    out = convert_currency(CurrencyInput(amount=100, from_code=src, to_code=dst))
    assert isinstance(out, CurrencyResult)
    assert out.exchange_rate == rate
    assert out.converted_amount == pytest.approx(100 * rate)


def test_usd_to_jpy_golden():
    out = convert_currency(CurrencyInput(amount=50, from_code="USD", to_code="JPY"))
    assert out.converted_amount == 7350
    assert out.exchange_rate == 147.0


def test_cross_rates_are_not_inverses():
    assert RATES["EUR"]["USD"] * RATES["USD"]["EUR"] != 1


def test_lowercase_codes_are_normalised():
    out = convert_currency(CurrencyInput(amount=100, from_code="eur", to_code="usd"))
    assert out.from_code == "EUR"
    assert out.to_code == "USD"
    assert out.exchange_rate == 1.09


@pytest.mark.parametrize("code", ["EUR", "xyz", "Chf"])
def test_same_currency_bypasses_table(code):
    out = convert_currency(CurrencyInput(amount=42.5, from_code=code, to_code=code.lower()))
    assert isinstance(out, CurrencyResult)
    assert out.converted_amount == 42.5
    assert out.exchange_rate == 1.0


def test_unsupported_source_currency():
    out = convert_currency(CurrencyInput(amount=100, from_code="chf", to_code="EUR"))
    assert isinstance(out, ConversionError)
    assert out.kind == "unsupported_source_currency"
    assert out.code == "CHF"
    assert out.message == "unsupported source currency: CHF"


def test_unsupported_target_currency():
    out = convert_currency(CurrencyInput(amount=100, from_code="EUR", to_code="CHF"))
    assert isinstance(out, ConversionError)
    assert out.kind == "unsupported_target_currency"
    assert out.code == "CHF"
    assert out.message == "unsupported target currency: CHF"


def test_zero_amount():
    out = convert_currency(CurrencyInput(amount=0, from_code="GBP", to_code="JPY"))
    assert out.converted_amount == 0
    assert out.exchange_rate == 188.0


def test_rate_table_is_read_only():
    with pytest.raises(TypeError):
        RATES["EUR"]["USD"] = 2.0  # type: ignore[index]
    with pytest.raises(TypeError):
        RATES["CHF"] = {}  # type: ignore[index]
    assert supported_currencies() == ["EUR", "GBP", "JPY", "USD"]


def test_error_is_immutable():
    err = ConversionError(kind="unsupported_source_currency", code="CHF")
    with pytest.raises(ValidationError):
        err.code = "EUR"
