from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from finz.utils.calc_engine import (
    calculate_investment, calculate_loan, calculate_savings,
    calculate_retirement, convert_currency, allocate_budget,
)
from finz.utils.calc_models import (
    InvestmentInput, LoanInput, SavingsInput, RetirementInput,
    CurrencyInput, ConversionError, BudgetInput,
)
from finz.utils.logging import get_logger

logger = get_logger("calc_tools")


class FinzError(Exception):
    pass


class UnknownCommand(FinzError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


# CLI flag name -> model field, per command. Flags with dashes arrive with
# underscores (argparse dest), both spellings are accepted.
_ALIASES: Dict[str, Dict[str, str]] = {
    "invest": {
        "initial": "principal",
        "yield": "annual_yield_pct",
        "tax": "tax_rate_pct",
        "inflation": "inflation_pct",
    },
    "loan": {
        "amount": "principal",
        "rate": "annual_rate_pct",
        "monthly": "include_monthly_schedule",
    },
    "savings": {
        "monthly": "monthly_deposit",
        "yield": "annual_yield_pct",
        "inflation": "inflation_pct",
    },
    "retirement": {
        "age": "current_age",
        "retire_age": "retirement_age",
        "retire-age": "retirement_age",
        "savings": "current_savings",
        "monthly": "monthly_contribution",
        "withdrawal": "withdrawal_rate_pct",
        "yield": "annual_yield_pct",
        "inflation": "inflation_pct",
    },
    "currency": {
        "from": "from_code",
        "to": "to_code",
    },
    "budget": {},
}


def _canonical(command: str, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    # canonical names win over aliases when both are present
    p = dict(payload or {})
    for alias, field in _ALIASES[command].items():
        if alias in p:
            value = p.pop(alias)
            p.setdefault(field, value)
    return p


def tool_calculate_investment(payload: Dict[str, Any]) -> Dict[str, Any]:
    inp = InvestmentInput(**_canonical("invest", payload))
    return calculate_investment(inp).model_dump()


def tool_calculate_loan(payload: Dict[str, Any]) -> Dict[str, Any]:
    inp = LoanInput(**_canonical("loan", payload))
    return calculate_loan(inp).model_dump()


def tool_calculate_savings(payload: Dict[str, Any]) -> Dict[str, Any]:
    inp = SavingsInput(**_canonical("savings", payload))
    return calculate_savings(inp).model_dump()


def tool_calculate_retirement(payload: Dict[str, Any]) -> Dict[str, Any]:
    inp = RetirementInput(**_canonical("retirement", payload))
    return calculate_retirement(inp).model_dump()


def tool_convert_currency(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Returns the result dump on success. On failure returns the error dump,
    recognisable by its `kind` key:
      {"kind": "unsupported_source_currency", "code": "CHF", "message": "..."}
    """
    inp = CurrencyInput(**_canonical("currency", payload))
    out = convert_currency(inp)
    if isinstance(out, ConversionError):
        logger.info("conversion failed kind=%s code=%s", out.kind, out.code)
    return out.model_dump()


def tool_allocate_budget(payload: Dict[str, Any]) -> Dict[str, Any]:
    inp = BudgetInput(**_canonical("budget", payload))
    return allocate_budget(inp).model_dump()


COMMANDS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "invest": tool_calculate_investment,
    "loan": tool_calculate_loan,
    "savings": tool_calculate_savings,
    "retirement": tool_calculate_retirement,
    "currency": tool_convert_currency,
    "budget": tool_allocate_budget,
}


def is_conversion_error(out: Dict[str, Any]) -> bool:
    return "kind" in out


def run_command(command: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    tool = COMMANDS.get(command)
    if tool is None:
        raise UnknownCommand(command)
    logger.debug("dispatch command=%s fields=%s", command, sorted((payload or {}).keys()))
    return tool(payload)
