from __future__ import annotations

from typing import Any, Dict, List

# Renders the dict dumps produced by finz.tools.calc_tools as terminal text.


def _money(sym: str, v: float) -> str:
    return f"{sym}{v:.2f}"


def format_investment(r: Dict[str, Any], sym: str = "€") -> str:
    return "\n".join([
        f"Initial amount:        {_money(sym, r['principal'])}",
        f"Nominal final value:   {_money(sym, r['net_future_value'])}",
        f"Real final value:      {_money(sym, r['real_value'])}",
        f"Total tax paid:        {_money(sym, r['tax_paid'])}",
        f"Total years:           {r['years']}",
    ])


def format_loan(r: Dict[str, Any], sym: str = "€") -> str:
    lines = [
        f"Loan amount:           {_money(sym, r['principal'])}",
        f"Monthly payment:       {_money(sym, r['monthly_payment'])}",
        f"Total paid:            {_money(sym, r['total_paid'])}",
        f"Total interest:        {_money(sym, r['total_interest'])}",
        f"Loan term:             {r['years']} years ({r['number_of_payments']} payments)",
    ]

    schedule: List[Dict[str, Any]] = r.get("monthly_schedule") or []
    if schedule:
        lines.append("")
        lines.append("Monthly Payment Breakdown:")
        lines.append("Month\tPayment\t\tPrincipal\tInterest\tRemaining")
        for row in schedule:
            lines.append(
                f"{row['month']}\t{_money(sym, row['payment'])}\t\t"
                f"{_money(sym, row['principal_portion'])}\t\t"
                f"{_money(sym, row['interest_portion'])}\t\t"
                f"{_money(sym, row['remaining_balance'])}"
            )
        lines.append("...")
    return "\n".join(lines)


def format_savings(r: Dict[str, Any], sym: str = "€") -> str:
    return "\n".join([
        f"Initial deposit:       {_money(sym, r['initial'])}",
        f"Monthly deposit:       {_money(sym, r['monthly_deposit'])}",
        f"Nominal final balance: {_money(sym, r['future_value'])}",
        f"Real final balance:    {_money(sym, r['real_future_value'])}",
        f"Total deposits:        {_money(sym, r['total_deposits'])}",
        f"Interest earned:       {_money(sym, r['interest_earned'])}",
        f"Savings period:        {r['years']} years ({r['number_of_months']} months)",
    ])


def format_retirement(r: Dict[str, Any], sym: str = "€") -> str:
    return "\n".join([
        f"Current age:           {r['current_age']}",
        f"Retirement age:        {r['retirement_age']}",
        f"Years to retirement:   {r['years_to_retirement']}",
        f"Retirement savings:    {_money(sym, r['retirement_savings'])}",
        f"Annual withdrawal:     {_money(sym, r['annual_withdrawal'])}",
        f"Monthly withdrawal:    {_money(sym, r['monthly_withdrawal'])}",
        f"Inflation-adjusted monthly withdrawal: {_money(sym, r['real_monthly_withdrawal'])}",
    ])


def format_currency(r: Dict[str, Any], sym: str = "€") -> str:
    # amounts carry their own codes here, no symbol
    return "\n".join([
        f"{r['amount']:.2f} {r['from_code']} = {r['converted_amount']:.2f} {r['to_code']}",
        f"Exchange rate: 1 {r['from_code']} = {r['exchange_rate']:.4f} {r['to_code']}",
    ])


def format_budget(r: Dict[str, Any], sym: str = "€") -> str:
    lines: List[str] = []
    if r.get("warning"):
        lines.append(r["warning"])
        lines.append("")

    lines.append(f"Monthly Income: {_money(sym, r['income'])}")
    lines.append("")
    lines.append("Budget Allocation:")
    for c in r["categories"]:
        label = c["name"] + ":"
        lines.append(f"{label:<15} {_money(sym, c['amount'])} ({c['percentage']:.1f}%)")

    lines.append("")
    lines.append(f"Total:         {_money(sym, r['total_amount'])} ({r['total_percentage']:.1f}%)")
    return "\n".join(lines)


FORMATTERS = {
    "invest": format_investment,
    "loan": format_loan,
    "savings": format_savings,
    "retirement": format_retirement,
    "currency": format_currency,
    "budget": format_budget,
}
