from __future__ import annotations

from finz.tools.calc_tools import (
    tool_calculate_investment, tool_calculate_loan, tool_calculate_savings,
    tool_calculate_retirement, tool_convert_currency, tool_allocate_budget,
)

def main():
    inv = tool_calculate_investment({"initial": "10000", "yield": "7", "tax": "26", "inflation": "2", "years": 10})
    print("Investment net:", round(inv["net_future_value"], 2), "real:", round(inv["real_value"], 2))

    loan = tool_calculate_loan({"amount": "100000", "rate": "4.5", "years": 30, "monthly": True})
    print("Loan payment:", round(loan["monthly_payment"], 2), "interest:", round(loan["total_interest"], 2))
    print("Balance after 12 months:", round(loan["monthly_schedule"][-1]["remaining_balance"], 2))

    sv = tool_calculate_savings({"initial": 1000, "monthly": 100, "yield": 3, "inflation": 2, "years": 10})
    print("Savings future value:", round(sv["future_value"], 2), "interest:", round(sv["interest_earned"], 2))

    rt = tool_calculate_retirement({
        "age": 30, "retire_age": 65, "savings": 50000, "monthly": 500,
        "withdrawal": 4, "yield": 7, "inflation": 2,
    })
    print("Retirement savings:", round(rt["retirement_savings"], 2), "monthly:", round(rt["monthly_withdrawal"], 2))

    for src, dst in (("EUR", "USD"), ("usd", "jpy"), ("CHF", "EUR")):
        cx = tool_convert_currency({"amount": 100, "from": src, "to": dst})
        if "kind" in cx:
            print("Currency error:", cx["message"])
        else:
            print("Currency:", cx["from_code"], "->", cx["to_code"], cx["converted_amount"])

    bd = tool_allocate_budget({
        "income": 3000, "housing": 30, "food": 15, "transport": 10, "utilities": 5,
        "healthcare": 5, "debt": 10, "savings": 15, "discretionary": 10,
    })
    for c in bd["categories"]:
        print("Budget:", c["name"], c["amount"])
    print("Budget warning:", bd["warning"])

if __name__ == "__main__":
    main()
