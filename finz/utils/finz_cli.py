from __future__ import annotations

import argparse
import json
import sys
import uuid
from typing import List, Optional

from finz.core.config import SETTINGS
from finz.tools.calc_tools import COMMANDS, UnknownCommand, is_conversion_error, run_command
from finz.utils.fx_rates import supported_currencies
from finz.utils.logging import get_logger, set_log_context, setup_logging
from finz.utils.report_format import FORMATTERS

logger = get_logger("finz_cli")

USAGE = """Finz - Financial Calculator CLI

Usage:
  finz <command> [options]

Available Commands:
  invest      - Calculate investment growth with taxes and inflation
  loan        - Calculate loan or mortgage payments
  savings     - Calculate savings with regular deposits
  retirement  - Calculate retirement savings and withdrawals
  currency    - Convert between currencies
  budget      - Allocate budget based on percentages
  help        - Show this help message

Run 'finz <command> --help' for more information on a command."""


def print_usage() -> None:
    print(USAGE)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="finz", description="Financial calculator", add_help=False)
    sub = p.add_subparsers(dest="command", required=True)

    inv = sub.add_parser("invest", help="Calculate investment growth with taxes and inflation")
    inv.add_argument("--initial", type=float, default=10000, help="Initial investment amount")
    inv.add_argument("--yield", type=float, default=7.0, help="Annual yield in percent (e.g., 7)")
    inv.add_argument("--tax", type=float, default=26.0, help="Tax rate on gains in percent")
    inv.add_argument("--inflation", type=float, default=2.0, help="Annual inflation rate in percent")
    inv.add_argument("--years", type=int, default=10, help="Investment duration in years")

    ln = sub.add_parser("loan", help="Calculate loan or mortgage payments")
    ln.add_argument("--amount", type=float, default=100000, help="Loan amount")
    ln.add_argument("--rate", type=float, default=4.5, help="Annual interest rate in percent")
    ln.add_argument("--years", type=int, default=30, help="Loan term in years")
    ln.add_argument("--monthly", action=argparse.BooleanOptionalAction, default=True,
                    help="Show monthly payment breakdown")

    sv = sub.add_parser("savings", help="Calculate savings with regular deposits")
    sv.add_argument("--initial", type=float, default=1000, help="Initial deposit amount")
    sv.add_argument("--monthly", type=float, default=100, help="Monthly deposit amount")
    sv.add_argument("--yield", type=float, default=3.0, help="Annual yield in percent")
    sv.add_argument("--inflation", type=float, default=2.0, help="Annual inflation rate in percent")
    sv.add_argument("--years", type=int, default=10, help="Savings duration in years")

    rt = sub.add_parser("retirement", help="Calculate retirement savings and withdrawals")
    rt.add_argument("--age", type=int, default=30, help="Current age")
    rt.add_argument("--retire-age", type=int, default=65, help="Retirement age")
    rt.add_argument("--savings", type=float, default=50000, help="Current retirement savings")
    rt.add_argument("--monthly", type=float, default=500, help="Monthly contribution")
    rt.add_argument("--withdrawal", type=float, default=4.0, help="Annual withdrawal rate in percent")
    rt.add_argument("--yield", type=float, default=7.0, help="Annual investment yield in percent")
    rt.add_argument("--inflation", type=float, default=2.0, help="Annual inflation rate in percent")

    cx = sub.add_parser("currency", help="Convert between currencies")
    codes = ", ".join(supported_currencies())
    cx.add_argument("--amount", type=float, default=100, help="Amount to convert")
    cx.add_argument("--from", default="EUR", help=f"Source currency code ({codes})")
    cx.add_argument("--to", default="USD", help=f"Target currency code ({codes})")

    bd = sub.add_parser("budget", help="Allocate budget based on percentages")
    bd.add_argument("--income", type=float, default=3000, help="Monthly income")
    bd.add_argument("--housing", type=float, default=30, help="Housing percentage")
    bd.add_argument("--food", type=float, default=15, help="Food percentage")
    bd.add_argument("--transport", type=float, default=10, help="Transportation percentage")
    bd.add_argument("--utilities", type=float, default=5, help="Utilities percentage")
    bd.add_argument("--healthcare", type=float, default=5, help="Healthcare percentage")
    bd.add_argument("--debt", type=float, default=10, help="Debt repayment percentage")
    bd.add_argument("--savings", type=float, default=15, help="Savings percentage")
    bd.add_argument("--discretionary", type=float, default=10, help="Discretionary spending percentage")

    for sp in (inv, ln, sv, rt, cx, bd):
        sp.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    return p


def run(argv: List[str]) -> int:
    if not argv:
        print_usage()
        return 1

    command = argv[0]
    if command in ("help", "-h", "--help"):
        print_usage()
        return 0

    set_log_context(run_id=uuid.uuid4().hex[:8], command=command)

    if command not in COMMANDS:
        # checked before argparse, which would exit 2 with its own message
        print(UnknownCommand(command))
        print_usage()
        return 1

    args = build_parser().parse_args(argv)
    payload = vars(args)
    as_json = payload.pop("json")
    payload.pop("command")

    out = run_command(command, payload)
    logger.debug("result fields=%s", sorted(out.keys()))

    if command == "currency" and is_conversion_error(out):
        print(out["message"])
        return 1

    if as_json:
        print(json.dumps(out, indent=2))
    else:
        print(FORMATTERS[command](out, SETTINGS.currency_symbol))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    setup_logging(SETTINGS.log_level)
    rc = run(list(sys.argv[1:] if argv is None else argv))
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
