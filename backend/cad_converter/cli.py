"""Command-line entry point for CAD currency conversion."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import NoReturn, Sequence

from .config import get_settings
from .core.logging import setup_logging
from .currencies import REQUIRED_CURRENCY, UnsupportedPairError, normalize_code, supported_codes_text, validate_pair
from .fx import convert, quantize_amount
from .models import ConversionRequest, ConversionResult
from .providers.valet import ValetClient
from .schemas import render_result

logger = logging.getLogger(__name__)

PROG = "fx-convert"


class UsageError(Exception):
    """Raised for arguments the caller can fix."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog=PROG,
        usage=f"{PROG} source_currency_value source_currency target_currency [exchange_date]",
        description="Convert an amount to or from CAD using Bank of Canada exchange rates.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Both the source and target currency must be ISO currency codes from the following list:\n"
            f"   {supported_codes_text()}\n"
            f"One of the currencies MUST be {REQUIRED_CURRENCY}\n"
            "\n"
            "Exchange dates must be provided in the format YYYY-MM-DD\n"
            "\n"
            f"Example 1: {PROG} 123.45 CAD USD\n"
            f"Example 2: {PROG} 123.45 CAD USD 2020-02-02"
        ),
    )
    parser.add_argument("amount", help="amount in the source currency")
    parser.add_argument("source", help="source ISO currency code")
    parser.add_argument("target", help="target ISO currency code")
    parser.add_argument("exchange_date", nargs="?", help="YYYY-MM-DD, defaults to today")
    return parser


def parse_request(argv: Sequence[str], today: date | None = None) -> ConversionRequest:
    """Validate ``argv`` and build a request; raises ``UsageError``."""

    if len(argv) < 3 and not any(arg in ("-h", "--help") for arg in argv):
        raise UsageError("Not enough arguments were provided")
    args = build_parser().parse_args(list(argv))

    source = normalize_code(args.source)
    target = normalize_code(args.target)
    try:
        validate_pair(source, target)
    except UnsupportedPairError as exc:
        raise UsageError(str(exc)) from exc

    try:
        amount: Decimal = quantize_amount(args.amount)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc

    if args.exchange_date is None:
        exchange_date = today or date.today()
    else:
        try:
            exchange_date = datetime.strptime(args.exchange_date, "%Y-%m-%d").date()
        except ValueError as exc:
            raise UsageError(f"Invalid exchange date: {args.exchange_date!r}") from exc

    return ConversionRequest(amount=amount, source=source, target=target, exchange_date=exchange_date)


async def run_conversion(request: ConversionRequest, client: ValetClient | None = None) -> ConversionResult:
    """Look up the rate for ``request`` and apply it."""

    client = client or ValetClient()
    observation = await client.latest_observation(request.source, request.target, request.exchange_date)
    return convert(request, observation)


def print_help_and_exit(message: str | None = None) -> NoReturn:
    if message is not None:
        print(f"Error: {message}")
        print()
    build_parser().print_help()
    sys.exit(1)


def main(argv: Sequence[str] | None = None, client: ValetClient | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.debug("Settings: %s", settings.dict_for_logging())

    try:
        request = parse_request(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        print_help_and_exit(str(exc))

    logger.info(
        "Converting %s %s to %s on %s",
        request.amount,
        request.source,
        request.target,
        request.exchange_date,
    )
    result = asyncio.run(run_conversion(request, client))
    print(render_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
