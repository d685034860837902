"""Command line interface for OCC ticker handling and contract lookups."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Sequence

from .exceptions import OptionsTickerFormatError, PolygonError, PolygonValidationError
from .models.tickers import OptionsTicker, OptionsTickerBuilder, OptionType
from .services.client import PolygonClient

LOG_DIR = Path("logs/polygon_rest")

LOGGER = logging.getLogger("polygon_rest.cli")

EXIT_OK = 0
EXIT_API_FAILURE = 1
EXIT_INVALID_INPUT = 2

COMMANDS = ("ticker:parse", "ticker:build", "contract")


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Expected a YYYY-MM-DD date") from exc


def _parse_strike(raw: str) -> Decimal:
    try:
        strike = Decimal(raw)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Invalid strike price: {raw!r}") from exc
    if not strike.is_finite():
        raise argparse.ArgumentTypeError(f"Invalid strike price: {raw!r}")
    return strike


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polygon_rest",
        description="Parse and build OCC options tickers, or look up a contract on Polygon.io",
    )
    parser.add_argument("command", choices=COMMANDS, help="Command to execute")
    parser.add_argument("symbol", nargs="?", help="OCC options ticker, e.g. O:SPY251219C00650000")
    parser.add_argument("--json", action="store_true", help="Print parsed fields as JSON")
    parser.add_argument("--underlying", type=str, help="Underlying symbol for ticker:build")
    parser.add_argument("--expiration", type=_parse_date, help="Expiration date (YYYY-MM-DD) for ticker:build")
    side = parser.add_mutually_exclusive_group()
    side.add_argument("--call", dest="option_type", action="store_const", const=OptionType.CALL)
    side.add_argument("--put", dest="option_type", action="store_const", const=OptionType.PUT)
    parser.add_argument("--strike", type=_parse_strike, help="Strike price for ticker:build")
    parser.add_argument("--env", type=str, default=None, help="Configuration environment (default: POLYGON_ENV or dev)")
    return parser


def _configure_logging() -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(LOG_DIR / "cli.log", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("polygon_rest")
    if not any(isinstance(existing, logging.FileHandler) for existing in root.handlers):
        root.setLevel(logging.INFO)
        root.addHandler(handler)
    logging.basicConfig(level=logging.WARNING)


def _ticker_fields(ticker: OptionsTicker) -> dict:
    return {
        "ticker": ticker.serialize(),
        "underlying": ticker.underlying,
        "expiration": ticker.expiration.isoformat(),
        "type": ticker.option_type.value,
        "strike": format(ticker.strike.normalize(), "f"),
    }


def _run_parse(args: argparse.Namespace) -> int:
    try:
        ticker = OptionsTicker.parse(args.symbol)
    except OptionsTickerFormatError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT

    fields = _ticker_fields(ticker)
    if args.json:
        print(json.dumps(fields, indent=2))
    else:
        for key, value in fields.items():
            print(f"{key:<11}{value}")
    return EXIT_OK


def _run_build(args: argparse.Namespace) -> int:
    builder = OptionsTickerBuilder()
    try:
        if args.underlying is not None:
            builder.with_underlying(args.underlying)
        if args.expiration is not None:
            builder.with_expiration(args.expiration)
        if args.option_type is not None:
            builder.with_type(args.option_type)
        if args.strike is not None:
            builder.with_strike(args.strike)
        print(builder.build())
    except (PolygonError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT
    return EXIT_OK


def _run_contract(args: argparse.Namespace) -> int:
    try:
        ticker = OptionsTicker.parse(args.symbol)
    except OptionsTickerFormatError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT

    LOGGER.info("Fetching contract details for %s", ticker)
    try:
        with PolygonClient.from_settings(env=args.env) as client:
            response = client.options.get_contract_details(options_ticker=ticker)
    except PolygonValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (PolygonError, FileNotFoundError) as exc:
        LOGGER.error("Contract lookup failed for %s: %s", ticker, exc)
        print(str(exc), file=sys.stderr)
        return EXIT_API_FAILURE

    contract = response.results
    if contract is None:
        print(f"No contract details returned for {ticker}.")
        return EXIT_API_FAILURE
    print(json.dumps(contract.model_dump(exclude_none=True), indent=2))
    return EXIT_OK


def run_from_args(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in ("ticker:parse", "contract") and not args.symbol:
        parser.error(f"{args.command} requires a SYMBOL argument")

    if args.command == "ticker:parse":
        return _run_parse(args)
    if args.command == "ticker:build":
        return _run_build(args)
    return _run_contract(args)


def main(argv: Sequence[str] | None = None) -> int:
    _configure_logging()
    return run_from_args(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
