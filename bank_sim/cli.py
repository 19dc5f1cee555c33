"""Command line entry point: ``bank-sim``."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from decimal import Decimal
from typing import Sequence

from bank_sim.config import LOG_FORMATS, OUTPUT_FORMATS, SimulationConfig
from bank_sim.exceptions import ConfigurationError
from bank_sim.logging import setup_logging
from bank_sim.scenarios import BankSimulationScenario
from bank_sim.sinks import ConsoleSink

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser(defaults: SimulationConfig) -> argparse.ArgumentParser:
    """Argument parser whose defaults come from ``defaults``."""
    parser = argparse.ArgumentParser(
        prog="bank-sim",
        description="Simulate random transactions and transfers between bank accounts",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=defaults.num_accounts,
        help=f"Number of accounts to create (default: {defaults.num_accounts})",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=defaults.transactions_per_account,
        help=f"Transactions per account (default: {defaults.transactions_per_account})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument("--min-balance", type=Decimal, default=defaults.min_initial_balance)
    parser.add_argument("--max-balance", type=Decimal, default=defaults.max_initial_balance)
    parser.add_argument("--min-amount", type=Decimal, default=defaults.min_transaction_amount)
    parser.add_argument("--max-amount", type=Decimal, default=defaults.max_transaction_amount)
    parser.add_argument(
        "--years-back",
        type=int,
        default=defaults.years_back,
        help=f"Opening dates fall within this many years (default: {defaults.years_back})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=defaults.workers,
        help="Threads used for the transaction phase (default: 1)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=defaults.output_format,
        help="Report format on stdout",
    )
    parser.add_argument("--log-level", type=str, default=defaults.log_level)
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=defaults.log_format)
    parser.add_argument(
        "--skip-transfers",
        action="store_true",
        help="Skip the pairwise transfer phase",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    try:
        defaults = SimulationConfig.from_env()
    except ConfigurationError as exc:
        print(f"bank-sim: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    args = build_parser(defaults).parse_args(argv)
    config = replace(
        defaults,
        num_accounts=args.accounts,
        transactions_per_account=args.transactions,
        seed=args.seed,
        min_initial_balance=args.min_balance,
        max_initial_balance=args.max_balance,
        min_transaction_amount=args.min_amount,
        max_transaction_amount=args.max_amount,
        years_back=args.years_back,
        workers=args.workers,
        output_format=args.output_format,
        log_level=args.log_level,
        log_format=args.log_format,
        simulate_transfers=defaults.simulate_transfers and not args.skip_transfers,
    )

    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"bank-sim: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(config.log_level, config.log_format)
    logger.debug("Configuration: %s", config)

    scenario = BankSimulationScenario(config, sink=ConsoleSink(fmt=config.output_format))
    scenario.run()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
